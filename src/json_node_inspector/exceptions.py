"""Exception classes for the node inspector edit path.

Extraction, display normalization and path formatting never raise for
malformed rows.  Only the edit session rejects operations:

- InvalidFieldError: a field change names a key the working copy does not hold.
- NoPathError: save attempted on a node the store could not locate.
- EditStateError: an editing operation attempted while only viewing.

Failures raised by the document store while applying a patch are not wrapped;
they propagate to the caller unchanged.
"""

from __future__ import annotations

__all__ = ["EditStateError", "InspectorError", "InvalidFieldError", "NoPathError"]


class InspectorError(Exception):
    """Base class for node inspector errors."""


class InvalidFieldError(InspectorError, KeyError):
    """Raised when a field change targets a key absent from the working values.

    This is a caller bug: the presentation shell should only offer inputs for
    keys returned by ``get_working_fields()``.
    """

    def __init__(self, key: str, known: list[str] | None = None) -> None:
        self.key = key
        self.known = list(known or [])
        message = f"Unknown field {key!r}"
        if self.known:
            message += f"; editable fields are {self.known}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NoPathError(InspectorError):
    """Raised when saving a node that has no structural path.

    No patch is sent and the session stays in editing mode, so the panel
    must stay open.
    """

    def __init__(self, message: str = "Selected node has no path; cannot save") -> None:
        super().__init__(message)


class EditStateError(InspectorError):
    """Raised when an editing operation is attempted outside editing mode."""
