# Purpose: Error taxonomy for HTML -> PDF conversion.


from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for every failure raised by a conversion."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(f"{message} ({detail})" if detail else message)


class WriteError(ConversionError):
    """Temporary HTML or final PDF could not be written."""


class RenderError(ConversionError):
    """Engine could not load the document or export it."""


class CleanupError(ConversionError):
    """Temporary HTML could not be removed and nothing else went wrong."""


class ConversionTimeoutError(ConversionError, TimeoutError):
    """Engine did not signal completion within the allotted time."""


__all__ = [
    "ConversionError",
    "WriteError",
    "RenderError",
    "CleanupError",
    "ConversionTimeoutError",
]
