"""Error reporting for failures that carry a result code."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)


def _describe(hr: int) -> str:
    return f"HRESULT 0x{hr & 0xFFFFFFFF:08X}"


class ComError(Exception):
    """A failed call with its result code and where it was raised."""

    def __init__(self, hr: int, message: str, file: str = "",
                 function: str = "", line: int = 0) -> None:
        self.hr = hr
        self.message = message
        self.file = file
        self.function = function
        self.line = line
        super().__init__(self.what)

    @property
    def what(self) -> str:
        return (
            f"Message: {self.message}\n{_describe(self.hr)}"
            f"\nFile: {self.file}\nFunction: {self.function}\nLine: {self.line}"
        )


def log_error(message: str | ComError, hr: int | None = None) -> str:
    """Report an error and return the text that was reported."""
    if isinstance(message, ComError):
        text = message.what
    else:
        text = f"Error: {message}"
        if hr is not None:
            text += "\n" + _describe(hr)
    _log.error("%s", text)
    return text