"""The error raised for invalid input, and its reporting."""

import sys
from typing import TextIO, Optional


class CubError(Exception):
    """An error with a message for the user and an exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def report_error(error: CubError, stream: Optional[TextIO] = None) -> int:
    """Write the error's message on its own line and return its status."""
    out = sys.stderr if stream is None else stream
    out.write(f"{error.message}\n")
    return error.status