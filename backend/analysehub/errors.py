"""
Exceptions raised by data providers.
"""
from typing import Optional


class DataFetchError(Exception):
    """A collection could not be fetched, parsed or validated."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        message = super().__str__()
        if self.source:
            return f"{self.source}: {message}"
        return message
