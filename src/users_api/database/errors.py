"""
Persistence-layer exceptions
"""

from typing import Optional


class DataAccessError(Exception):
    """Raised when the data store fails in a way callers cannot recover from"""

    def __init__(self, message: str, code: int = 500, sqlstate: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.sqlstate = sqlstate

    def __str__(self) -> str:
        return self.message
