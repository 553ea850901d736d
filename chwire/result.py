"""Result of a statement that does not return rows."""

from __future__ import annotations

from typing import NoReturn


class NotSupportedError(Exception):
    """Raised for operations the server protocol does not provide."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not supported")
        self.operation = operation


class Result:
    """Execution result; the server reports neither insert ids nor row counts."""

    __slots__ = ()

    @staticmethod
    def _unsupported(operation: str) -> NoReturn:
        raise NotSupportedError(operation)

    def last_insert_id(self) -> int:
        """Always raises: the server does not report insert ids."""
        return self._unsupported("LastInsertId")

    def rows_affected(self) -> int:
        """Always raises: the server does not report affected row counts."""
        return self._unsupported("RowsAffected")