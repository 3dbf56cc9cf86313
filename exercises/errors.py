"""Exception types shared by the array exercises."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a sequence is too short for the requested operation."""

    def __init__(self, operation: str, required: int, got: int) -> None:
        self.operation = operation
        self.required = required
        self.got = got
        super().__init__(
            f"{operation} needs at least {required} element(s), got {got}"
        )
