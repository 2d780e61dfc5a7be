"""Errors raised by the analytics engine."""


class EmptyInputError(ValueError):
    """Raised when statistics are requested for an empty reading set."""

    def __init__(self, operation: str):
        super().__init__(f"No records available for {operation}")
        self.operation = operation
