"""Custom exceptions for crontext."""

class CrontextError(Exception):
    pass


class InvalidExpressionError(CrontextError):
    """Raised when an expression cannot be decoded."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid cron expression '{expression}': {reason}")


class InvalidFieldError(CrontextError):
    """Raised when a field position does not exist."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid field index: {index}")
