"""
Errors raised by the metrics engine
"""


class MetricsValidationError(ValueError):
    """Calculator input rejected before any computation"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class MissingField(MetricsValidationError):
    """A required input is absent, zero or negative"""

    def __init__(self, field: str):
        super().__init__(field, f"Field '{field}' is required and must be greater than zero")


class InvalidValue(MetricsValidationError):
    """An input is present but not acceptable"""

    def __init__(self, field: str, reason: str):
        self.reason = reason
        super().__init__(field, f"Invalid value for '{field}': {reason}")


class DivisionUndefined(ArithmeticError):
    """A derived metric has no value because its divisor is zero"""

    def __init__(self, field: str = "cac"):
        self.field = field
        super().__init__(f"'{field}' is undefined when no sale is projected")
