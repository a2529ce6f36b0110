"""Errors raised by the calculation engine."""


class CalculationError(Exception):
    """A computation would be undefined or economically meaningless.

    ``message_key`` is an opaque key the caller maps to a localized message.
    """

    def __init__(self, message_key: str) -> None:
        super().__init__(message_key)
        self.message_key = message_key


class UnknownCalculatorError(KeyError):
    """No calculator is registered under the requested key."""
