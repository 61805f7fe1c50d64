__all__ = [
    "ApiSuiteError",
    "ConditionTimeoutError",
    "ConfigError",
    "ResponseAssertionError",
    "RunnerError",
    "UnknownEntityTypeError",
]


class ApiSuiteError(Exception):
    """Base exception for all apisuite errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ResponseAssertionError(ApiSuiteError, AssertionError):
    """Raised when a response does not meet a validator's expectation."""


class ConditionTimeoutError(ApiSuiteError, TimeoutError):
    """Raised when a polled condition does not become true in time."""

    def __init__(self, timeout_ms: float) -> None:
        super().__init__(f"Condition not met within {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class UnknownEntityTypeError(ApiSuiteError, ValueError):
    """Raised when test data is requested for an entity type with no fixture."""


class RunnerError(ApiSuiteError):
    """Raised when the test runner or report tooling fails."""


class ConfigError(ApiSuiteError):
    """Raised when settings cannot be loaded."""
