"""Exceptions raised by the goal planner. All of them abort the whole search."""


class PlannerError(Exception):
    """Base class for planning failures."""


class OracleError(PlannerError):
    """An oracle call failed or returned nothing usable."""


class OracleResponseError(OracleError):
    """An oracle answered, but the answer could not be parsed into the expected shape."""

    def __init__(self, message: str, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = raw_response


class OracleTimeoutError(OracleError):
    """An oracle call exceeded the configured per-call timeout."""

    def __init__(self, timeout_s: float):
        super().__init__(f"Oracle call timed out after {timeout_s}s")
        self.timeout_s = timeout_s


class PlanCancelledError(PlannerError):
    """The search was cancelled through its cancel token."""
