from .helper import ApiHelper, monotonic_ms
from .resilience import retry_request, wait_for_condition

__all__ = ["ApiHelper", "monotonic_ms", "retry_request", "wait_for_condition"]
