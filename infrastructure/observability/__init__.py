from infrastructure.observability.logging_utils import (
    configure_logging,
    get_run_id,
    log_event,
    register_sensitive_values,
    safe_message,
    set_run_id,
)
from infrastructure.observability.workflow_observer import (
    format_pull_request_heads,
    observe_pull_requests,
    observe_workflow_step,
)

__all__ = [
    "configure_logging",
    "format_pull_request_heads",
    "get_run_id",
    "log_event",
    "observe_pull_requests",
    "observe_workflow_step",
    "register_sensitive_values",
    "safe_message",
    "set_run_id",
]
