from application.event_flow.contracts import (
    EVENT_ISSUES,
    EVENT_PUSH,
    STATUS_ERROR,
    STATUS_IGNORED,
    STATUS_SKIPPED,
    STATUS_SUCCESS,
    EventFlowContext,
    EventFlowDependencies,
    EventFlowResult,
)
from application.event_flow.use_case import (
    run_event_flow,
    run_issue_workflow,
    run_push_workflow,
)

__all__ = [
    "EVENT_ISSUES",
    "EVENT_PUSH",
    "STATUS_ERROR",
    "STATUS_IGNORED",
    "STATUS_SKIPPED",
    "STATUS_SUCCESS",
    "EventFlowContext",
    "EventFlowDependencies",
    "EventFlowResult",
    "run_event_flow",
    "run_issue_workflow",
    "run_push_workflow",
]
