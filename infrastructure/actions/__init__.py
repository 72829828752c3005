from infrastructure.actions.context import ActionContext, EventPayload, load_action_context
from infrastructure.actions.flow_factory import (
    build_event_flow_context,
    build_event_flow_dependencies,
    build_github_client,
)
from infrastructure.actions.inputs import ActionInputs, get_input, load_action_inputs
from infrastructure.actions.reporter import report_result, set_failed

__all__ = [
    "ActionContext",
    "ActionInputs",
    "EventPayload",
    "build_event_flow_context",
    "build_event_flow_dependencies",
    "build_github_client",
    "get_input",
    "load_action_context",
    "load_action_inputs",
    "report_result",
    "set_failed",
]
