import logging
import sys

from dotenv import load_dotenv

from application.event_flow import run_event_flow
from domain.errors import ConfigurationError
from infrastructure.actions.context import load_action_context
from infrastructure.actions.flow_factory import (
    build_event_flow_context,
    build_event_flow_dependencies,
    build_github_client,
)
from infrastructure.actions.inputs import load_action_inputs
from infrastructure.actions.reporter import debug, report_result, set_failed
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    set_run_id,
)


load_dotenv()
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        inputs = load_action_inputs()
        register_sensitive_values(inputs.token)
        action_context = load_action_context()
    except ConfigurationError as error:
        configure_logging()
        log_event(logger, logging.ERROR, "action.configuration.failed", error=str(error))
        return set_failed(str(error))

    configure_logging(debug=inputs.debug)
    if action_context.run_id:
        set_run_id(action_context.run_id)

    flow_context = build_event_flow_context(inputs, action_context)
    log_event(
        logger,
        logging.INFO,
        "action.run.start",
        event_name=flow_context.event_name,
        repository=flow_context.repository.full_name,
        ref=flow_context.ref,
        sha=flow_context.sha,
    )
    if inputs.debug:
        debug(f"name_pattern={flow_context.name_pattern} issue={flow_context.issue}")

    github_client = build_github_client(inputs)
    try:
        result = run_event_flow(flow_context, build_event_flow_dependencies(github_client))
    finally:
        github_client.close()

    log_event(
        logger,
        logging.ERROR if result.failed else logging.INFO,
        "action.run.end",
        status=result.status,
        message=result.message,
        error=result.error,
    )
    return report_result(result)


if __name__ == "__main__":
    sys.exit(main())
