import logging

from domain.models import PullRequestSummary
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

_STEP_STATUS_LEVELS = {
    "error": logging.ERROR,
    "fallback": logging.WARNING,
}


def observe_workflow_step(step: str, status: str, detail: str | None = None) -> None:
    log_event(
        logger,
        _STEP_STATUS_LEVELS.get(status, logging.INFO),
        "workflow.step",
        step=step,
        status=status,
        detail=detail,
    )


def format_pull_request_heads(pull_requests: list[PullRequestSummary]) -> str:
    labels = '", "'.join(pull_request.head_label for pull_request in pull_requests)
    return f'Found pull requests for refs: "{labels}"'


def observe_pull_requests(pull_requests: list[PullRequestSummary]) -> None:
    logger.info(safe_message(format_pull_request_heads(pull_requests)))
