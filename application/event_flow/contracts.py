from dataclasses import dataclass
from typing import Callable

from application.ports import RepositoryGateway
from domain.models import IssueContext, PullRequestSummary, RepositoryRef


EVENT_ISSUES = "issues"
EVENT_PUSH = "push"

STATUS_SUCCESS = "success"
STATUS_IGNORED = "ignored"
STATUS_SKIPPED = "skipped"
STATUS_ERROR = "error"

UNSUPPORTED_EVENT_MESSAGE = (
    'This action was not run using an "issue" or "push" event, please supply at least '
    "one of these events for this action to work."
)


def _noop_observe_step(_: str, __: str, detail: str | None = None) -> None:
    return None


def _noop_observe_pull_requests(_: list[PullRequestSummary]) -> None:
    return None


@dataclass(frozen=True)
class EventFlowContext:
    event_name: str
    repository: RepositoryRef
    name_pattern: str
    sha: str
    ref: str
    issue: IssueContext | None = None
    debug: bool = False


@dataclass(frozen=True)
class EventFlowDependencies:
    gateway: RepositoryGateway
    observe_step: Callable[[str, str, str | None], None] = _noop_observe_step
    observe_pull_requests: Callable[[list[PullRequestSummary]], None] = _noop_observe_pull_requests


@dataclass(frozen=True)
class EventFlowResult:
    status: str
    message: str
    branch: str | None = None
    issue_number: int | None = None
    pull_request_url: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == STATUS_ERROR
