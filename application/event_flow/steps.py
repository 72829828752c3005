from application.event_flow.contracts import (
    STATUS_ERROR,
    STATUS_IGNORED,
    STATUS_SKIPPED,
    STATUS_SUCCESS,
    EventFlowContext,
    EventFlowDependencies,
    EventFlowResult,
)
from application.ports import GatewayResult
from domain.errors import MissingPayloadError
from domain.models import (
    BranchCreationRequest,
    IssueContext,
    PullCreationRequest,
    PullRequestSummary,
    RepositoryRef,
)


def require_issue_context(context: EventFlowContext) -> IssueContext:
    # The "issues" event promises an issue in the payload.
    if context.issue is None:
        raise MissingPayloadError(
            f"Event '{context.event_name}' was delivered without an issue in its payload"
        )
    return context.issue


def build_branch_creation_request(
    context: EventFlowContext,
    branch_name: str,
) -> BranchCreationRequest:
    return BranchCreationRequest(
        branch_name=branch_name,
        repository=context.repository,
        sha=context.sha,
    )


def build_head(repository: RepositoryRef, branch_name: str) -> str:
    return f"{repository.owner}:{branch_name}"


def find_existing_pull_requests(
    context: EventFlowContext,
    dependencies: EventFlowDependencies,
    head: str,
) -> list[PullRequestSummary]:
    pull_requests = dependencies.gateway.list_pull_requests(context.repository, head)
    if context.debug:
        dependencies.observe_pull_requests(pull_requests)
    return pull_requests


def create_pull_request_with_fallback(
    request: PullCreationRequest,
    dependencies: EventFlowDependencies,
) -> GatewayResult:
    """Open the pull request as a draft, retrying once as a regular pull request.

    Any failure of the draft attempt triggers the retry, not only a missing
    draft capability, so the first failure is reported to the step observer
    before the second call is issued.
    """
    draft_result = dependencies.gateway.create_pull_request(request)
    if draft_result.ok:
        return draft_result

    dependencies.observe_step(
        "create_pull_request",
        "fallback",
        detail=f"draft creation failed, retrying as non-draft: {draft_result.error}",
    )
    return dependencies.gateway.create_pull_request(request.as_non_draft())


def build_branch_success_result(
    request: BranchCreationRequest,
    issue_number: int,
) -> EventFlowResult:
    return EventFlowResult(
        status=STATUS_SUCCESS,
        message=f'Successfully created branch with name "{request.branch_name}"',
        branch=request.branch_name,
        issue_number=issue_number,
    )


def build_branch_failure_result(
    request: BranchCreationRequest,
    issue_number: int,
    error: str | None,
) -> EventFlowResult:
    message = (
        f'Error creating branch with repo "{request.repository}", '
        f'branchName "{request.branch_name}" and sha "{request.sha}": {error}'
    )
    return EventFlowResult(
        status=STATUS_ERROR,
        message=message,
        branch=request.branch_name,
        issue_number=issue_number,
        error=error,
    )


def build_ignored_result(branch_name: str) -> EventFlowResult:
    return EventFlowResult(
        status=STATUS_IGNORED,
        message="Branch name doesn't match name pattern, aborting peacefully...",
        branch=branch_name,
    )


def build_skipped_result(branch_name: str, issue_number: int) -> EventFlowResult:
    return EventFlowResult(
        status=STATUS_SKIPPED,
        message="Pull request already created, aborting peacefully...",
        branch=branch_name,
        issue_number=issue_number,
    )


def build_pull_request_success_result(
    branch_name: str,
    issue_number: int,
    pull_request: object | None,
) -> EventFlowResult:
    pull_request_url = None
    if isinstance(pull_request, PullRequestSummary):
        pull_request_url = pull_request.html_url
    return EventFlowResult(
        status=STATUS_SUCCESS,
        message=f"Successfully created PR for issue #{issue_number}",
        branch=branch_name,
        issue_number=issue_number,
        pull_request_url=pull_request_url,
    )


def build_pull_request_failure_result(
    error: str,
    *,
    branch_name: str | None = None,
    issue_number: int | None = None,
) -> EventFlowResult:
    return EventFlowResult(
        status=STATUS_ERROR,
        message=f"Error while creating PR: {error}",
        branch=branch_name,
        issue_number=issue_number,
        error=error,
    )
