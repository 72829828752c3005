from typing import Callable

from application.event_flow.contracts import (
    EVENT_ISSUES,
    EVENT_PUSH,
    STATUS_ERROR,
    UNSUPPORTED_EVENT_MESSAGE,
    EventFlowContext,
    EventFlowDependencies,
    EventFlowResult,
)
from application.event_flow.steps import (
    build_branch_creation_request,
    build_branch_failure_result,
    build_branch_success_result,
    build_head,
    build_ignored_result,
    build_pull_request_failure_result,
    build_pull_request_success_result,
    build_skipped_result,
    create_pull_request_with_fallback,
    find_existing_pull_requests,
    require_issue_context,
)
from domain.models import PullCreationRequest
from domain.naming import branch_name_from_ref, extract_issue_number, render_branch_name


def run_issue_workflow(
    context: EventFlowContext,
    dependencies: EventFlowDependencies,
) -> EventFlowResult:
    branch_name = None
    try:
        dependencies.observe_step("render_branch", "start")
        issue = require_issue_context(context)
        branch_name = render_branch_name(context.name_pattern, issue.number)
        dependencies.observe_step("render_branch", "success", detail=branch_name)

        dependencies.observe_step("create_branch", "start")
        request = build_branch_creation_request(context, branch_name)
        result = dependencies.gateway.create_reference(request)
        if not result.ok:
            dependencies.observe_step("create_branch", "error", detail=result.error)
            return build_branch_failure_result(request, issue.number, result.error)

        dependencies.observe_step("create_branch", "success", detail=request.ref)
        return build_branch_success_result(request, issue.number)
    except Exception as error:
        dependencies.observe_step("finalize", "error", detail=str(error))
        return EventFlowResult(
            status=STATUS_ERROR,
            message=str(error),
            branch=branch_name,
            error=str(error),
        )


def run_push_workflow(
    context: EventFlowContext,
    dependencies: EventFlowDependencies,
) -> EventFlowResult:
    branch_name = None
    issue_number = None
    try:
        dependencies.observe_step("validate_branch", "start")
        branch_name = branch_name_from_ref(context.ref)
        issue_number = extract_issue_number(branch_name, context.name_pattern)
        if issue_number is None:
            dependencies.observe_step("validate_branch", "success", detail=f"ignored {branch_name}")
            return build_ignored_result(branch_name)
        dependencies.observe_step("validate_branch", "success", detail=branch_name)

        dependencies.observe_step("fetch_repository", "start")
        repository = dependencies.gateway.get_repository(context.repository)
        dependencies.observe_step(
            "fetch_repository",
            "success",
            detail=f"default_branch={repository.default_branch}",
        )

        dependencies.observe_step("list_pull_requests", "start")
        head = build_head(context.repository, branch_name)
        pull_requests = find_existing_pull_requests(context, dependencies, head)
        dependencies.observe_step(
            "list_pull_requests",
            "success",
            detail=f"head={head} count={len(pull_requests)}",
        )
        if pull_requests:
            return build_skipped_result(branch_name, issue_number)

        dependencies.observe_step("create_pull_request", "start")
        request = PullCreationRequest(
            repository=context.repository,
            base=repository.default_branch,
            head=head,
            draft=True,
            issue_number=issue_number,
        )
        result = create_pull_request_with_fallback(request, dependencies)
        if not result.ok:
            dependencies.observe_step("create_pull_request", "error", detail=result.error)
            return build_pull_request_failure_result(
                result.error or "pull request creation failed",
                branch_name=branch_name,
                issue_number=issue_number,
            )

        dependencies.observe_step("create_pull_request", "success", detail=f"issue=#{issue_number}")
        return build_pull_request_success_result(branch_name, issue_number, result.value)
    except Exception as error:
        dependencies.observe_step("finalize", "error", detail=str(error))
        return build_pull_request_failure_result(
            str(error),
            branch_name=branch_name,
            issue_number=issue_number,
        )


_WORKFLOWS: dict[str, Callable[[EventFlowContext, EventFlowDependencies], EventFlowResult]] = {
    EVENT_ISSUES: run_issue_workflow,
    EVENT_PUSH: run_push_workflow,
}


def run_event_flow(
    context: EventFlowContext,
    dependencies: EventFlowDependencies,
) -> EventFlowResult:
    workflow = _WORKFLOWS.get(context.event_name)
    if workflow is None:
        dependencies.observe_step("dispatch", "error", detail=f"event={context.event_name}")
        return EventFlowResult(
            status=STATUS_ERROR,
            message=UNSUPPORTED_EVENT_MESSAGE,
            error=f"unsupported event: {context.event_name}",
        )

    dependencies.observe_step("dispatch", "success", detail=f"event={context.event_name}")
    return workflow(context, dependencies)
