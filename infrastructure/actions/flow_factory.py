from application.event_flow import EventFlowContext, EventFlowDependencies
from infrastructure.actions.context import ActionContext
from infrastructure.actions.inputs import ActionInputs
from infrastructure.github.github_client import GitHubClient
from infrastructure.github.repository_gateway import GitHubRepositoryGateway
from infrastructure.observability.workflow_observer import (
    observe_pull_requests,
    observe_workflow_step,
)


def build_github_client(inputs: ActionInputs) -> GitHubClient:
    return GitHubClient(
        token=inputs.token,
        api_url=inputs.api_url,
        timeout=inputs.request_timeout,
    )


def build_event_flow_context(
    inputs: ActionInputs,
    action_context: ActionContext,
) -> EventFlowContext:
    return EventFlowContext(
        event_name=action_context.event_name,
        repository=action_context.repository,
        name_pattern=inputs.name_pattern,
        sha=action_context.sha,
        ref=action_context.ref,
        issue=action_context.issue,
        debug=inputs.debug,
    )


def build_event_flow_dependencies(client: GitHubClient) -> EventFlowDependencies:
    return EventFlowDependencies(
        gateway=GitHubRepositoryGateway(client),
        observe_step=observe_workflow_step,
        observe_pull_requests=observe_pull_requests,
    )
