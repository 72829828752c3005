from typing import Any

import requests

from application.ports import GatewayResult
from domain.models import (
    BranchCreationRequest,
    PullCreationRequest,
    PullRequestSummary,
    RepositoryMetadata,
    RepositoryRef,
)
from infrastructure.github.github_client import GitHubApiError, GitHubClient
from infrastructure.observability.logging_utils import safe_message


def _to_pull_request_summary(pull_request: dict[str, Any]) -> PullRequestSummary:
    head = pull_request.get("head") or {}
    return PullRequestSummary(
        head_label=head.get("label", ""),
        number=pull_request.get("number"),
        html_url=pull_request.get("html_url"),
    )


class GitHubRepositoryGateway:
    """RepositoryGateway backed by the GitHub REST API.

    Reads raise on failure; writes report failures through GatewayResult.
    """

    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    def get_repository(self, repository: RepositoryRef) -> RepositoryMetadata:
        data = self.client.get_repository(repository.owner, repository.name)
        return RepositoryMetadata(default_branch=data["default_branch"])

    def list_pull_requests(
        self,
        repository: RepositoryRef,
        head: str,
    ) -> list[PullRequestSummary]:
        pull_requests = self.client.list_pulls(repository.owner, repository.name, head)
        return [_to_pull_request_summary(pull_request) for pull_request in pull_requests]

    def create_reference(self, request: BranchCreationRequest) -> GatewayResult:
        try:
            self.client.create_ref(
                request.repository.owner,
                request.repository.name,
                request.ref,
                request.sha,
            )
        except (GitHubApiError, requests.RequestException) as error:
            return GatewayResult.failure(safe_message(str(error)))
        return GatewayResult.success(request.ref)

    def create_pull_request(self, request: PullCreationRequest) -> GatewayResult:
        try:
            pull_request = self.client.create_pull(
                request.repository.owner,
                request.repository.name,
                base=request.base,
                head=request.head,
                issue=request.issue_number,
                draft=request.draft,
            )
        except (GitHubApiError, requests.RequestException) as error:
            return GatewayResult.failure(safe_message(str(error)))
        return GatewayResult.success(_to_pull_request_summary(pull_request))
