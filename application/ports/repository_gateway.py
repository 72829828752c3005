from dataclasses import dataclass
from typing import Protocol

from domain.models import (
    BranchCreationRequest,
    PullCreationRequest,
    PullRequestSummary,
    RepositoryMetadata,
    RepositoryRef,
)


@dataclass(frozen=True)
class GatewayResult:
    ok: bool
    value: object | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: object | None = None) -> "GatewayResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "GatewayResult":
        return cls(ok=False, error=error)


class RepositoryGateway(Protocol):
    def get_repository(self, repository: RepositoryRef) -> RepositoryMetadata:
        """Fetch repository metadata; raises on remote failure."""

    def list_pull_requests(
        self,
        repository: RepositoryRef,
        head: str,
    ) -> list[PullRequestSummary]:
        """List pull requests whose head is ``owner:branch``; raises on remote failure."""

    def create_reference(self, request: BranchCreationRequest) -> GatewayResult:
        """Create ``refs/heads/<branch>`` at the requested sha."""

    def create_pull_request(self, request: PullCreationRequest) -> GatewayResult:
        """Open a pull request for the issue linked in the request."""
