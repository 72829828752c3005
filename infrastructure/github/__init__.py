from infrastructure.github.github_client import GitHubApiError, GitHubClient
from infrastructure.github.repository_gateway import GitHubRepositoryGateway

__all__ = ["GitHubApiError", "GitHubClient", "GitHubRepositoryGateway"]
