import logging
from typing import Any

import requests

from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GitHubApiError(RuntimeError):
    """Raised when the GitHub REST API answers with an error status."""

    def __init__(self, operation: str, status_code: int, details: str) -> None:
        self.operation = operation
        self.status_code = status_code
        self.details = details
        super().__init__(
            safe_message(f"GitHub {operation} failed ({status_code}): {details}")
        )


class GitHubClient:
    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def _repo_url(self, owner: str, repo: str) -> str:
        return f"{self.api_url}/repos/{owner}/{repo}"

    def _handle_response(self, response: requests.Response, operation: str) -> Any:
        if response.status_code >= 400:
            error_details = response.text
            try:
                error_payload = response.json()
                api_message = error_payload.get("message", "")
                api_errors = error_payload.get("errors", "")
                error_details = f"{api_message} | errors={api_errors}"
            except (ValueError, AttributeError):
                pass
            safe_error_details = safe_message(error_details)
            log_event(
                logger,
                logging.ERROR,
                "github.request_failed",
                operation=operation,
                status_code=response.status_code,
                details=safe_error_details,
            )
            raise GitHubApiError(operation, response.status_code, safe_error_details)
        return response.json()

    def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        log_event(logger, logging.INFO, "github.repo.get", repository=f"{owner}/{repo}")
        response = self.session.get(self._repo_url(owner, repo), timeout=self.timeout)
        return self._handle_response(response, "repository lookup")

    def list_pulls(self, owner: str, repo: str, head: str, state: str = "open") -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.pr.list", repository=f"{owner}/{repo}", head=head)
        response = self.session.get(
            f"{self._repo_url(owner, repo)}/pulls",
            params={"head": head, "state": state},
            timeout=self.timeout,
        )
        return self._handle_response(response, "pull request listing")

    def create_ref(self, owner: str, repo: str, ref: str, sha: str) -> dict[str, Any]:
        log_event(logger, logging.INFO, "github.ref.create", repository=f"{owner}/{repo}", ref=ref, sha=sha)
        payload = {"ref": ref, "sha": sha}
        response = self.session.post(
            f"{self._repo_url(owner, repo)}/git/refs",
            json=payload,
            timeout=self.timeout,
        )
        return self._handle_response(response, "reference creation")

    def create_pull(
        self,
        owner: str,
        repo: str,
        *,
        base: str,
        head: str,
        issue: int,
        draft: bool,
    ) -> dict[str, Any]:
        log_event(
            logger,
            logging.INFO,
            "github.pr.create",
            repository=f"{owner}/{repo}",
            head=head,
            base=base,
            issue=issue,
            draft=draft,
        )
        payload = {"base": base, "head": head, "issue": issue, "draft": draft}
        response = self.session.post(
            f"{self._repo_url(owner, repo)}/pulls",
            json=payload,
            timeout=self.timeout,
        )
        return self._handle_response(response, "pull request creation")

    def close(self) -> None:
        self.session.close()
