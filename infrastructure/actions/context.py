import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import pydantic

from domain.errors import ConfigurationError
from domain.models import IssueContext, RepositoryRef
from infrastructure.actions.reporter import warning


class IssuePayload(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    number: int


class EventPayload(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    issue: IssuePayload | None = None
    # push events
    ref: str | None = None


@dataclass(frozen=True)
class ActionContext:
    event_name: str
    sha: str
    ref: str
    repository: RepositoryRef
    payload: EventPayload = field(default_factory=EventPayload)
    run_id: str | None = None

    @property
    def issue(self) -> IssueContext | None:
        if self.payload.issue is None:
            return None
        return IssueContext(number=self.payload.issue.number)


def parse_repository_slug(slug: str) -> RepositoryRef:
    owner, separator, name = slug.strip().partition("/")
    if not separator or not owner or not name or "/" in name:
        raise ConfigurationError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', got '{slug}'"
        )
    return RepositoryRef(owner=owner, name=name)


def load_event_payload(event_path: str | None) -> EventPayload:
    if not event_path:
        return EventPayload()
    path = Path(event_path)
    if not path.is_file():
        warning(f"GITHUB_EVENT_PATH {event_path} does not exist")
        return EventPayload()
    try:
        return EventPayload.model_validate_json(path.read_text(encoding="utf-8"))
    except (pydantic.ValidationError, UnicodeDecodeError, OSError) as error:
        raise ConfigurationError(f"Unreadable event payload at {event_path}: {error}") from error


def load_action_context(environ: Mapping[str, str] | None = None) -> ActionContext:
    environ = os.environ if environ is None else environ
    repository_slug = environ.get("GITHUB_REPOSITORY", "")
    if not repository_slug:
        raise ConfigurationError("Missing required environment variable: GITHUB_REPOSITORY")

    repository = parse_repository_slug(repository_slug)
    payload = load_event_payload(environ.get("GITHUB_EVENT_PATH"))
    return ActionContext(
        event_name=environ.get("GITHUB_EVENT_NAME", ""),
        sha=environ.get("GITHUB_SHA", ""),
        ref=environ.get("GITHUB_REF") or payload.ref or "",
        repository=repository,
        payload=payload,
        run_id=environ.get("GITHUB_RUN_ID") or None,
    )
