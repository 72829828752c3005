from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RepositoryRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class IssueContext:
    number: int


@dataclass(frozen=True)
class PushContext:
    ref: str
    sha: str


@dataclass(frozen=True)
class PullRequestSummary:
    head_label: str
    number: int | None = None
    html_url: str | None = None


@dataclass(frozen=True)
class BranchCreationRequest:
    branch_name: str
    repository: RepositoryRef
    sha: str

    @property
    def ref(self) -> str:
        return f"refs/heads/{self.branch_name}"


@dataclass(frozen=True)
class PullCreationRequest:
    repository: RepositoryRef
    base: str
    head: str
    draft: bool
    issue_number: int

    def as_non_draft(self) -> "PullCreationRequest":
        return replace(self, draft=False)


@dataclass(frozen=True)
class RepositoryMetadata:
    default_branch: str
