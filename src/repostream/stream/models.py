from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    author: str
    commit_count: int

    def __post_init__(self) -> None:
        if self.commit_count < 0:
            raise ValueError("commit_count must be >= 0")


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    full_name: str
    owner_login: str | None
    stars: int = 0


@dataclass(frozen=True, slots=True)
class RepositorySearchResult:
    """Typed view of a search response plus the items exactly as received."""

    repositories: tuple[RepositoryRef, ...]
    raw_items: list[dict[str, Any]] = field(default_factory=list)
