from typing import Protocol

from .models import RepositoryInfo, RepositorySearchResult


class RepositoryProvider(Protocol):
    def search_repositories(self, language: str) -> RepositorySearchResult:
        ...

    def count_author_commits(self, repository_full_name: str, author: str) -> int:
        ...


class RepositoryObserver(Protocol):
    def on_next(self, value: RepositoryInfo) -> None:
        ...

    def on_error(self, error: BaseException) -> None:
        ...

    def on_completed(self) -> None:
        ...
