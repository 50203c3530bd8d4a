"""Shared fakes for repostream tests."""
from typing import Any

import pytest
import requests

from repostream.stream.models import RepositoryInfo, RepositoryRef, RepositorySearchResult


class RecordingObserver:
    def __init__(self) -> None:
        self.values: list[RepositoryInfo] = []
        self.errors: list[BaseException] = []
        self.completions = 0
        self.events: list[str] = []

    def on_next(self, value: RepositoryInfo) -> None:
        self.values.append(value)
        self.events.append("next")

    def on_error(self, error: BaseException) -> None:
        self.errors.append(error)
        self.events.append("error")

    def on_completed(self) -> None:
        self.completions += 1
        self.events.append("completed")


def repository_item(full_name: str, login: str | None, stars: int = 10) -> dict[str, Any]:
    owner = None if login is None else {"login": login, "id": 1, "type": "User"}
    return {
        "id": abs(hash(full_name)) % 100000,
        "full_name": full_name,
        "owner": owner,
        "stargazers_count": stars,
        "html_url": f"https://github.com/{full_name}",
        "language": "Go",
    }


class FakeProvider:
    def __init__(
        self,
        items: list[dict[str, Any]],
        commit_counts: dict[tuple[str, str], int] | None = None,
        search_error: Exception | None = None,
    ) -> None:
        self.items = items
        self.commit_counts = commit_counts or {}
        self.search_error = search_error
        self.searched: list[str] = []
        self.commit_calls: list[tuple[str, str]] = []

    def search_repositories(self, language: str) -> RepositorySearchResult:
        self.searched.append(language)
        if self.search_error is not None:
            raise self.search_error
        refs = tuple(
            RepositoryRef(
                full_name=item["full_name"],
                owner_login=(item.get("owner") or {}).get("login"),
                stars=item.get("stargazers_count", 0),
            )
            for item in self.items
        )
        return RepositorySearchResult(repositories=refs, raw_items=list(self.items))

    def count_author_commits(self, repository_full_name: str, author: str) -> int:
        self.commit_calls.append((repository_full_name, author))
        return self.commit_counts.get((repository_full_name, author), 0)


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, invalid_json: bool = False) -> None:
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=None)

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Routes ``get`` calls by URL path suffix to canned responses or exceptions."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, headers: dict[str, str], params: dict[str, object], timeout: Any) -> FakeResponse:
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        for suffix, outcome in self.routes.items():
            if url.endswith(suffix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise requests.ConnectionError(f"no route for {url}")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
