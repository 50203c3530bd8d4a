import logging
from typing import Any

import requests
from pydantic import ValidationError

from repostream.errors import UpstreamError
from repostream.stream.interfaces import RepositoryProvider
from repostream.stream.models import RepositoryRef, RepositorySearchResult

from .dto import GitHubCommitListAdapter, GitHubRepositorySearchResponseDTO

logger = logging.getLogger(__name__)


class RequestsGitHubRepositoryProvider(RepositoryProvider):
    __slots__ = (
        "__token",
        "__base_url",
        "__user_agent",
        "__timeout_sec",
        "__session",
    )

    def __init__(
        self,
        token: str | None,
        user_agent: str = "GitHubRepoAnalyzer",
        timeout_sec: float | None = None,
        session: requests.Session | None = None,
        base_url: str = "https://api.github.com",
    ) -> None:
        self.__token = token
        self.__base_url = base_url.rstrip("/")
        self.__user_agent = user_agent
        self.__timeout_sec = timeout_sec
        self.__session = session or requests.Session()

    def search_repositories(self, language: str) -> RepositorySearchResult:
        payload = self.__get_json(
            "/search/repositories",
            params={"q": f"language:{language}", "sort": "stars", "order": "desc"},
        )
        if not isinstance(payload, dict):
            raise UpstreamError("GitHub API returned non-object search response")

        try:
            dto = GitHubRepositorySearchResponseDTO.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamError(f"Malformed repository search response: {exc}") from exc

        repositories = tuple(
            RepositoryRef(
                full_name=item.full_name,
                owner_login=item.owner.login if item.owner is not None else None,
                stars=item.stargazers_count,
            )
            for item in dto.items
        )
        return RepositorySearchResult(repositories=repositories, raw_items=list(payload["items"]))

    def count_author_commits(self, repository_full_name: str, author: str) -> int:
        try:
            payload = self.__get_json(
                f"/repos/{repository_full_name}/commits",
                params={"author": author},
            )
            commits = GitHubCommitListAdapter.validate_python(payload)
        except (UpstreamError, ValidationError) as exc:
            logger.warning("Failed to fetch commit count for %s on %s: %s", author, repository_full_name, exc)
            return 0

        return len(commits)

    def close(self) -> None:
        self.__session.close()

    def __get_json(self, path: str, params: dict[str, object]) -> Any:
        url = f"{self.__base_url}{path}"
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": self.__user_agent,
        }
        if self.__token:
            headers["Authorization"] = f"Bearer {self.__token}"

        try:
            response = self.__session.get(
                url,
                headers=headers,
                params=params,
                timeout=self.__timeout_sec,
            )
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            raise UpstreamError(str(exc)) from exc
        except ValueError as exc:
            raise UpstreamError(f"GitHub API returned invalid JSON: {exc}") from exc
        except requests.RequestException as exc:
            raise UpstreamError(f"GitHub API is unreachable: {exc}") from exc
