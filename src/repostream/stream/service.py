import logging
from typing import Any

from .channel import RepositoryChannel
from .interfaces import RepositoryProvider
from .models import RepositoryInfo

logger = logging.getLogger(__name__)


class RepositoryAnalysisService:
    __slots__ = ("__repository_provider",)

    def __init__(self, repository_provider: RepositoryProvider) -> None:
        self.__repository_provider = repository_provider

    def analyze_language(self, language: str, channel: RepositoryChannel) -> list[dict[str, Any]]:
        """Search ``language`` repositories and push one record per owner to ``channel``.

        Items whose owner login is missing or empty are skipped. Returns the
        search items exactly as the upstream API returned them. Terminal
        signals are left to the caller.
        """
        if not language:
            raise ValueError("language must be non-empty")

        logger.info("Searching repositories for language %s", language)
        result = self.__repository_provider.search_repositories(language)

        total = len(result.repositories)
        for index, repository in enumerate(result.repositories, start=1):
            author = repository.owner_login
            if not author:
                logger.info("[%d/%d] skip %s: invalid repository owner", index, total, repository.full_name)
                continue

            commit_count = self.__repository_provider.count_author_commits(repository.full_name, author)
            logger.debug(
                "[%d/%d] %s (%d stars): %s has %d commits",
                index,
                total,
                repository.full_name,
                repository.stars,
                author,
                commit_count,
            )
            channel.push(RepositoryInfo(author=author, commit_count=commit_count))

        return result.raw_items
