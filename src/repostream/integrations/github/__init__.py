from .requests_provider import RequestsGitHubRepositoryProvider

__all__ = ["RequestsGitHubRepositoryProvider"]
