from .channel import RepositoryChannel, Subscription
from .models import RepositoryInfo, RepositoryRef, RepositorySearchResult
from .observers import ConsoleObserver
from .service import RepositoryAnalysisService

__all__ = [
    "ConsoleObserver",
    "RepositoryAnalysisService",
    "RepositoryChannel",
    "RepositoryInfo",
    "RepositoryRef",
    "RepositorySearchResult",
    "Subscription",
]
