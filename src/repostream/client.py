from repostream.integrations.github.requests_provider import RequestsGitHubRepositoryProvider
from repostream.server import RepositoryStreamServer
from repostream.settings import RepoStreamSettings
from repostream.stream.service import RepositoryAnalysisService


class RepoStreamClient:
    __slots__ = ("__settings", "__analysis_service")

    def __init__(
        self,
        settings: RepoStreamSettings | None = None,
        analysis_service: RepositoryAnalysisService | None = None,
    ) -> None:
        self.__settings = settings or RepoStreamSettings()

        if analysis_service is not None:
            self.__analysis_service = analysis_service
            return

        repository_provider = RequestsGitHubRepositoryProvider(
            token=self.__settings.github_token,
            user_agent=self.__settings.user_agent,
            timeout_sec=self.__settings.http_timeout_sec,
            base_url=self.__settings.base_url,
        )
        self.__analysis_service = RepositoryAnalysisService(repository_provider=repository_provider)

    @property
    def settings(self) -> RepoStreamSettings:
        return self.__settings

    @property
    def analysis(self) -> RepositoryAnalysisService:
        return self.__analysis_service

    def create_server(self) -> RepositoryStreamServer:
        return RepositoryStreamServer(
            service=self.__analysis_service,
            host=self.__settings.host,
            port=self.__settings.port,
        )
