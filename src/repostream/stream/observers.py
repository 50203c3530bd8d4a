from .models import RepositoryInfo


class ConsoleObserver:
    __slots__ = ("__name",)

    def __init__(self, name: str = "Observer") -> None:
        self.__name = name

    @property
    def name(self) -> str:
        return self.__name

    def on_next(self, value: RepositoryInfo) -> None:
        print(f"{self.__name}: Author: {value.author}\nCommit count: {value.commit_count}\n")

    def on_error(self, error: BaseException) -> None:
        print(f"{self.__name}: An error occurred: {error}")

    def on_completed(self) -> None:
        print(f"{self.__name}: Finished tracking repositories.")
