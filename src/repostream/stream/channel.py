"""Broadcast channel delivering result records to registered observers."""

import logging
import threading
from typing import Callable, Iterable

from .interfaces import RepositoryObserver
from .models import RepositoryInfo

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``subscribe``; disposing it removes the observer."""

    __slots__ = ("__release", "__lock")

    def __init__(self, release: Callable[[], None]) -> None:
        self.__release: Callable[[], None] | None = release
        self.__lock = threading.Lock()

    @property
    def disposed(self) -> bool:
        return self.__release is None

    def dispose(self) -> None:
        with self.__lock:
            release, self.__release = self.__release, None
        if release is not None:
            release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class RepositoryChannel:
    """One processing cycle: any number of values, then at most one terminal signal."""

    __slots__ = ("__observers", "__lock", "__terminated")

    def __init__(self, observers: Iterable[RepositoryObserver] = ()) -> None:
        self.__observers: list[RepositoryObserver] = list(observers)
        self.__lock = threading.Lock()
        self.__terminated = False

    @property
    def terminated(self) -> bool:
        return self.__terminated

    def subscribe(self, observer: RepositoryObserver) -> Subscription:
        with self.__lock:
            self.__observers.append(observer)
        return Subscription(lambda: self.__unsubscribe(observer))

    def push(self, value: RepositoryInfo) -> None:
        if self.__terminated:
            logger.debug("Dropping %r pushed after terminal signal", value)
            return
        for observer in self.__snapshot():
            self.__deliver(observer.on_next, value)

    def complete(self) -> None:
        if not self.__terminate():
            return
        for observer in self.__snapshot():
            self.__deliver(observer.on_completed)

    def error(self, error: BaseException) -> None:
        if not self.__terminate():
            return
        for observer in self.__snapshot():
            self.__deliver(observer.on_error, error)

    def __terminate(self) -> bool:
        with self.__lock:
            if self.__terminated:
                logger.debug("Channel already terminated, ignoring signal")
                return False
            self.__terminated = True
            return True

    def __snapshot(self) -> list[RepositoryObserver]:
        with self.__lock:
            return list(self.__observers)

    def __unsubscribe(self, observer: RepositoryObserver) -> None:
        with self.__lock:
            try:
                self.__observers.remove(observer)
            except ValueError:
                pass

    @staticmethod
    def __deliver(callback: Callable[..., None], *args: object) -> None:
        try:
            callback(*args)
        except Exception:  # noqa: BLE001
            logger.exception("Observer callback %r failed", callback)
