"""HTTP listener that runs one repository analysis cycle per GET request."""

import json
import logging
import threading
from dataclasses import dataclass
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable
from urllib.parse import parse_qs, urlsplit

from repostream.errors import METHOD_NOT_ALLOWED_MESSAGE, MethodNotAllowedError
from repostream.stream.channel import RepositoryChannel, Subscription
from repostream.stream.interfaces import RepositoryObserver
from repostream.stream.service import RepositoryAnalysisService

logger = logging.getLogger(__name__)

MISSING_LANGUAGE_MESSAGE = "Nedostaje parametar jezik (language) u upitu."
ERROR_MESSAGE_PREFIX = "Došlo je do greške: "

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class HttpReply:
    status: HTTPStatus
    content_type: str
    body: bytes

    @classmethod
    def text(cls, status: HTTPStatus, message: str) -> "HttpReply":
        return cls(status=status, content_type=TEXT_CONTENT_TYPE, body=message.encode("utf-8"))


class RepositoryRequestHandler(BaseHTTPRequestHandler):
    server: "_StreamHTTPServer"

    def do_GET(self) -> None:
        self.__respond(self.server.stream.handle("GET", self.path))

    def do_HEAD(self) -> None:
        self.__respond(self.server.stream.handle("HEAD", self.path), include_body=False)

    def __getattr__(self, name: str) -> Callable[[], None]:
        # every verb without its own do_ method reaches handle(), never the base 501 reply
        if not name.startswith("do_"):
            raise AttributeError(name)
        method = name[len("do_"):]
        return lambda: self.__respond(self.server.stream.handle(method, self.path))

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)

    def __respond(self, reply: HttpReply, include_body: bool = True) -> None:
        self.send_response(reply.status)
        self.send_header("Content-Type", reply.content_type)
        self.send_header("Content-Length", str(len(reply.body)))
        self.end_headers()
        if include_body:
            self.wfile.write(reply.body)


class _StreamHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], stream: "RepositoryStreamServer") -> None:
        self.stream = stream
        super().__init__(address, RepositoryRequestHandler)


class RepositoryStreamServer:
    """Accept loop plus the per-request analysis cycle.

    Observers registered with :meth:`subscribe` receive the records of every
    request. Each request gets its own :class:`RepositoryChannel`, so the
    completion or error signal of one request never ends another's cycle.
    """

    __slots__ = ("__service", "__httpd", "__observers", "__lock")

    def __init__(self, service: RepositoryAnalysisService, host: str, port: int) -> None:
        self.__service = service
        self.__observers: list[RepositoryObserver] = []
        self.__lock = threading.Lock()
        self.__httpd = _StreamHTTPServer((host, port), self)

    @property
    def address(self) -> tuple[str, int]:
        host, port = self.__httpd.server_address[:2]
        return str(host), int(port)

    def subscribe(self, observer: RepositoryObserver) -> Subscription:
        with self.__lock:
            self.__observers.append(observer)
        return Subscription(lambda: self.__unsubscribe(observer))

    def open_channel(self) -> RepositoryChannel:
        with self.__lock:
            return RepositoryChannel(self.__observers)

    def handle(self, method: str, path: str) -> HttpReply:
        logger.info("Request received: %s %s", method, path)
        channel = self.open_channel()

        if method != "GET":
            channel.error(MethodNotAllowedError(method))
            return HttpReply.text(HTTPStatus.METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_MESSAGE)

        language = parse_qs(urlsplit(path).query).get("language", [""])[0]
        if not language:
            return HttpReply.text(HTTPStatus.BAD_REQUEST, MISSING_LANGUAGE_MESSAGE)

        try:
            items = self.__service.analyze_language(language, channel)
            body = json.dumps(items, ensure_ascii=False).encode("utf-8")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Request for language %s failed", language)
            channel.error(exc)
            return HttpReply.text(HTTPStatus.INTERNAL_SERVER_ERROR, f"{ERROR_MESSAGE_PREFIX}{exc}")

        channel.complete()
        return HttpReply(status=HTTPStatus.OK, content_type=JSON_CONTENT_TYPE, body=body)

    def serve_forever(self) -> None:
        host, port = self.address
        logger.info("Web server started on http://%s:%d/, waiting for requests...", host, port)
        self.__httpd.serve_forever()

    def shutdown(self) -> None:
        self.__httpd.shutdown()

    def close(self) -> None:
        self.__httpd.server_close()

    def __enter__(self) -> "RepositoryStreamServer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __unsubscribe(self, observer: RepositoryObserver) -> None:
        with self.__lock:
            try:
                self.__observers.remove(observer)
            except ValueError:
                pass
