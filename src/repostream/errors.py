"""Exceptions raised by repostream."""

METHOD_NOT_ALLOWED_MESSAGE = "Metoda zahteva nije podržana."


class RepoStreamError(Exception):
    """Base class for all repostream errors."""


class UpstreamError(RepoStreamError):
    """The code-hosting API failed or returned a payload of unexpected shape."""


class MethodNotAllowedError(RepoStreamError):
    def __init__(self, method: str) -> None:
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE)
        self.method = method
