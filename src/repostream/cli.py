import argparse
import logging
from typing import Sequence

from repostream.client import RepoStreamClient
from repostream.settings import RepoStreamSettings
from repostream.stream.observers import ConsoleObserver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repostream",
        description="Serve top repositories per language and stream owner commit counts to the console.",
    )
    parser.add_argument("--host", help="bind address (default: REPOSTREAM_HOST or localhost)")
    parser.add_argument("--port", type=int, help="listening port (default: REPOSTREAM_PORT or 5050)")
    parser.add_argument("--log-level", help="logging level (default: REPOSTREAM_LOG_LEVEL or INFO)")
    parser.add_argument("--observer-name", default="Observer", help="label printed by the console observer")
    return parser


def load_settings(args: argparse.Namespace) -> RepoStreamSettings:
    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if value is not None
    }
    return RepoStreamSettings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not settings.github_token:
        logger.warning("No GitHub token configured; requests will be unauthenticated")

    client = RepoStreamClient(settings=settings)
    with client.create_server() as server, server.subscribe(ConsoleObserver(args.observer_name)):
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
    return 0
