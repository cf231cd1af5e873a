"""A ping service reachable directly or through a remote HTTP proxy."""

from __future__ import annotations

import argparse
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from collections.abc import Sequence

DEFAULT_URL = "http://localhost:64959/"


class Pingable(ABC):
    """Something that answers a ping message."""

    @abstractmethod
    def ping(self, message: str) -> str:
        """Return the reply to ``message``."""


class Pong(Pingable):
    """Answers locally by appending " pong"."""

    def ping(self, message: str) -> str:
        return message + " pong"


class RemotePong(Pingable):
    """Answers by asking an HTTP service at ``/api/values/<message>``."""

    def __init__(self, base_url: str = DEFAULT_URL, timeout: float = 10.0) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def ping(self, message: str) -> str:
        path = "/api/values/" + urllib.parse.quote(message, safe="")
        url = urllib.parse.urljoin(self.base_url, path)
        with urllib.request.urlopen(url, timeout=self.timeout) as response:
            charset = response.headers.get_content_charset() or "utf-8"
            return response.read().decode(charset)


def try_it(pingable: Pingable) -> str:
    """Ping with "ping", print the reply and return it."""
    reply = pingable.ping("ping")
    print(reply)
    return reply


def main(argv: Sequence[str] | None = None) -> int:
    """Ping the remote service three times."""
    parser = argparse.ArgumentParser(description="Ping a remote pong service.")
    parser.add_argument("url", nargs="?", default=DEFAULT_URL)
    args = parser.parse_args(argv)
    remote = RemotePong(args.url)
    for _ in range(3):
        try_it(remote)
    return 0