"""Proxy pattern: a stand-in that wraps requests to a real subject."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Subject(ABC):
    """Something that can handle a request."""

    @abstractmethod
    def request(self) -> None:
        """Handle a request."""


class RealSubject(Subject):
    """The object that actually handles requests."""

    def __init__(self, name: str = "unknown") -> None:
        self.name = name

    def request(self) -> None:
        print(f"RealSubject:{self.name}")
        print("RealSubject::Request()")


class Proxy(Subject):
    """Forwards requests to a real subject, with work before and after.

    The proxy counts the requests it has started and completed.
    """

    PRE_MESSAGE = "Proxy::PreRequest()"
    POST_MESSAGE = "Proxy::PostRequest()"

    def __init__(self, real_subject: RealSubject | None = None) -> None:
        self.real_subject = real_subject if real_subject is not None else RealSubject()
        self.requests_started = 0
        self.requests_completed = 0

    @property
    def requests_in_flight(self) -> int:
        """Requests started but not yet completed."""
        return self.requests_started - self.requests_completed

    def request(self) -> None:
        self.pre_request()
        self.real_subject.request()
        self.post_request()

    def pre_request(self) -> str:
        """Mark a request as started, announce it and return the announcement."""
        self.requests_started += 1
        print(self.PRE_MESSAGE)
        return self.PRE_MESSAGE

    def post_request(self) -> str:
        """Mark a request as completed, announce it and return the announcement."""
        if self.requests_completed < self.requests_started:
            self.requests_completed += 1
        print(self.POST_MESSAGE)
        return self.POST_MESSAGE


def main(argv: list[str] | None = None) -> int:
    """Send one request through a proxy; the subject defaults to "Proxy Pattern"."""
    parser = argparse.ArgumentParser(description="Send a request through a proxy.")
    parser.add_argument("name", nargs="?", default="Proxy Pattern")
    args = parser.parse_args(argv)

    Proxy(RealSubject(args.name)).request()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())