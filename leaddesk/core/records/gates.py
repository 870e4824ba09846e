"""
Operator-facing collaborators injected into sessions and deletes.

ConfirmationGate asks a yes/no question before a commit or delete.
Notifier delivers the acknowledgment shown after one.
"""

import logging
from dataclasses import dataclass
from typing import List, Protocol

logger = logging.getLogger(__name__)


class ConfirmationGate(Protocol):
    async def confirm(self, message: str) -> bool:
        ...


class Notifier(Protocol):
    def success(self, title: str, message: str) -> None:
        ...

    def error(self, title: str, message: str) -> None:
        ...


class StaticConfirmationGate:
    """Gate whose answer is already known, e.g. sent along with an HTTP request."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    async def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer


class LoggingNotifier:
    def success(self, title: str, message: str) -> None:
        logger.info(f"{title} {message}")

    def error(self, title: str, message: str) -> None:
        logger.error(f"{title} {message}")


@dataclass
class Acknowledgment:
    level: str
    title: str
    message: str


class MemoryNotifier:
    """Collects acknowledgments so a caller can relay them (HTTP responses, tests)."""

    def __init__(self):
        self.acknowledgments: List[Acknowledgment] = []

    def success(self, title: str, message: str) -> None:
        self.acknowledgments.append(Acknowledgment("success", title, message))

    def error(self, title: str, message: str) -> None:
        self.acknowledgments.append(Acknowledgment("error", title, message))

    def drain(self) -> List[Acknowledgment]:
        acknowledgments, self.acknowledgments = self.acknowledgments, []
        return acknowledgments
