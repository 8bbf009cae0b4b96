"""Messaging port: hands a finished order summary to the restaurant."""

from abc import ABC, abstractmethod


class MessagingError(Exception):
    """The handoff to the messaging channel could not be prepared or sent."""


class MessagingPort(ABC):
    """Abstract messaging channel interface."""

    @abstractmethod
    def dispatch(self, destination: str, text: str) -> dict:
        """Send ``text`` to ``destination``.

        Returns channel-specific handoff details, e.g. the link the customer's
        browser should open.
        """
        ...
