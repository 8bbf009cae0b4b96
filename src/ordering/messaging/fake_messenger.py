"""Fake messaging channel that records every dispatched message."""

from ordering.messaging.port import MessagingError, MessagingPort


class FakeMessenger(MessagingPort):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Messaging channel unavailable"
        self.sent: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Messaging channel unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def dispatch(self, destination: str, text: str) -> dict:
        if not self.should_succeed:
            raise MessagingError(self.failure_reason)

        self.sent.append({"destination": destination, "text": text})
        return {"channel": "fake", "destination": destination, "url": None}
