"""Messaging channel factory.

Provides get_messenger() / set_messenger() to swap implementations:
- WhatsAppLinkAdapter builds a wa.me click-to-chat link (default)
- FakeMessenger records messages for tests

Configure via MESSAGING_CHANNEL ("whatsapp" or "fake"). The restaurant's
number comes from WHATSAPP_NUMBER.
"""

import os

from ordering.messaging.port import MessagingPort

DEFAULT_WHATSAPP_NUMBER = "5511999999999"

_current_messenger: MessagingPort | None = None


def get_messenger() -> MessagingPort:
    """Return the configured messaging channel (singleton)."""
    global _current_messenger
    if _current_messenger is None:
        channel = os.environ.get("MESSAGING_CHANNEL", "whatsapp")
        if channel == "whatsapp":
            from ordering.messaging.whatsapp import WhatsAppLinkAdapter

            _current_messenger = WhatsAppLinkAdapter()
        elif channel == "fake":
            from ordering.messaging.fake_messenger import FakeMessenger

            _current_messenger = FakeMessenger()
        else:
            raise ValueError(f"Unknown messaging channel: {channel}")
    return _current_messenger


def get_destination() -> str:
    """The restaurant's fixed destination on the messaging channel."""
    return os.environ.get("WHATSAPP_NUMBER", DEFAULT_WHATSAPP_NUMBER)


def set_messenger(messenger: MessagingPort) -> None:
    """Override the active messaging channel (useful for tests)."""
    global _current_messenger
    _current_messenger = messenger


def reset_messenger() -> None:
    """Reset to the configured default messaging channel."""
    global _current_messenger
    _current_messenger = None
