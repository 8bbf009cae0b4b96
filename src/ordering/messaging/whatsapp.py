"""WhatsApp click-to-chat handoff.

The storefront does not talk to WhatsApp directly: it builds a ``wa.me`` link
with the order summary prefilled, and the customer's browser opens it.
"""

import re
from urllib.parse import quote

from ordering.messaging.port import MessagingError, MessagingPort

WHATSAPP_BASE_URL = "https://wa.me"


class WhatsAppLinkAdapter(MessagingPort):
    def __init__(self, base_url: str = WHATSAPP_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    def dispatch(self, destination: str, text: str) -> dict:
        number = re.sub(r"\D", "", destination or "")
        if not number:
            raise MessagingError(f"Invalid WhatsApp number: {destination!r}")

        url = f"{self.base_url}/{number}?text={quote(text, safe='')}"
        return {"channel": "whatsapp", "destination": number, "url": url}
