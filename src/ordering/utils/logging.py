"""Logging for the Ordering domain.

Shares the storefront-wide setup; checkout and cart modules only bind their
own context (session, cart and order ids).
"""

import logging

from catalogue.utils.logging import add_context, clear_context, configure_logging, get_logger

__all__ = ["add_context", "clear_context", "configure_logging", "get_logger", "logger"]

logger = get_logger(__name__)

# Protean logs every unit of work at INFO; keep the storefront's own lines readable
logging.getLogger("protean").setLevel(logging.WARNING)
