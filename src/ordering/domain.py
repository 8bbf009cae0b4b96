"""Ordering bounded context: shopping cart, checkout and placed orders.

Keeps each shopper's cart in memory for the length of a shopping session,
turns a submitted checkout form into a persisted Order (header first, then
its lines) and hands the order summary off to the restaurant's messaging
channel.
"""

import structlog
from protean.domain import Domain

from ordering.utils.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
