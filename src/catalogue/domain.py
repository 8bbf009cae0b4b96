"""Catalogue bounded context: the pizzeria menu.

Owns pizza categories and menu items. The ordering context reads the menu
as a read-only snapshot; only the menu management commands change it.
"""

from protean.domain import Domain

from catalogue.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="pizzeria")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")
