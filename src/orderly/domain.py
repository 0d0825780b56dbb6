"""Domain initialization and configuration.

Identity, catalogue and ordering all register into this single domain so that
placing an order reads the cart, the customer's address and product prices,
and writes the order, inside one unit of work.
"""

from protean.domain import Domain

from orderly.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
orderly = Domain(name="orderly")
