"""Domain initialization and configuration.

A single bounded context holds the catalogue, identity and ordering
aggregates. Aggregates reference each other by identifier and are resolved
through repositories.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
