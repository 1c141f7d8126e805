"""QKart bounded context: catalogue, users and shopping carts.

Handles the per-user shopping cart (add/update/remove line items) and the
checkout step that debits the user's wallet and empties the cart.
"""

from protean.domain import Domain

from qkart.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="qkart")

logger = get_logger(__name__)

# Domain Composition Root
qkart = Domain(name="qkart")
