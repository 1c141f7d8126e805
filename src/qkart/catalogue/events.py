"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from qkart.domain import qkart


@qkart.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String()
    cost = Float(required=True)
    added_at = DateTime(required=True)


@qkart.event(part_of="Product")
class ProductCostChanged:
    """The catalogue cost of a product changed. Existing cart snapshots are unaffected."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_cost = Float(required=True)
    new_cost = Float(required=True)
    changed_at = DateTime(required=True)
