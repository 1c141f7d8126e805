"""Product aggregate and the ProductSnapshot value object copied into carts."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, String

from qkart.catalogue.events import ProductAdded, ProductCostChanged
from qkart.domain import qkart


@qkart.value_object
class ProductSnapshot:
    """Catalogue data for one product, frozen at the moment it was copied.

    Cart items hold a snapshot rather than a reference, so checkout charges the
    cost the customer saw when adding the item even if the catalogue changes.
    """

    product_id = String(required=True, max_length=255)
    name = String(required=True, max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Float(min_value=0.0, max_value=5.0)
    image = String(max_length=2048)


@qkart.aggregate
class Product:
    name = String(required=True, max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Float(min_value=0.0, max_value=5.0, default=0.0)
    image = String(max_length=2048)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def add(cls, name, cost, category=None, rating=None, image=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            category=category,
            cost=cost,
            rating=rating if rating is not None else 0.0,
            image=image,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                category=category,
                cost=cost,
                added_at=now,
            )
        )
        return product

    def change_cost(self, new_cost):
        previous_cost = self.cost
        self.cost = new_cost
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductCostChanged(
                product_id=str(self.id),
                previous_cost=previous_cost,
                new_cost=new_cost,
                changed_at=now,
            )
        )

    def snapshot(self) -> ProductSnapshot:
        """Copy the catalogue data a cart item needs, by value."""
        return ProductSnapshot(
            product_id=str(self.id),
            name=self.name,
            category=self.category,
            cost=self.cost,
            rating=self.rating,
            image=self.image,
        )


@qkart.repository(part_of=Product)
class ProductRepository:
    def find_by_id(self, product_id) -> Product | None:
        """Find a product by its identifier, or None when the catalogue has no such product."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None
