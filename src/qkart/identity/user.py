"""User aggregate: the wallet and delivery address the cart reads at checkout.

Users are owned by user management; the cart only reads ``wallet_money`` and
the address, and writes ``wallet_money`` back when a checkout succeeds.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from qkart.config import settings
from qkart.domain import qkart
from qkart.identity.events import AddressChanged, UserRegistered, WalletDebited


@qkart.aggregate
class User:
    email = String(required=True, max_length=254, unique=True)
    name = String(required=True, max_length=255)
    wallet_money = Float(required=True, default=0.0)
    address = String(max_length=500)
    registered_at = DateTime()

    @classmethod
    def register(cls, email, name, wallet_money=None, address=None):
        wallet_money = settings.default_wallet_money if wallet_money is None else wallet_money
        now = datetime.now(UTC)
        user = cls(
            email=email,
            name=name,
            wallet_money=wallet_money,
            address=address or settings.default_address,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=email,
                name=name,
                wallet_money=wallet_money,
                registered_at=now,
            )
        )
        return user

    def has_set_non_default_address(self) -> bool:
        return self.address != settings.default_address

    def set_address(self, address):
        self.address = address
        self.raise_(AddressChanged(user_id=str(self.id), email=self.email, address=address))

    def debit_wallet(self, amount):
        if amount > self.wallet_money:
            raise ValidationError({"wallet_money": ["Debit exceeds wallet balance"]})

        self.wallet_money = self.wallet_money - amount
        self.raise_(
            WalletDebited(
                user_id=str(self.id),
                email=self.email,
                amount=amount,
                balance=self.wallet_money,
                debited_at=datetime.now(UTC),
            )
        )


@qkart.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email) -> User | None:
        users = self._dao.query.filter(email=email).all().items
        return users[0] if users else None
