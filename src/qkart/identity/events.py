"""Domain events for the User aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from qkart.domain import qkart


@qkart.event(part_of="User")
class UserRegistered:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    name = String(required=True)
    wallet_money = Float(required=True)
    registered_at = DateTime(required=True)


@qkart.event(part_of="User")
class AddressChanged:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    address = String(required=True)


@qkart.event(part_of="User")
class WalletDebited:
    """Money left the user's wallet at checkout."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    amount = Float(required=True)
    balance = Float(required=True)
    debited_at = DateTime(required=True)
