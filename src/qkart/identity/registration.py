"""User registration and address management: commands and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from qkart.domain import qkart
from qkart.errors import EMAIL_TAKEN, USER_NOT_FOUND, CartError
from qkart.identity.user import User

logger = structlog.get_logger(__name__)


@qkart.command(part_of="User")
class RegisterUser:
    email = String(required=True, max_length=254)
    name = String(required=True, max_length=255)


@qkart.command(part_of="User")
class SetAddress:
    """Replace the user's delivery address."""

    email = String(required=True, max_length=254)
    address = String(required=True, max_length=500)


@qkart.command_handler(part_of=User)
class ManageUsersHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise CartError.invalid_request(EMAIL_TAKEN)

        user = User.register(email=command.email, name=command.name)
        repo.add(user)
        logger.info("User registered", email=user.email, wallet_money=user.wallet_money)
        return str(user.id)

    @handle(SetAddress)
    def set_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None:
            raise CartError.not_found(USER_NOT_FOUND)

        user.set_address(command.address)
        repo.add(user)


def get_user(email) -> User:
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None:
        raise CartError.not_found(USER_NOT_FOUND)
    return user
