"""Application tests for user registration and address commands."""

import pytest
from protean import current_domain
from qkart.errors import CartError
from qkart.identity.registration import RegisterUser, SetAddress, get_user


def _register(email="crio-user@gmail.com", name="crio-user"):
    return current_domain.process(RegisterUser(email=email, name=name), asynchronous=False)


class TestRegisterUserCommand:
    def test_register_persists(self):
        user_id = _register()

        user = get_user("crio-user@gmail.com")
        assert str(user.id) == user_id
        assert user.wallet_money == 500.0
        assert not user.has_set_non_default_address()

    def test_duplicate_email_rejected(self):
        _register()

        with pytest.raises(CartError) as exc:
            _register(name="someone-else")

        assert exc.value.status == 400
        assert exc.value.message == "Email already taken"


class TestSetAddressCommand:
    def test_set_address_persists(self, user):
        current_domain.process(
            SetAddress(email=user, address="128th Residency, Park Street, Bangalore"),
            asynchronous=False,
        )

        stored = get_user(user)
        assert stored.address == "128th Residency, Park Street, Bangalore"
        assert stored.has_set_non_default_address()

    def test_unknown_user(self):
        with pytest.raises(CartError) as exc:
            current_domain.process(
                SetAddress(email="ghost@gmail.com", address="128th Residency, Park Street, Bangalore"),
                asynchronous=False,
            )

        assert exc.value.status == 404
        assert exc.value.message == "User not found"


class TestGetUser:
    def test_unknown_user(self):
        with pytest.raises(CartError) as exc:
            get_user("ghost@gmail.com")

        assert exc.value.status == 404
