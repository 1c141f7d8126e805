import pytest
from protean import current_domain
from qkart.catalogue.management import AddProduct
from qkart.identity.registration import RegisterUser


@pytest.fixture()
def email():
    return "crio-user@gmail.com"


@pytest.fixture()
def user(email):
    current_domain.process(RegisterUser(email=email, name="crio-user"), asynchronous=False)
    return email


@pytest.fixture()
def product_id():
    return current_domain.process(AddProduct(name="UNIFACTOR Mens Running Shoes", cost=100.0), asynchronous=False)
