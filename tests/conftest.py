import os

import pytest

GRAPHQL_DIR = os.path.join(os.path.dirname(__file__), "graphql")


def read_fixture(name):
    with open(os.path.join(GRAPHQL_DIR, name), "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def graphql_dir():
    return GRAPHQL_DIR


@pytest.fixture
def client_type():
    return read_fixture("client_type.graphql")


@pytest.fixture
def product_type():
    return read_fixture("product_type.graphql")


@pytest.fixture
def vendor_type():
    return read_fixture("vendor_type.graphql")
