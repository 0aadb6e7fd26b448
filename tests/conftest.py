from unittest.mock import Mock

import pytest

from pokecatch.config import get_config
from pokecatch.di import build_container
from pokecatch.PokeApp import create_app
from pokecatch.repositories.sqlalchemy_repo import SQLAlchemyRepository

TEST_SECRET = 'test-signing-secret-that-is-long-enough-for-hs256'


@pytest.fixture
def cfg():
    # pbkdf2 with few iterations keeps the suite fast; the scheme is the same
    return get_config(DATABASE_URL='sqlite:///:memory:', JWT_SECRET=TEST_SECRET,
                      JWT_PREVIOUS_SECRETS=[], PASSWORD_HASH_METHOD='pbkdf2:sha256:1000')


@pytest.fixture
def repo():
    r = SQLAlchemyRepository('sqlite:///:memory:')
    yield r
    r.close()


@pytest.fixture
def species_lookup():
    lookup = Mock()
    lookup.lookup.return_value = {'name': 'pikachu', 'id': 25}
    return lookup


@pytest.fixture
def container(cfg, species_lookup):
    c = build_container(cfg, species_lookup=species_lookup)
    yield c
    c.close()


@pytest.fixture
def client(container):
    app = create_app(container=container)
    app.config['TESTING'] = True
    return app.test_client()
