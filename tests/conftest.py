import pytest

from bc_catalog.bigcommerce.client import BigCommerceClient, Credential
from bc_catalog.config import get_settings
from tests.helpers import ENV_KEYS, STORE_HASH, TOKEN, FakeSession


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def session():
    return FakeSession()


@pytest.fixture()
def client(session):
    return BigCommerceClient(Credential(STORE_HASH, TOKEN), session=session)
