"""
Pytest fixtures for the Rockside SDK tests.
"""
import pytest

from rockside_sdk.config import Network
from rockside_sdk.models import EncryptedAccount, EncryptedWallet
from tests.test_helpers import create_test_client, TEST_TOKEN


@pytest.fixture
def client():
    """Client authenticated with an API key on ropsten"""
    return create_test_client()


@pytest.fixture
def token_client():
    """Client authenticated with a bearer token on mainnet"""
    return create_test_client(network=Network.MAINNET, apikey=None, token=TEST_TOKEN)


@pytest.fixture
def encrypted_account():
    return EncryptedAccount(
        username="alice@example.com",
        iterations=100000,
        password_hash=bytes.fromhex("a1b2c3d4"),
        password_derived_key_hash=bytes.fromhex("00ff00ff"),
        encrypted_encryption_key=bytes.fromhex("deadbeef"),
        encrypted_encryption_key_iv=bytes.fromhex("0102030405060708090a0b0c"),
    )


@pytest.fixture
def encrypted_wallet():
    return EncryptedWallet(
        encrypted_mnemonic=bytes.fromhex("cafebabe"),
        encrypted_mnemonic_iv=bytes.fromhex("0c0b0a090807060504030201"),
    )
