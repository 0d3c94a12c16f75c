"""
Tests for error paths in the RocksideApi class.
"""
import logging
from unittest.mock import MagicMock

import pytest
import requests

from rockside_sdk.exceptions import RocksideApiError, RocksideError
from tests.test_helpers import create_test_client, TEST_ACCOUNT, TEST_BASE_URL, TEST_IDENTITY, TEST_FORWARDER

ROPSTEN_URL = f"{TEST_BASE_URL}/ethereum/ropsten"


def test_server_error_message(client, encrypted_account, requests_mock):
    """The error field of the body becomes the exception message"""
    requests_mock.put(f"{TEST_BASE_URL}/encryptedaccounts", json={"error": "db down"}, status_code=500)

    with pytest.raises(RocksideApiError, match="db down") as exc_info:
        client.create_encrypted_account(encrypted_account)

    assert str(exc_info.value) == "db down"
    assert exc_info.value.message == "db down"
    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value, RocksideError)


def test_success_status_is_per_operation(client, requests_mock):
    """create_identity expects 201, a 200 is an error"""
    requests_mock.post(
        f"{ROPSTEN_URL}/smartwallets",
        json={"error": "unexpected"},
        status_code=200,
    )

    with pytest.raises(RocksideApiError, match="unexpected"):
        client.create_identity(TEST_FORWARDER, TEST_ACCOUNT)


def test_created_is_error_where_ok_expected(client, requests_mock):
    requests_mock.post(f"{TEST_BASE_URL}/ethereum/eoa", json={"error": "nope"}, status_code=201)

    with pytest.raises(RocksideApiError) as exc_info:
        client.create_eoa()

    assert exc_info.value.status_code == 201


def test_conflict_only_tolerated_for_accounts(client, encrypted_account, encrypted_wallet, requests_mock):
    requests_mock.put(
        f"{TEST_BASE_URL}/encryptedaccounts/wallets",
        json={"error": "wallet already exists"},
        status_code=409,
    )

    with pytest.raises(RocksideApiError, match="wallet already exists"):
        client.create_encrypted_wallet(encrypted_account, encrypted_wallet)


@pytest.mark.parametrize("status", [400, 401, 403, 404, 500, 502])
def test_get_transaction_errors(client, requests_mock, status):
    requests_mock.get(f"{ROPSTEN_URL}/transactions/0xunknown", json={"error": "not found"}, status_code=status)

    with pytest.raises(RocksideApiError) as exc_info:
        client.get_transaction("0xunknown")

    assert exc_info.value.status_code == status


def test_error_body_without_error_field(client, requests_mock):
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", json={"message": "oops"}, status_code=400)

    with pytest.raises(RocksideApiError) as exc_info:
        client.get_identities()

    assert exc_info.value.message is None


def test_invalid_json_error_body_propagates(client, requests_mock):
    """A non-JSON error body surfaces as the JSON decoding failure"""
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", text="<html>Bad Gateway</html>", status_code=502)

    with pytest.raises(ValueError) as exc_info:
        client.get_identities()

    assert not isinstance(exc_info.value, RocksideApiError)


def test_connection_error_propagates_without_retry(client, requests_mock):
    """Transport failures reach the caller unchanged after a single attempt"""
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", exc=requests.ConnectionError("down"))

    with pytest.raises(requests.ConnectionError, match="down"):
        client.get_identities()

    assert requests_mock.call_count == 1


def test_session_mounted_without_retries(client):
    """The default session never retries, on connection or status"""
    for url in ("https://x", "http://x"):
        retries = client.session.get_adapter(url).max_retries
        assert retries.total == 0
        assert retries.connect == 0
        assert retries.read == 0
        assert retries.status == 0


def test_timeout_propagates(client, requests_mock):
    requests_mock.post(
        f"{ROPSTEN_URL}/contracts/relayableidentity/{TEST_IDENTITY}/relayParams",
        exc=requests.Timeout("too slow"),
    )

    with pytest.raises(requests.Timeout):
        client.get_relay_params(TEST_IDENTITY, TEST_ACCOUNT, 1)


def test_server_error_not_retried(client, requests_mock):
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", json={"error": "busy"}, status_code=503)

    with pytest.raises(RocksideApiError, match="busy"):
        client.get_identities()

    assert requests_mock.call_count == 1


def test_error_is_logged_without_credentials(client, requests_mock, caplog):
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", json={"error": "bad key"}, status_code=401)

    with caplog.at_level(logging.DEBUG, logger="rockside_sdk.client"):
        with pytest.raises(RocksideApiError):
            client.get_identities()

    assert "401 bad key" in caplog.text
    assert client.headers["apikey"] not in caplog.text


def test_custom_logger(requests_mock):
    logger = MagicMock()
    client = create_test_client(logger=logger)
    requests_mock.get(f"{ROPSTEN_URL}/smartwallets", json=[], status_code=200)

    client.get_identities()

    logger.debug.assert_called_once_with(f"Rockside request: GET {ROPSTEN_URL}/smartwallets")
