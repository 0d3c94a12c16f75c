"""
RocksideApi - HTTP client for the Rockside relay API.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from web3 import Web3

from .config import BearerToken, Credential, Network, load_options_from_env, resolve_credential
from .exceptions import RocksideApiError
from .models import (
    EOA,
    DeployedIdentity,
    EncryptedAccount,
    EncryptedKey,
    EncryptedWallet,
    ExecuteTransaction,
    IdentityResponse,
    RelayedTransactionResponse,
    RelayParams,
    SignedMessage,
    TransactionInfosResponse,
    TransactionOpts,
)
from .utils import BytesLike, buf_to_hex


class RocksideApi:
    """
    Client for the Rockside API.

    Every method maps to a single REST call: the request is built from the
    configured base URL and network, authenticated with either an API key
    or a bearer token, and the JSON answer is decoded into a model.

    The client holds no state besides its configuration and never retries:
    connection errors and timeouts surface as ``requests`` exceptions and
    retry policy is left to the caller.
    """

    def __init__(
        self,
        base_url: str,
        network: Union[Network, tuple, str, int],
        apikey: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the RocksideApi

        Args:
            base_url: Rockside API URL (e.g., "https://api.rockside.io")
            network: Network to work on (Network member, (chain_id, name) pair or name)
            apikey: API key (exclusive with token)
            token: Bearer access token (exclusive with apikey)
            timeout: Timeout for HTTP requests in seconds, None to wait forever
            session: Optional requests session to send requests with
            logger: Optional logger instance to use for debug logging

        Raises:
            ConfigurationError: If both or neither of apikey and token are
                provided, or if the network is unknown
        """
        self.credential: Credential = resolve_credential(apikey, token)
        self._headers = self.credential.headers()

        self.base_url = base_url.rstrip('/')
        self.network = Network.parse(network)
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        if session is None:
            # Single attempt per request, failures reach the caller as raised
            session = requests.Session()
            no_retries = Retry(total=0, connect=0, read=0, redirect=0, status=0, raise_on_status=False)
            session.mount("http://", HTTPAdapter(max_retries=no_retries))
            session.mount("https://", HTTPAdapter(max_retries=no_retries))
        self.session = session

    @classmethod
    def from_env(cls, **overrides: Any) -> "RocksideApi":
        """
        Create a client from ROCKSIDE_* environment variables.

        Args:
            **overrides: Constructor arguments taking precedence over the environment

        Returns:
            Configured RocksideApi
        """
        options = load_options_from_env()
        options.update(overrides)
        return cls(**options)

    @property
    def headers(self) -> Dict[str, str]:
        """Authentication headers sent with every request"""
        return dict(self._headers)

    @property
    def token(self) -> Optional[str]:
        if isinstance(self.credential, BearerToken):
            return self.credential.value
        return None

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RocksideApi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _network_route(self, path: str) -> str:
        return f"/ethereum/{self.network.slug}{path}"

    def _send(self, route: str, method: str, body: Optional[Any] = None) -> requests.Response:
        """
        Send one request to the API.

        Args:
            route: Path appended to the base URL
            method: HTTP verb
            body: JSON-serializable body, None to send no body

        Returns:
            The raw response
        """
        url = f"{self.base_url}{route}"
        self.logger.debug(f"Rockside request: {method} {url}")
        return self.session.request(
            method,
            url,
            json=body,
            headers=self.headers,
            timeout=self.timeout,
        )

    def _check_status(self, resp: requests.Response, expected: Iterable[int]) -> None:
        """
        Raise the server reported error unless the status is expected.

        Raises:
            RocksideApiError: With the ``error`` field of the JSON body
            ValueError: If the error body is not valid JSON
        """
        if resp.status_code in expected:
            return

        payload = resp.json()
        message = payload.get('error') if isinstance(payload, dict) else None
        self.logger.warning(
            f"Rockside API error on {resp.request.method} {resp.url}: "
            f"{resp.status_code} {message}"
        )
        raise RocksideApiError(message, status_code=resp.status_code)

    def _call(self, route: str, method: str, body: Optional[Any] = None, expected: Iterable[int] = (200,)) -> Any:
        resp = self._send(route, method, body)
        self._check_status(resp, expected)
        return resp.json()

    # Smart wallets

    def get_identities(self) -> List[str]:
        """
        List the smart wallets of the current network.

        Returns:
            Smart wallet addresses
        """
        return self._call(self._network_route("/smartwallets"), "GET")

    def create_identity(self, forwarder: str, account: str) -> IdentityResponse:
        """
        Create a smart wallet owned by ``account``.

        Args:
            forwarder: Forwarder contract address
            account: Owner address

        Returns:
            Wallet address and creation transaction hash
        """
        json_body = self._call(
            self._network_route("/smartwallets"),
            "POST",
            {"forwarder": forwarder, "account": account},
            expected=(201,),
        )
        return IdentityResponse.from_wire(json_body)

    # Externally owned accounts

    def get_eoas(self) -> List[str]:
        return self._call("/ethereum/eoa", "GET")

    def create_eoa(self) -> EOA:
        json_body = self._call("/ethereum/eoa", "POST", {})
        return EOA(address=json_body['address'])

    def sign_message_with_eoa(self, eoa: str, hash: str) -> SignedMessage:
        """
        Have Rockside sign a message hash with one of its EOAs.

        Args:
            eoa: Address of the EOA
            hash: Hex encoded message hash

        Returns:
            The signed message
        """
        json_body = self._call(f"/ethereum/eoa/{eoa}/sign-message", "POST", {"message": hash})
        return SignedMessage(signed_message=json_body['signed_message'])

    def send_transaction(self, tx: Union[TransactionOpts, Dict[str, Any]]) -> RelayedTransactionResponse:
        """
        Send a transaction from a Rockside EOA.

        Args:
            tx: Transaction, either a TransactionOpts or a dict using its wire keys

        Returns:
            Transaction hash and tracking id
        """
        if not isinstance(tx, TransactionOpts):
            tx = TransactionOpts.model_validate(tx)
        json_body = self._call(self._network_route("/transaction"), "POST", tx.to_wire())
        return RelayedTransactionResponse.from_wire(json_body)

    # Encrypted accounts

    def create_encrypted_account(self, account: EncryptedAccount) -> None:
        """
        Store an encrypted account.

        An account that already exists (409) is not an error.
        """
        resp = self._send("/encryptedaccounts", "PUT", account.to_wire())
        self._check_status(resp, (201, 409))
        if resp.status_code == 409:
            self.logger.debug(f"Encrypted account {account.username} already exists")

    def connect_encrypted_account(self, username: str, password_hash: BytesLike) -> EncryptedKey:
        """
        Fetch the encrypted encryption key of an account.

        Args:
            username: Account username
            password_hash: Hash of the account password

        Returns:
            Encrypted key and its IV
        """
        json_body = self._call("/encryptedaccounts/connect", "POST", {
            "username": username,
            "password_hash": buf_to_hex(password_hash),
        })
        return EncryptedKey.from_wire(json_body)

    def create_encrypted_wallet(self, account: EncryptedAccount, wallet: EncryptedWallet) -> None:
        body = {
            "username": account.username,
            "password_hash": buf_to_hex(account.password_hash),
        }
        body.update(wallet.to_wire())
        resp = self._send("/encryptedaccounts/wallets", "PUT", body)
        self._check_status(resp, (201,))

    def get_encrypted_wallets(self, username: str, password_hash: BytesLike) -> List[EncryptedWallet]:
        """
        List the encrypted wallets stored for an account.

        Args:
            username: Account username
            password_hash: Hash of the account password

        Returns:
            Encrypted wallets, mnemonic and IV decoded to bytes
        """
        json_body = self._call("/encryptedaccounts/wallets", "POST", {
            "username": username,
            "password_hash": buf_to_hex(password_hash),
        })
        return [EncryptedWallet.from_wire(record) for record in json_body]

    # Relayable identities

    def deploy_identity_contract(self, address: str) -> DeployedIdentity:
        json_body = self._call(
            self._network_route("/contracts/relayableidentity"),
            "POST",
            {"account": address},
            expected=(201,),
        )
        return DeployedIdentity.from_wire(json_body)

    def get_relay_params(self, identity: str, account: str, channel: Union[int, str]) -> RelayParams:
        """
        Get the relayer and nonce to use for the next relayed transaction.

        Args:
            identity: Relayable identity contract address
            account: Account signing the transaction
            channel: Nonce channel

        Returns:
            Nonce and relayer address
        """
        route = self._network_route(f"/contracts/relayableidentity/{identity}/relayParams")
        json_body = self._call(route, "POST", {
            "account": account,
            "channel_id": str(channel),
        })
        return RelayParams.from_wire(json_body)

    def relay_transaction(self, identity: str, tx: ExecuteTransaction) -> RelayedTransactionResponse:
        """
        Relay a signed meta-transaction through an identity contract.

        Args:
            identity: Relayable identity contract address
            tx: Signed transaction, nonce taken from get_relay_params

        Returns:
            Transaction hash and tracking id
        """
        route = self._network_route(f"/contracts/relayableidentity/{identity}/relayExecute")
        json_body = self._call(route, "POST", tx.to_wire())
        return RelayedTransactionResponse.from_wire(json_body)

    def get_transaction(self, tx_hash_or_tracking_id: str) -> TransactionInfosResponse:
        json_body = self._call(self._network_route(f"/transactions/{tx_hash_or_tracking_id}"), "GET")
        return TransactionInfosResponse.from_wire(json_body)

    # JSON-RPC

    def get_rpc_url(self) -> str:
        """URL of the Rockside JSON-RPC endpoint for the configured network"""
        return f"{self.base_url}{self._network_route('/jsonrpc')}"

    def get_token(self) -> Optional[str]:
        return self.token

    def get_web3(self) -> Web3:
        """
        Build a Web3 instance talking to the Rockside JSON-RPC endpoint.

        Returns:
            Web3 using the client credentials on every RPC request
        """
        request_kwargs: Dict[str, Any] = {"headers": self.headers}
        if self.timeout is not None:
            request_kwargs["timeout"] = self.timeout
        return Web3(Web3.HTTPProvider(self.get_rpc_url(), request_kwargs=request_kwargs))
