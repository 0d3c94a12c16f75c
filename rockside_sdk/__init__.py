"""
Rockside SDK - Python client for the Rockside relay API.
"""
from .client import RocksideApi
from .config import ApiKey, BearerToken, Network, load_options_from_env, resolve_credential
from .exceptions import ConfigurationError, HexDecodeError, RocksideApiError, RocksideError
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
    TransactionReceipt,
    TransactionReceiptLog,
)
from .utils import buf_to_hex, hex_to_buf, to_hex_quantity
from .version import __version__

__all__ = [
    "RocksideApi",
    "Network",
    "ApiKey",
    "BearerToken",
    "resolve_credential",
    "load_options_from_env",
    "RocksideError",
    "RocksideApiError",
    "ConfigurationError",
    "HexDecodeError",
    "EOA",
    "DeployedIdentity",
    "EncryptedAccount",
    "EncryptedKey",
    "EncryptedWallet",
    "ExecuteTransaction",
    "IdentityResponse",
    "RelayedTransactionResponse",
    "RelayParams",
    "SignedMessage",
    "TransactionInfosResponse",
    "TransactionOpts",
    "TransactionReceipt",
    "TransactionReceiptLog",
    "buf_to_hex",
    "hex_to_buf",
    "to_hex_quantity",
    "__version__",
]
