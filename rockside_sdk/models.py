"""
Data models for the Rockside SDK.

Request models know how to render themselves in the API's wire format
(``to_wire``) and response models how to read it (``from_wire``). Both
directions are pure so they can be tested without any HTTP traffic.
"""
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .utils import buf_to_hex, hex_to_buf, to_hex_quantity

Quantity = Union[str, int]


def _binary(value: Any) -> Any:
    # Text is never decoded implicitly: hex strings go through hex_to_buf
    if isinstance(value, str):
        raise ValueError("Binary field expects bytes, got str (decode hex with hex_to_buf)")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


Binary = Annotated[bytes, BeforeValidator(_binary)]


class IdentityResponse(BaseModel):
    """Smart wallet created through the API"""
    address: str
    transaction_hash: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "IdentityResponse":
        return cls(address=data["address"], transaction_hash=data["transaction_hash"])


class EOA(BaseModel):
    """Externally owned account custodied by Rockside"""
    address: str


class SignedMessage(BaseModel):
    signed_message: str


class DeployedIdentity(BaseModel):
    """Relayable identity contract deployment"""
    address: str
    tx_hash: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "DeployedIdentity":
        return cls(address=data["address"], tx_hash=data["transaction_hash"])


class RelayParams(BaseModel):
    """Parameters needed to sign a relayed transaction"""
    nonce: int
    relayer: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "RelayParams":
        return cls(nonce=int(data["nonce"]), relayer=data["relayer"])


class TransactionOpts(BaseModel):
    """Transaction sent from a Rockside EOA"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    from_address: str = Field(..., alias="from")
    to: Optional[str] = None
    value: Optional[Quantity] = None
    gas: Optional[Quantity] = None
    gas_price: Optional[Quantity] = Field(None, alias="gasPrice")
    data: Optional[str] = None
    nonce: Optional[int] = None

    def to_wire(self) -> Dict[str, Any]:
        """Request body, fields passed through as given"""
        return self.model_dump(by_alias=True, exclude_none=True)


class RelayedTransactionResponse(BaseModel):
    transaction_hash: str
    tracking_id: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "RelayedTransactionResponse":
        return cls(transaction_hash=data["transaction_hash"], tracking_id=data["tracking_id"])


class ExecuteTransaction(BaseModel):
    """
    Meta-transaction executed by a relayable identity.

    ``gas`` and ``gas_price`` are informational: the relayer picks them, so
    they are not part of the request body.
    """
    model_config = ConfigDict(populate_by_name=True)

    relayer: str
    from_address: str = Field(..., alias="from")
    to: str
    value: Quantity = 0
    data: Binary = b""
    signature: str
    gas: Optional[Quantity] = None
    gas_price: Optional[Quantity] = Field(None, alias="gasPrice")

    def to_wire(self) -> Dict[str, Any]:
        return {
            "relayer": self.relayer,
            "from": self.from_address,
            "to": self.to,
            "value": to_hex_quantity(self.value),
            "data": buf_to_hex(self.data),
            "signature": self.signature,
        }


class EncryptedAccount(BaseModel):
    """Account whose key material is encrypted client side before storage"""
    username: str
    iterations: int
    password_hash: Binary
    password_derived_key_hash: Binary
    encrypted_encryption_key: Binary
    encrypted_encryption_key_iv: Binary

    def to_wire(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "password_hash": buf_to_hex(self.password_hash),
            "encrypted_encryption_key": buf_to_hex(self.encrypted_encryption_key),
            "encrypted_encryption_key_iv": buf_to_hex(self.encrypted_encryption_key_iv),
            "iterations": self.iterations,
            "password_derived_key_hash": buf_to_hex(self.password_derived_key_hash),
        }


class EncryptedKey(BaseModel):
    """Encrypted encryption key returned when connecting an account"""
    data: Binary
    iv: Binary

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "EncryptedKey":
        return cls(
            data=hex_to_buf(data["encrypted_encryption_key"]),
            iv=hex_to_buf(data["encryption_key_iv"]),
        )


class EncryptedWallet(BaseModel):
    encrypted_mnemonic: Binary
    encrypted_mnemonic_iv: Binary

    def to_wire(self) -> Dict[str, Any]:
        return {
            "encrypted_mnemonic": buf_to_hex(self.encrypted_mnemonic),
            "encrypted_mnemonic_iv": buf_to_hex(self.encrypted_mnemonic_iv),
        }

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "EncryptedWallet":
        # The listing endpoint names the IV field differently from the upload
        return cls(
            encrypted_mnemonic=hex_to_buf(data["encrypted_mnemonic"]),
            encrypted_mnemonic_iv=hex_to_buf(data["mnemonic_iv"]),
        )


class TransactionReceiptLog(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: str
    block_hash: Optional[str] = None
    block_number: Optional[int] = None
    data: Optional[str] = None
    log_index: Optional[int] = None
    removed: bool = False
    topics: List[str] = Field(default_factory=list)
    transaction_hash: Optional[str] = None
    transaction_index: Optional[int] = None
    id: Optional[str] = None


class TransactionReceipt(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[int] = None
    cumulative_gas_used: Optional[int] = None
    logs: List[TransactionReceiptLog] = Field(default_factory=list)
    transaction_hash: Optional[str] = None
    contract_address: Optional[str] = None
    gas_used: Optional[int] = None
    block_hash: Optional[str] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None


class TransactionInfosResponse(BaseModel):
    """Transaction as tracked by Rockside, looked up by hash or tracking id"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    transaction_hash: Optional[str] = None
    tracking_id: Optional[str] = None
    from_address: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    data_length: Optional[int] = None
    value: Optional[Quantity] = None
    gas: Optional[Quantity] = None
    gas_price: Optional[Quantity] = None
    chain_id: Optional[int] = None
    receipt: Optional[TransactionReceipt] = None
    status: Optional[str] = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "TransactionInfosResponse":
        return cls.model_validate(data)

    @property
    def succeeded(self) -> bool:
        return self.status == "success"
