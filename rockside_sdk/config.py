"""
Client configuration: networks, credentials and environment loading.
"""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.rockside.io"
DEFAULT_NETWORK = "ropsten"


class Network(Enum):
    """Ethereum networks served by Rockside, as (chain id, name) pairs."""
    ROPSTEN = (3, "ropsten")
    MAINNET = (1, "mainnet")

    @property
    def chain_id(self) -> int:
        return self.value[0]

    @property
    def slug(self) -> str:
        """Network name as used in API routes."""
        return self.value[1]

    @classmethod
    def parse(cls, value: Any) -> "Network":
        """
        Coerce a user supplied network into a Network member.

        Args:
            value: A Network, a (chain_id, name) pair, a network name or a chain id

        Returns:
            The matching Network

        Raises:
            ConfigurationError: If the value matches no known network
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, (tuple, list)):
            for network in cls:
                if tuple(value) == network.value:
                    return network
        elif isinstance(value, str):
            for network in cls:
                if value.strip().lower() == network.slug:
                    return network
        elif isinstance(value, int) and not isinstance(value, bool):
            for network in cls:
                if value == network.chain_id:
                    return network

        available = ", ".join(f"{n.chain_id}:{n.slug}" for n in cls)
        raise ConfigurationError(f"Unknown network {value!r}. Available networks: {available}")


@dataclass(frozen=True)
class ApiKey:
    """API key credential, sent in the ``apikey`` header."""
    value: str

    def headers(self) -> Dict[str, str]:
        return {"apikey": self.value}

    def __repr__(self) -> str:
        return "ApiKey(value='***')"


@dataclass(frozen=True)
class BearerToken:
    """Access token credential, sent as an ``Authorization: Bearer`` header."""
    value: str

    def headers(self) -> Dict[str, str]:
        return {"Authorization": "Bearer " + self.value}

    def __repr__(self) -> str:
        return "BearerToken(value='***')"


Credential = Union[ApiKey, BearerToken]


def resolve_credential(apikey: Optional[str] = None, token: Optional[str] = None) -> Credential:
    """
    Build the credential from exactly one of an API key or a token.

    Empty strings count as not provided.

    Raises:
        ConfigurationError: If both or neither are provided
    """
    if apikey and token:
        raise ConfigurationError("Both access token and api key provided. Only one needed.")

    if not apikey and not token:
        raise ConfigurationError("No authentication method provided: define apikey or token.")

    if apikey:
        return ApiKey(apikey)
    return BearerToken(token)


def load_options_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read client options from ROCKSIDE_* environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Keyword arguments for RocksideApi
    """
    env = os.environ if environ is None else environ
    return {
        "base_url": env.get("ROCKSIDE_BASE_URL", DEFAULT_BASE_URL),
        "network": Network.parse(env.get("ROCKSIDE_NETWORK", DEFAULT_NETWORK)),
        "apikey": env.get("ROCKSIDE_API_KEY") or None,
        "token": env.get("ROCKSIDE_TOKEN") or None,
    }
