#!/usr/bin/env python3
"""
Simple example of using the Rockside SDK.
"""
import os

from rockside_sdk import RocksideApi, Network, RocksideApiError


def main():
    """
    Demonstrate basic usage of the RocksideApi.

    This example shows how to:
    1. Initialize the client
    2. Create an EOA and a smart wallet owned by it
    3. Follow the wallet creation transaction
    """
    # Read configuration from environment
    BASE_URL = os.environ.get("ROCKSIDE_BASE_URL", "https://api.rockside.io")
    API_KEY = os.environ.get("ROCKSIDE_API_KEY")
    FORWARDER = os.environ.get("ROCKSIDE_FORWARDER")

    # Verify configuration
    if not API_KEY:
        print("ERROR: ROCKSIDE_API_KEY environment variable is required")
        return

    if not FORWARDER:
        print("ERROR: ROCKSIDE_FORWARDER environment variable is required")
        return

    # Initialize the client
    client = RocksideApi(
        base_url=BASE_URL,
        network=Network.ROPSTEN,
        apikey=API_KEY,
    )

    try:
        eoa = client.create_eoa()
        print(f"EOA created: {eoa.address}")

        identity = client.create_identity(FORWARDER, eoa.address)
        print(f"Smart wallet: {identity.address}")
        print(f"Transaction hash: {identity.transaction_hash}")

        infos = client.get_transaction(identity.transaction_hash)
        print(f"Status: {infos.status or 'pending'}")

        print(f"JSON-RPC endpoint: {client.get_rpc_url()}")

    except RocksideApiError as e:
        print(f"Rockside API error ({e.status_code}): {e}")

if __name__ == "__main__":
    main()
