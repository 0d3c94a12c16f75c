#!/usr/bin/env python3
"""
Relay a pre-signed meta-transaction through a relayable identity.
"""
import os
import sys

from rockside_sdk import ExecuteTransaction, RocksideApi


def main():
    """
    The client is configured from ROCKSIDE_* variables. The signature must
    be computed by the caller for the nonce printed by the first step.
    """
    identity = os.environ.get("IDENTITY_ADDRESS")
    account = os.environ.get("ACCOUNT_ADDRESS")
    if not identity or not account:
        print("ERROR: IDENTITY_ADDRESS and ACCOUNT_ADDRESS environment variables are required")
        return

    client = RocksideApi.from_env()

    # 1. Nonce and relayer must be fetched before signing
    params = client.get_relay_params(identity, account, channel=0)
    print(f"Relayer: {params.relayer}, nonce: {params.nonce}")

    signature = os.environ.get("SIGNATURE")
    if not signature:
        print("Sign the transaction for this nonce and set SIGNATURE to relay it")
        return

    # 2. Relay the signed transaction
    tx = ExecuteTransaction(
        relayer=params.relayer,
        from_address=account,
        to=os.environ.get("DESTINATION", account),
        value=int(os.environ.get("VALUE_WEI", "0")),
        data=b"",
        signature=signature,
    )
    relayed = client.relay_transaction(identity, tx)
    print(f"Transaction hash: {relayed.transaction_hash}")
    print(f"Tracking id: {relayed.tracking_id}")


if __name__ == "__main__":
    sys.exit(main())
