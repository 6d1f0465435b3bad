#!/usr/bin/env python3
"""
Example 1: Wallet Transfer

Loads (or creates) a wallet key file, prints its address forms and balance,
then transfers native VXS to a recipient.

Usage:
    python 01_wallet_transfer.py --key wallet.key --to Vx0... --amount 1000000000
    python 01_wallet_transfer.py --key wallet.key --to Vx0... --amount 1 --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path

from vexidus_sdk import (
    BundleBuilder, ClientConfig, VexidusError, WalletClient, WalletKeypair,
)


def main():
    parser = argparse.ArgumentParser(description="Transfer VXS from a wallet key file")
    parser.add_argument("--endpoint", default="local", help="RPC endpoint URL or alias (local, testnet)")
    parser.add_argument("--key", required=True, help="Path to the wallet key file (created if missing)")
    parser.add_argument("--to", required=True, help="Recipient address (Vx0..., 0x + 40 or 64 hex)")
    parser.add_argument("--amount", type=int, required=True, help="Amount in raw units (1 VXS = 1e9)")
    parser.add_argument("--dry-run", action="store_true", help="Build and sign only, do not submit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    print("=== Vexidus SDK Example 1: Wallet Transfer ===")

    key_path = Path(args.key)
    if key_path.exists():
        wallet = WalletKeypair.load(key_path)
    else:
        wallet = WalletKeypair.generate()
        wallet.save(key_path)
        print(f"Created new key file: {key_path}")

    print(f"Address (Vx0): {wallet.vx0_address()}")
    print(f"Address (hex): {wallet.hex_address()}")
    print(f"Address (EVM): {wallet.evm_address()}")

    if args.dry_run:
        bundle = BundleBuilder(wallet.hex_address()).transfer(args.to, "VXS", args.amount).sign(wallet)
        print(f"Bundle hash:   0x{bundle.hash().hex()}")
        print(f"Signed bundle: {bundle.to_hex()}")
        return 0

    with WalletClient(ClientConfig(endpoint=args.endpoint, debug=args.debug)) as client:
        print(f"Balance:       {client.get_balance(wallet.vx0_address())} VXS")
        tx_hash = client.transfer(wallet, args.to, "VXS", args.amount)
        print(f"Submitted:     {tx_hash}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except VexidusError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
