"""
Minimal script that uses the public API to refund a Paydock charge.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

from paydock import ConfigError, ResponseException, create_client, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Refund a charge using the SDK API")
    parser.add_argument("charge_id", help="Id of the charge to refund")
    parser.add_argument(
        "--amount",
        type=Decimal,
        help="Refund only part of the charge (e.g. 10.50)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYDOCK_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    try:
        response = client.charges.refund(args.charge_id, args.amount)
    except ResponseException as exc:
        if exc.error_response is not None:
            logging.error(
                "Refund rejected (%s): %s",
                exc.error_response.code,
                exc.error_response.message,
            )
        else:
            logging.error("Refund failed: %s", exc)
        return 1

    charge = response.charge
    if charge is not None:
        logging.info("Charge %s is now %s", charge.id, charge.status)
    print(response.json_response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
