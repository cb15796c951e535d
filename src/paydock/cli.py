"""
Command-line interface for exercising the Paydock APIs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Iterable, Sequence, TextIO, Tuple

import requests

from .api import create_client
from .core.client import PaydockClient
from .core.config import ConfigError, load_config
from .core.errors import PaydockError, ResponseException
from .core.models import ChargeSearchRequest, CustomerSearchRequest

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_API_ERROR = 2


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'") from exc


def _boolean(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"Expected true or false, got '{value}'")


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _charge_get(client: PaydockClient, args: argparse.Namespace) -> str:
    return client.charges.get_by_id(args.charge_id).json_response


def _charge_search(client: PaydockClient, args: argparse.Namespace) -> str:
    request = ChargeSearchRequest(
        skip=args.skip,
        limit=args.limit,
        subscription_id=args.subscription_id,
        gateway_id=args.gateway_id,
        company_id=args.company_id,
        created_at_from=args.created_at_from,
        created_at_to=args.created_at_to,
        search=args.search,
        status=args.status,
        archived=args.archived,
        reference=args.reference,
    )
    return client.charges.search(request).json_response


def _charge_refund(client: PaydockClient, args: argparse.Namespace) -> str:
    return client.charges.refund(args.charge_id, args.amount).json_response


def _charge_capture(client: PaydockClient, args: argparse.Namespace) -> str:
    return client.charges.capture(args.charge_id, args.amount).json_response


def _charge_archive(client: PaydockClient, args: argparse.Namespace) -> str:
    return client.charges.archive(args.charge_id).json_response


def _customer_get(client: PaydockClient, args: argparse.Namespace) -> str:
    return client.customers.get_by_id(args.customer_id).json_response


def _customer_search(client: PaydockClient, args: argparse.Namespace) -> str:
    request = CustomerSearchRequest(
        id=args.id,
        skip=args.skip,
        limit=args.limit,
        search=args.search,
        sortkey=args.sortkey,
        sortdirection=args.sortdirection,
        gateway_id=args.gateway_id,
        archived=args.archived,
        reference=args.reference,
        payment_source_id=args.payment_source_id,
    )
    return client.customers.search(request).json_response


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--skip", type=int, help="Number of records to skip")
    parser.add_argument("--limit", type=int, help="Maximum number of records to return")
    parser.add_argument("--search", help="Free-text search")
    parser.add_argument("--gateway-id", help="Only records for this gateway")
    parser.add_argument("--archived", type=_boolean, help="true or false")
    parser.add_argument("--reference", help="Only records with this reference")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paydock",
        description="Call the Paydock API and print the raw JSON response",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYDOCK_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )
    parser.add_argument(
        "--secret-key",
        help="Authenticate with this secret key instead of PAYDOCK_SECRET_KEY",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    charge_get = commands.add_parser("charge-get", help="Fetch a single charge")
    charge_get.add_argument("charge_id")
    charge_get.set_defaults(handler=_charge_get)

    charge_search = commands.add_parser("charge-search", help="Search charges")
    _add_paging(charge_search)
    charge_search.add_argument("--subscription-id")
    charge_search.add_argument("--company-id")
    charge_search.add_argument("--created-at-from", help="Lower bound on created_at")
    charge_search.add_argument("--created-at-to", help="Upper bound on created_at")
    charge_search.add_argument("--status", help="Charge status, e.g. complete")
    charge_search.set_defaults(handler=_charge_search)

    charge_refund = commands.add_parser("charge-refund", help="Refund a charge")
    charge_refund.add_argument("charge_id")
    charge_refund.add_argument("--amount", type=_amount, help="Partial refund amount")
    charge_refund.set_defaults(handler=_charge_refund)

    charge_capture = commands.add_parser("charge-capture", help="Capture an authorised charge")
    charge_capture.add_argument("charge_id")
    charge_capture.add_argument("--amount", type=_amount, help="Partial capture amount")
    charge_capture.set_defaults(handler=_charge_capture)

    charge_archive = commands.add_parser("charge-archive", help="Archive a charge")
    charge_archive.add_argument("charge_id")
    charge_archive.set_defaults(handler=_charge_archive)

    customer_get = commands.add_parser("customer-get", help="Fetch a single customer")
    customer_get.add_argument("customer_id")
    customer_get.set_defaults(handler=_customer_get)

    customer_search = commands.add_parser("customer-search", help="Search customers")
    _add_paging(customer_search)
    customer_search.add_argument("--id", help="Customer id")
    customer_search.add_argument("--sortkey")
    customer_search.add_argument("--sortdirection", choices=("ASC", "DESC"))
    customer_search.add_argument("--payment-source-id")
    customer_search.set_defaults(handler=_customer_search)

    return parser


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    session: requests.Session | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout if stdout is not None else sys.stdout

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return EXIT_CONFIG_ERROR

    client = create_client(
        config=config,
        session=session or requests.Session(),
        override_secret_key=args.secret_key,
    )
    handler: Callable[[PaydockClient, argparse.Namespace], str] = args.handler

    try:
        body = handler(client, args)
    except ResponseException as exc:
        logging.error("Paydock request failed (%s): %s", exc.kind.value, exc)
        if exc.body:
            out.write(exc.body + "\n")
        return EXIT_API_ERROR
    except PaydockError as exc:
        logging.error("Paydock request failed: %s", exc)
        return EXIT_API_ERROR

    out.write(body + "\n")
    return EXIT_OK


def main() -> None:
    sys.exit(run_cli())
