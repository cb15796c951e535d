"""Tests for the command-line interface."""

from __future__ import annotations

import io

import pytest
import requests

from conftest import make_response, make_session
from paydock.cli import EXIT_API_ERROR, EXIT_CONFIG_ERROR, EXIT_OK, build_parser, run_cli
from paydock.core.dispatcher import SECRET_KEY_HEADER


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("PAYDOCK_SECRET_KEY", "PAYDOCK_ENVIRONMENT", "PAYDOCK_BASE_URL", "PAYDOCK_TIMEOUT_MILLISECONDS"):
        monkeypatch.delenv(key, raising=False)


def _run(argv, session):
    out = io.StringIO()
    code = run_cli(
        ["--env-file", "missing.env", "--set", "PAYDOCK_SECRET_KEY=sk_cli", *argv],
        session=session,
        stdout=out,
    )
    return code, out.getvalue()


def test_charge_search_prints_raw_body() -> None:
    body = '{"status": 200, "resource": {"data": []}}'
    session = make_session(make_response(200, body))

    code, output = _run(["charge-search", "--limit", "10", "--status", "complete"], session)

    assert code == EXIT_OK
    assert output == body + "\n"
    url = session.request.call_args.args[1]
    assert url == "https://api-sandbox.paydock.com/v1/charges/?limit=10&status=complete"


def test_refund_with_amount_and_secret_key() -> None:
    session = make_session(make_response(200, "{}"))

    code, _ = _run(["--secret-key", "sk_merchant", "charge-refund", "ch_1", "--amount", "2.50"], session)

    assert code == EXIT_OK
    args, kwargs = session.request.call_args
    assert args == ("POST", "https://api-sandbox.paydock.com/v1/charges/ch_1/refunds")
    assert kwargs["data"] == b'{"amount": 2.5}'
    assert kwargs["headers"][SECRET_KEY_HEADER] == "sk_merchant"


def test_customer_search_booleans() -> None:
    session = make_session(make_response(200, "{}"))

    code, _ = _run(["customer-search", "--archived", "false", "--sortdirection", "ASC"], session)

    assert code == EXIT_OK
    assert session.request.call_args.args[1].endswith("customers/?sortdirection=ASC&archived=false")


def test_api_error_prints_body_and_exits_2() -> None:
    body = '{"status": 404, "error": {"message": "Not found"}}'
    session = make_session(make_response(404, body))

    code, output = _run(["charge-get", "missing"], session)

    assert code == EXIT_API_ERROR
    assert output == body + "\n"


def test_timeout_exits_2() -> None:
    session = make_session(requests.ConnectionError("reset"))

    code, output = _run(["customer-get", "cus_1"], session)

    assert code == EXIT_API_ERROR
    assert output == ""


def test_missing_secret_key_is_config_error() -> None:
    session = make_session()

    code = run_cli(["--env-file", "missing.env", "charge-get", "ch_1"], session=session, stdout=io.StringIO())

    assert code == EXIT_CONFIG_ERROR
    session.request.assert_not_called()


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_invalid_amount_is_rejected() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["charge-capture", "ch_1", "--amount", "ten"])
