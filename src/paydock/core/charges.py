"""
Facade over the ``charges`` endpoints.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from .dispatcher import HttpMethod, ServiceHelper
from .models import (
    ChargeItemResponse,
    ChargeItemsResponse,
    ChargeRefundResponse,
    ChargeRequest,
    ChargeResponse,
    ChargeSearchRequest,
    serialize,
)
from .urls import build_query, escape_segment

__all__ = ["Charges", "charge_search_path"]


def _amount_body(amount: Optional[Decimal | int | str]) -> Optional[str]:
    if amount is None:
        return None
    return serialize({"amount": Decimal(str(amount))})


def charge_search_path(request: ChargeSearchRequest) -> str:
    """
    Build the relative ``charges/`` search path for ``request``.

    Only filters that are set are included, in the order Paydock documents.
    """
    reference = request.reference
    if not reference and request.transaction_external_id:
        logging.info("transaction_external_id is deprecated, sending it as reference")
        reference = request.transaction_external_id

    return build_query(
        "charges/",
        (
            ("skip", request.skip),
            ("limit", request.limit),
            ("subscription_id", request.subscription_id),
            ("gateway_id", request.gateway_id),
            ("company_id", request.company_id),
            ("created_at.from", request.created_at_from),
            ("created_at.to", request.created_at_to),
            ("search", request.search),
            ("status", request.status),
            ("archived", request.archived),
            ("reference", reference),
        ),
    )


class Charges:
    """
    Create, capture, refund and look up charges.

    ``override_secret_key`` replaces the configured secret key for every call
    made through this instance.
    """

    def __init__(
        self,
        service_helper: ServiceHelper,
        *,
        override_secret_key: Optional[str] = None,
    ) -> None:
        self.service_helper = service_helper
        self.override_secret_key = override_secret_key

    def _request(self, model, endpoint: str, method: HttpMethod, body: Optional[str] = None):
        return self.service_helper.request(
            model,
            endpoint,
            method,
            body,
            override_secret_key=self.override_secret_key,
        )

    def add(self, request: ChargeRequest) -> ChargeResponse:
        return self._request(ChargeResponse, "charges", HttpMethod.POST, serialize(request.to_dict()))

    def authorise(self, request: ChargeRequest) -> ChargeResponse:
        """Create a charge without capturing the funds."""
        return self._request(
            ChargeResponse,
            "charges?capture=false",
            HttpMethod.POST,
            serialize(request.to_dict()),
        )

    def capture(
        self,
        charge_id: str,
        amount: Optional[Decimal | int | str] = None,
    ) -> ChargeResponse:
        """Capture a previously authorised charge, optionally for part of the amount."""
        return self._request(
            ChargeResponse,
            f"charges/{escape_segment(charge_id)}/capture",
            HttpMethod.POST,
            _amount_body(amount),
        )

    def cancel_authorisation(self, charge_id: str) -> ChargeResponse:
        return self._request(
            ChargeResponse,
            f"charges/{escape_segment(charge_id)}/capture",
            HttpMethod.DELETE,
        )

    def get(self) -> ChargeItemsResponse:
        """List charges; Paydock caps the result at 1000 items."""
        return self._request(ChargeItemsResponse, "charges", HttpMethod.GET)

    def search(self, request: ChargeSearchRequest) -> ChargeItemsResponse:
        return self._request(ChargeItemsResponse, charge_search_path(request), HttpMethod.GET)

    def get_by_id(self, charge_id: str) -> ChargeItemResponse:
        return self._request(
            ChargeItemResponse,
            f"charges/{escape_segment(charge_id)}",
            HttpMethod.GET,
        )

    def refund(
        self,
        charge_id: str,
        amount: Optional[Decimal | int | str] = None,
    ) -> ChargeRefundResponse:
        """Refund a charge. Pass ``amount`` for a partial refund."""
        return self._request(
            ChargeRefundResponse,
            f"charges/{escape_segment(charge_id)}/refunds",
            HttpMethod.POST,
            _amount_body(amount),
        )

    def archive(self, charge_id: str) -> ChargeRefundResponse:
        return self._request(
            ChargeRefundResponse,
            f"charges/{escape_segment(charge_id)}",
            HttpMethod.DELETE,
        )
