"""
Facade over the ``customers`` endpoints.
"""

from __future__ import annotations

from typing import Optional

from .dispatcher import HttpMethod, ServiceHelper
from .models import (
    CustomerItemResponse,
    CustomerItemsResponse,
    CustomerRequest,
    CustomerSearchRequest,
    serialize,
)
from .urls import build_query, escape_segment

__all__ = ["Customers", "customer_search_path"]


def customer_search_path(request: CustomerSearchRequest) -> str:
    return build_query(
        "customers/",
        (
            ("id", request.id),
            ("skip", request.skip),
            ("limit", request.limit),
            ("search", request.search),
            ("sortkey", request.sortkey),
            ("sortdirection", request.sortdirection),
            ("gateway_id", request.gateway_id),
            ("archived", request.archived),
            ("reference", request.reference),
            ("payment_source_id", request.payment_source_id),
        ),
    )


class Customers:
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

    def add(self, request: CustomerRequest) -> CustomerItemResponse:
        return self._request(
            CustomerItemResponse,
            "customers",
            HttpMethod.POST,
            serialize(request.to_dict()),
        )

    def get(self) -> CustomerItemsResponse:
        return self._request(CustomerItemsResponse, "customers", HttpMethod.GET)

    def search(self, request: CustomerSearchRequest) -> CustomerItemsResponse:
        return self._request(CustomerItemsResponse, customer_search_path(request), HttpMethod.GET)

    def get_by_id(self, customer_id: str) -> CustomerItemResponse:
        return self._request(
            CustomerItemResponse,
            f"customers/{escape_segment(customer_id)}",
            HttpMethod.GET,
        )

    def update(self, customer_id: str, request: CustomerRequest) -> CustomerItemResponse:
        """Paydock updates customers with POST rather than PUT."""
        return self._request(
            CustomerItemResponse,
            f"customers/{escape_segment(customer_id)}",
            HttpMethod.POST,
            serialize(request.to_dict()),
        )

    def archive(self, customer_id: str) -> CustomerItemResponse:
        return self._request(
            CustomerItemResponse,
            f"customers/{escape_segment(customer_id)}",
            HttpMethod.DELETE,
        )
