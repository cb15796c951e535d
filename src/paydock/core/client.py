"""
Aggregate client bundling one dispatcher with the endpoint facades.
"""

from __future__ import annotations

from typing import Optional

import requests

from .charges import Charges
from .config import PaydockConfig
from .customers import Customers
from .dispatcher import ServiceHelper

__all__ = ["PaydockClient"]


class PaydockClient:
    """
    Thin convenience wrapper exposing ``charges`` and ``customers``.

    The dispatcher is always injected; use :func:`paydock.create_client` to
    build one from configuration.
    """

    def __init__(
        self,
        service_helper: ServiceHelper,
        *,
        override_secret_key: Optional[str] = None,
    ) -> None:
        self.service_helper = service_helper
        self.charges = Charges(service_helper, override_secret_key=override_secret_key)
        self.customers = Customers(service_helper, override_secret_key=override_secret_key)

    @property
    def config(self) -> PaydockConfig:
        return self.service_helper.config

    @property
    def session(self) -> requests.Session:
        return self.service_helper.session

    def with_secret_key(self, secret_key: str) -> "PaydockClient":
        """Return a client sharing this dispatcher but authenticating as ``secret_key``."""
        return PaydockClient(self.service_helper, override_secret_key=secret_key)
