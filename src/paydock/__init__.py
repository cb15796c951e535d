"""
Python client for the Paydock payments API.

The most useful pieces are re-exported here so integrators can
``from paydock import ...`` without navigating the package.
"""

from .api import create_client, create_service_helper
from .core import (
    Charge,
    ChargeItemResponse,
    ChargeItemsResponse,
    ChargeRefundResponse,
    ChargeRequest,
    ChargeResponse,
    ChargeSearchRequest,
    Charges,
    ConfigError,
    Customer,
    CustomerItemResponse,
    CustomerItemsResponse,
    CustomerRequest,
    CustomerSearchRequest,
    Customers,
    DeserializationError,
    Environment,
    ErrorKind,
    ErrorPayloadError,
    ErrorResponse,
    HttpMethod,
    PaydockClient,
    PaydockConfig,
    PaydockError,
    PaymentSource,
    ResponseException,
    ServiceHelper,
    TimeoutException,
    load_config,
)

__all__ = (
    "Charge",
    "ChargeItemResponse",
    "ChargeItemsResponse",
    "ChargeRefundResponse",
    "ChargeRequest",
    "ChargeResponse",
    "ChargeSearchRequest",
    "Charges",
    "ConfigError",
    "Customer",
    "CustomerItemResponse",
    "CustomerItemsResponse",
    "CustomerRequest",
    "CustomerSearchRequest",
    "Customers",
    "DeserializationError",
    "Environment",
    "ErrorKind",
    "ErrorPayloadError",
    "ErrorResponse",
    "HttpMethod",
    "PaydockClient",
    "PaydockConfig",
    "PaydockError",
    "PaymentSource",
    "ResponseException",
    "ServiceHelper",
    "TimeoutException",
    "create_client",
    "create_service_helper",
    "load_config",
)
