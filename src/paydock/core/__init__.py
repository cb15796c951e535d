"""
Core primitives: configuration, request dispatch and endpoint facades.
"""

from .charges import Charges, charge_search_path
from .client import PaydockClient
from .config import ConfigError, Environment, PaydockConfig, load_config
from .customers import Customers, customer_search_path
from .dispatcher import SECRET_KEY_HEADER, HttpMethod, ServiceHelper, deserialize
from .environment import SdkEnvironment, build_environment
from .errors import (
    DeserializationError,
    ErrorKind,
    ErrorPayloadError,
    ErrorResponse,
    PaydockError,
    ResponseException,
    TimeoutException,
)
from .models import (
    Charge,
    ChargeItemResponse,
    ChargeItemsResponse,
    ChargeRefundResponse,
    ChargeRequest,
    ChargeResponse,
    ChargeSearchRequest,
    Customer,
    CustomerItemResponse,
    CustomerItemsResponse,
    CustomerRequest,
    CustomerSearchRequest,
    PaymentSource,
)

__all__ = [
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
    "SECRET_KEY_HEADER",
    "SdkEnvironment",
    "ServiceHelper",
    "TimeoutException",
    "build_environment",
    "charge_search_path",
    "customer_search_path",
    "deserialize",
    "load_config",
]
