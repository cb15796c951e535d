"""
HTTP dispatch for the Paydock API.

:class:`ServiceHelper` performs exactly one request per call and turns every
failure into either a :class:`~paydock.core.errors.TimeoutException` (no reply)
or a :class:`~paydock.core.errors.ResponseException` (the server rejected the
request and said why).
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import requests

from .config import PaydockConfig
from .errors import (
    DeserializationError,
    ErrorPayloadError,
    ErrorResponse,
    ResponseException,
    TimeoutException,
)
from .models import parse_json

__all__ = [
    "HttpMethod",
    "SECRET_KEY_HEADER",
    "ServiceHelper",
    "deserialize",
]

SECRET_KEY_HEADER = "x-user-secret-key"

T = TypeVar("T")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


def _decode(response: requests.Response) -> str:
    return response.content.decode("utf-8")


def _lossy_text(response: requests.Response) -> str:
    return response.content.decode("utf-8", errors="replace")


def _translate_error_response(response: requests.Response) -> ResponseException:
    try:
        body = _decode(response)
    except UnicodeDecodeError as exc:
        raise ErrorPayloadError(
            f"Paydock responded with {response.status_code} and a body that is not UTF-8",
            status_code=response.status_code,
            body=_lossy_text(response),
        ) from exc
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ErrorPayloadError(
            f"Paydock responded with {response.status_code} and a body that is not JSON: {body!r}",
            status_code=response.status_code,
            body=body,
        ) from exc
    if not isinstance(payload, dict):
        raise ErrorPayloadError(
            f"Paydock responded with {response.status_code} and a non-object error body: {body!r}",
            status_code=response.status_code,
            body=body,
        )

    error_response = ErrorResponse.from_response(payload)
    message = error_response.message or f"Paydock responded with {response.status_code}"
    return ResponseException(
        message,
        error_response=error_response,
        status_code=response.status_code,
        body=body,
    )


class ServiceHelper:
    """
    Sends requests to Paydock using an injected session and configuration.
    """

    def __init__(
        self,
        config: PaydockConfig,
        session: requests.Session,
    ) -> None:
        self.config = config
        self.session = session

    def _headers(
        self,
        exclude_secret_key: bool,
        override_secret_key: Optional[str],
    ) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if not exclude_secret_key:
            headers[SECRET_KEY_HEADER] = override_secret_key or self.config.secret_key
        return headers

    def call(
        self,
        endpoint: str,
        method: HttpMethod,
        json_body: Optional[str] = None,
        *,
        exclude_secret_key: bool = False,
        override_secret_key: Optional[str] = None,
    ) -> str:
        """
        Call ``endpoint`` (relative to the configured base URL) and return the
        response text exactly as received.

        ``json_body`` is sent for POST and PUT only; ``None`` sends an empty body.
        """
        method = HttpMethod(method)
        url = self.config.base_url + endpoint
        kwargs: Dict[str, Any] = {
            "headers": self._headers(exclude_secret_key, override_secret_key),
            "timeout": self.config.timeout_seconds,
        }
        if method.has_body:
            kwargs["data"] = (json_body or "").encode("utf-8")

        logging.info("Calling Paydock %s %s", method.value, url)
        try:
            response = self.session.request(method.value, url, **kwargs)
        except requests.RequestException as exc:
            logging.warning("No response from Paydock for %s %s: %s", method.value, url, exc)
            raise TimeoutException(f"No response from Paydock for {method.value} {url}") from exc

        if not 200 <= response.status_code < 300:
            logging.warning(
                "Paydock rejected %s %s with status %s",
                method.value,
                url,
                response.status_code,
            )
            raise _translate_error_response(response)

        try:
            return _decode(response)
        except UnicodeDecodeError as exc:
            raise DeserializationError(
                f"Paydock response to {method.value} {url} is not valid UTF-8",
                body=_lossy_text(response),
            ) from exc

    def request(
        self,
        model: Type[T],
        endpoint: str,
        method: HttpMethod,
        json_body: Optional[str] = None,
        *,
        exclude_secret_key: bool = False,
        override_secret_key: Optional[str] = None,
    ) -> T:
        """
        Like :meth:`call`, but parse the reply into ``model``.

        ``model`` must provide ``from_payload(payload, json_response=...)``;
        the raw text is attached as ``json_response``.
        """
        text = self.call(
            endpoint,
            method,
            json_body,
            exclude_secret_key=exclude_secret_key,
            override_secret_key=override_secret_key,
        )
        return deserialize(model, text)


def deserialize(model: Type[T], text: str) -> T:
    factory: Callable[..., T] = getattr(model, "from_payload")
    try:
        payload = parse_json(text)
        if not isinstance(payload, dict):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        return factory(payload, json_response=text)
    except (ValueError, TypeError, AttributeError, ArithmeticError) as exc:
        raise DeserializationError(
            f"Failed to parse Paydock response as {model.__name__}: {exc}",
            body=text,
        ) from exc
