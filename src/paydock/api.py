"""
Public, high-level helpers for building a Paydock client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import PaydockClient
from .core.config import Environment, PaydockConfig, load_config
from .core.dispatcher import ServiceHelper

__all__ = [
    "create_client",
    "create_service_helper",
]


def create_service_helper(
    config: PaydockConfig,
    *,
    session: Optional[requests.Session] = None,
) -> ServiceHelper:
    return ServiceHelper(config, session or requests.Session())


def create_client(
    *,
    config: Optional[PaydockConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    secret_key: Optional[str] = None,
    environment: Optional[Environment | str] = None,
    base_url: Optional[str] = None,
    timeout_milliseconds: Optional[int | str] = None,
    override_secret_key: Optional[str] = None,
) -> PaydockClient:
    """
    Construct a :class:`PaydockClient`.

    Callers can either supply a ready-made :class:`PaydockConfig` or let the
    helper assemble one from environment data. ``override_secret_key`` is
    applied per call and leaves the configuration untouched.
    """
    if config is not None:
        extras = (overrides, base, secret_key, environment, base_url, timeout_milliseconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built PaydockConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            secret_key=secret_key,
            environment=environment,
            base_url=base_url,
            timeout_milliseconds=timeout_milliseconds,
        )
    return PaydockClient(
        create_service_helper(cfg, session=session),
        override_secret_key=override_secret_key,
    )
