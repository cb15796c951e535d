"""
Configuration objects and helpers for the Paydock SDK.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .environment import SdkEnvironment, build_environment

__all__ = [
    "ConfigError",
    "Environment",
    "PaydockConfig",
    "load_config",
]

DEFAULT_TIMEOUT_MILLISECONDS = 60000

_PARAMETER_TO_ENV_KEY = {
    "secret_key": "PAYDOCK_SECRET_KEY",
    "environment": "PAYDOCK_ENVIRONMENT",
    "base_url": "PAYDOCK_BASE_URL",
    "timeout_milliseconds": "PAYDOCK_TIMEOUT_MILLISECONDS",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        if self is Environment.PRODUCTION:
            return "https://api.paydock.com/v1/"
        return "https://api-sandbox.paydock.com/v1/"

    @classmethod
    def parse(cls, raw: str) -> "Environment":
        value = raw.strip().lower()
        for member in cls:
            if member.value == value:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ConfigError(f"PAYDOCK_ENVIRONMENT must be one of {allowed}, got '{raw}'")


def _stringify(value: Any) -> str:
    if isinstance(value, Environment):
        return value.value
    return str(value)


def _normalize_base_url(raw_url: str) -> str:
    url = raw_url.strip()
    if not url:
        raise ConfigError("PAYDOCK_BASE_URL must not be empty")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"PAYDOCK_BASE_URL must be an http(s) URL, got '{raw_url}'")
    if not url.endswith("/"):
        url += "/"
    return url


def _parse_timeout(raw_timeout: str) -> int:
    try:
        return int(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"PAYDOCK_TIMEOUT_MILLISECONDS must be an integer, got '{raw_timeout}'"
        ) from exc


@dataclass(frozen=True)
class PaydockConfig:
    """
    Immutable settings shared by every request a dispatcher sends.

    ``secret_key`` is the default credential; facades may override it per call.
    ``base_url`` is validated and always ends with ``/``.
    """

    secret_key: str
    base_url: str = Environment.SANDBOX.base_url
    timeout_milliseconds: int = DEFAULT_TIMEOUT_MILLISECONDS
    environment: Environment = Environment.SANDBOX

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        if self.timeout_milliseconds <= 0:
            raise ConfigError("PAYDOCK_TIMEOUT_MILLISECONDS must be greater than zero")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_milliseconds / 1000

    @classmethod
    def for_environment(
        cls,
        secret_key: str,
        environment: Environment | str = Environment.SANDBOX,
        *,
        timeout_milliseconds: int = DEFAULT_TIMEOUT_MILLISECONDS,
    ) -> "PaydockConfig":
        env = environment if isinstance(environment, Environment) else Environment.parse(environment)
        return cls(
            secret_key=secret_key,
            base_url=env.base_url,
            timeout_milliseconds=timeout_milliseconds,
            environment=env,
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str] | SdkEnvironment) -> "PaydockConfig":
        env = values if isinstance(values, SdkEnvironment) else SdkEnvironment(variables=values)

        secret_key = env.get("PAYDOCK_SECRET_KEY", "").strip()
        if not secret_key:
            raise ConfigError("PAYDOCK_SECRET_KEY must be provided")

        environment = Environment.parse(env.get("PAYDOCK_ENVIRONMENT", "sandbox"))

        return cls(
            secret_key=secret_key,
            base_url=env.get("PAYDOCK_BASE_URL", environment.base_url),
            timeout_milliseconds=_parse_timeout(
                env.get("PAYDOCK_TIMEOUT_MILLISECONDS", str(DEFAULT_TIMEOUT_MILLISECONDS))
            ),
            environment=environment,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        secret_key: Optional[str] = None,
        environment: Optional[Environment | str] = None,
        base_url: Optional[str] = None,
        timeout_milliseconds: Optional[int | str] = None,
    ) -> "PaydockConfig":
        explicit = {
            "secret_key": secret_key,
            "environment": environment,
            "base_url": base_url,
            "timeout_milliseconds": timeout_milliseconds,
        }
        merged_overrides: Dict[str, str] = dict(overrides or {})
        for key, value in explicit.items():
            if value is None:
                continue
            merged_overrides[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)

        resolved = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(resolved)


def load_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    secret_key: Optional[str] = None,
    environment: Optional[Environment | str] = None,
    base_url: Optional[str] = None,
    timeout_milliseconds: Optional[int | str] = None,
) -> PaydockConfig:
    """
    Convenience wrapper that mirrors :meth:`PaydockConfig.from_env`.

    Settings may come from environment variables, a ``.env`` file, explicit
    ``overrides`` or keyword arguments; keyword arguments win over everything.
    """
    return PaydockConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        secret_key=secret_key,
        environment=environment,
        base_url=base_url,
        timeout_milliseconds=timeout_milliseconds,
    )
