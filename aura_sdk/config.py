"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://mainnet-aura.metaplex.com"
CACHE_BACKENDS = ("none", "memory", "redis")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RedisConfig:
    url: str = "redis://localhost:6379/0"
    key_prefix: str = "aura:"


@dataclass(frozen=True)
class CacheConfig:
    backend: str = "none"
    ttl_seconds: int = 60
    redis: RedisConfig = field(default_factory=RedisConfig)


@dataclass(frozen=True)
class AuraConfig:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    request_timeout: int = 30
    cache: CacheConfig = field(default_factory=CacheConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_cache(raw: dict[str, Any]) -> CacheConfig:
    redis_raw = raw.get("redis", {})
    return CacheConfig(
        backend=str(raw.get("backend", "none")).lower(),
        ttl_seconds=int(raw.get("ttl_seconds", 60)),
        redis=RedisConfig(
            url=redis_raw.get("url", RedisConfig.url),
            key_prefix=redis_raw.get("key_prefix", RedisConfig.key_prefix),
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AuraConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            current working directory.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path.cwd() / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AuraConfig(
        api_key=raw.get("api_key", ""),
        base_url=str(raw.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        request_timeout=int(raw.get("request_timeout", 30)),
        cache=_build_cache(raw.get("cache", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AuraConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.api_key:
        raise ValueError("api_key must be configured")
    if not cfg.base_url:
        raise ValueError("base_url must not be empty")
    if cfg.request_timeout <= 0:
        raise ValueError("request_timeout must be positive")
    if cfg.cache.backend not in CACHE_BACKENDS:
        raise ValueError(
            f"Unknown cache backend '{cfg.cache.backend}', "
            f"expected one of {', '.join(CACHE_BACKENDS)}"
        )
    if cfg.cache.ttl_seconds < 0:
        raise ValueError("cache.ttl_seconds must not be negative")
