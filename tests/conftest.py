"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from aura_sdk.client import AuraClient
from aura_sdk.config import AuraConfig, CacheConfig, RedisConfig
from tests.factories import FakeTransport


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def client(fake_transport: FakeTransport) -> AuraClient:
    return AuraClient(
        "test-key",
        "https://aura.example.com",
        transport=fake_transport,
    )


@pytest.fixture()
def sample_asset() -> dict[str, Any]:
    return {
        "interface": "V1_NFT",
        "id": "AssetMint111",
        "content": {"metadata": {"name": "Test NFT", "symbol": "TST"}},
        "ownership": {"owner": "Owner111", "frozen": False, "delegated": False},
        "mutable": True,
        "burnt": False,
    }


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_config() -> AuraConfig:
    return AuraConfig(
        api_key="test-key",
        base_url="https://aura.example.com",
        request_timeout=10,
        cache=CacheConfig(
            backend="memory",
            ttl_seconds=120,
            redis=RedisConfig(url="redis://cache.example.com:6379/1"),
        ),
    )


SAMPLE_YAML = textwrap.dedent("""\
    api_key: "key-123"
    base_url: "https://aura.example.com/"
    request_timeout: 10
    cache:
      backend: memory
      ttl_seconds: 120
      redis:
        url: "redis://cache.example.com:6379/1"
        key_prefix: "test:"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
