"""Unit tests for CLI argument parsing and command execution."""
from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from aura_sdk.cli import _run, build_parser
from aura_sdk.client import AuraClient
from tests.factories import FakeTransport, assets_page, rpc_error, rpc_ok


class TestBuildParser:
    def test_asset_command(self) -> None:
        args = build_parser().parse_args(["asset", "Mint111"])
        assert args.command == "asset"
        assert args.asset_id == "Mint111"

    def test_proof_command(self) -> None:
        args = build_parser().parse_args(["proof", "Mint111"])
        assert args.command == "proof"

    def test_owner_defaults(self) -> None:
        args = build_parser().parse_args(["owner", "Owner111"])
        assert args.owner_address == "Owner111"
        assert args.limit is None
        assert args.page is None
        assert args.all is False

    def test_owner_paging_flags(self) -> None:
        args = build_parser().parse_args(
            ["owner", "Owner111", "--limit", "50", "--page", "2", "--all"]
        )
        assert args.limit == 50
        assert args.page == 2
        assert args.all is True

    def test_signatures_command(self) -> None:
        args = build_parser().parse_args(["signatures", "Mint111", "--all"])
        assert args.command == "signatures"
        assert args.all is True

    def test_global_flags(self) -> None:
        args = build_parser().parse_args(
            ["--config", "/tmp/c.yaml", "--log-level", "DEBUG", "asset", "x"]
        )
        assert args.config == "/tmp/c.yaml"
        assert args.log_level == "DEBUG"

    def test_no_command(self) -> None:
        args = build_parser().parse_args([])
        assert args.command is None


def _use_transport(monkeypatch: pytest.MonkeyPatch, transport: FakeTransport) -> None:
    """Make AuraClient.from_config build a client on the fake transport."""
    client = AuraClient("k", "https://aura.example.com", transport=transport)
    monkeypatch.setattr(AuraClient, "from_config", classmethod(lambda cls, cfg: client))


class TestRun:
    @pytest.fixture()
    def config_path(self, tmp_path: Path) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text("api_key: k\nbase_url: https://aura.example.com\n")
        return path

    def _args(self, config_path: Path, *argv: str) -> argparse.Namespace:
        return build_parser().parse_args(["--config", str(config_path), *argv])

    @pytest.mark.asyncio
    async def test_asset_prints_json(
        self,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        transport = FakeTransport(rpc_ok({"id": "Mint111"}))
        _use_transport(monkeypatch, transport)

        code = await _run(self._args(config_path, "asset", "Mint111"))

        assert code == 0
        assert '"Mint111"' in capsys.readouterr().out
        assert transport.methods == ["getAsset"]

    @pytest.mark.asyncio
    async def test_error_exits_nonzero(
        self,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        transport = FakeTransport(rpc_error(-32000, "Invalid public key"))
        _use_transport(monkeypatch, transport)

        code = await _run(self._args(config_path, "proof", "bad"))

        assert code == 1
        assert "Invalid public key" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_owner_all_follows_pages(
        self,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        transport = FakeTransport(
            assets_page(2, total=3, limit=2, page=1),
            assets_page(1, total=3, limit=2, page=2),
        )
        _use_transport(monkeypatch, transport)

        code = await _run(self._args(config_path, "owner", "Owner111", "--limit", "2", "--all"))

        assert code == 0
        assert transport.pages == [1, 2]

    @pytest.mark.asyncio
    async def test_single_page_without_all(
        self,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        transport = FakeTransport(assets_page(2, total=10, limit=2))
        _use_transport(monkeypatch, transport)

        code = await _run(self._args(config_path, "owner", "Owner111", "--limit", "2"))

        assert code == 0
        assert len(transport.calls) == 1
        assert transport.calls[0][1]["params"] == {"ownerAddress": "Owner111", "limit": 2}

    @pytest.mark.asyncio
    async def test_paged_error_exits_nonzero(
        self,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        transport = FakeTransport(ConnectionError("down"))
        _use_transport(monkeypatch, transport)

        code = await _run(self._args(config_path, "signatures", "Mint111", "--all"))

        assert code == 1
