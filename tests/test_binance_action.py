from __future__ import annotations

import asyncio
import json
from pathlib import Path

from blockchains.binance.action import BinanceAction
from blockchains.binance.api import BinanceApi
from conftest import ASSET_INFOS_URL, DEX_URL, FakeHttp, binance_responses, make_logo

TIMESTAMP = "2020-10-03T12:37:57.000+00:00"


def _action(http: FakeHttp, root: Path) -> BinanceAction:
    api = BinanceApi(http, dex_url=DEX_URL, asset_infos_url=ASSET_INFOS_URL)
    return BinanceAction(http=http, api=api, root=root, timestamp=TIMESTAMP, concurrency=2)


def test_sanity_check_reports_assets_missing_on_chain(repo_root: Path):
    make_logo(repo_root, "binance", "AAA")
    make_logo(repo_root, "binance", "BBB")
    http = FakeHttp(binance_responses(tokens=[{"symbol": "AAA"}]))
    action = _action(http, repo_root)

    steps = action.get_sanity_checks()
    assert [step.name for step in steps] == ["Binance chain; assets must exist on chain"]

    errors, warnings = asyncio.run(steps[0].check())

    assert errors == ["Asset BBB missing on chain"]
    assert warnings == []


def test_sanity_check_passes_when_all_assets_exist(repo_root: Path):
    make_logo(repo_root, "binance", "AAA")
    http = FakeHttp(binance_responses(mini_tokens=[{"symbol": "AAA"}]))

    errors, warnings = asyncio.run(_action(http, repo_root).check_assets_exist_on_chain())

    assert (errors, warnings) == ([], [])


def test_update_auto_fetches_images_and_writes_token_list(repo_root: Path):
    chain_path = repo_root / "blockchains" / "binance"
    (chain_path / "denylist.json").write_text(json.dumps(["BAD-000"]))
    make_logo(repo_root, "binance", "HAVE-111")
    http = FakeHttp(
        binance_responses(
            asset_infos=[
                {"asset": "HAVE-111", "assetImg": "https://img/have.png"},
                {"asset": "NEW-222", "assetImg": "https://img/new.png"},
                {"asset": "BAD-000", "assetImg": "https://img/bad.png"},
                {"asset": "NOIMG-333", "assetImg": ""},
            ],
            markets=[{"base_asset_symbol": "NEW-222", "quote_asset_symbol": "BNB",
                      "lot_size": "1.00000000", "tick_size": "0.00000001"}],
            tokens=[
                {"symbol": "NEW-222", "name": "New", "original_symbol": "NEW"},
                {"symbol": "BNB", "name": "Binance Chain Native Token", "original_symbol": "BNB"},
            ],
        ),
        images={"https://img/new.png": b"new"},
    )
    action = _action(http, repo_root)

    asyncio.run(action.update_auto())

    assert http.downloads == ["https://img/new.png"]
    assert action.last_report.fetched == ["NEW-222"]
    assert (chain_path / "assets" / "NEW-222" / "logo.png").read_bytes() == b"new"

    doc = json.loads((chain_path / "tokenlist.json").read_text())
    assert doc["name"] == "Trust Wallet: BNB"
    assert doc["timestamp"] == TIMESTAMP
    assert doc["version"] == {"major": 0, "minor": 1, "patch": 0}
    assert [t["asset"] for t in doc["tokens"]] == ["c714_tNEW-222", "c714"]
    assert doc["tokens"][1]["pairs"] == [{"asset": "c714_tNEW-222", "lotSize": "100000000", "tickSize": "1"}]

    # Second run: nothing left to fetch, list untouched
    before = (chain_path / "tokenlist.json").read_text()
    asyncio.run(action.update_auto())
    assert http.downloads == ["https://img/new.png"]
    assert action.last_report.fetched == []
    assert (chain_path / "tokenlist.json").read_text() == before


def test_missing_denylist_is_empty(repo_root: Path):
    assert _action(FakeHttp(), repo_root).read_denylist() == []


def test_close_closes_http(repo_root: Path):
    http = FakeHttp()
    asyncio.run(_action(http, repo_root).close())
    assert http.closed
