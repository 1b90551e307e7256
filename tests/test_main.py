from __future__ import annotations

import asyncio

import pytest

import main
from blockchains.base import ActionInterface, CheckStep
from core.models import FetchReport


class FakeAction(ActionInterface):
    def __init__(self, errors: list[str]):
        self.errors = errors
        self.updated = False
        self.closed = False

    def get_name(self) -> str:
        return "Fake chain"

    def get_sanity_checks(self) -> list[CheckStep]:
        async def check():
            return list(self.errors), []
        return [CheckStep(name="fake check", check=check)]

    async def update_auto(self):
        self.updated = True
        self.last_report = FetchReport(fetched=["AAA"])

    async def close(self):
        self.closed = True


@pytest.mark.parametrize("errors, expected", [([], 0), (["Asset BBB missing on chain"], 1)])
def test_check_exit_code(monkeypatch, errors, expected):
    action = FakeAction(errors)
    monkeypatch.setattr(main, "create_action", lambda chain: action)

    assert asyncio.run(main.main(["check"])) == expected
    assert action.closed


def test_update_runs_action(monkeypatch):
    action = FakeAction([])
    monkeypatch.setattr(main, "create_action", lambda chain: action)

    assert asyncio.run(main.main(["update", "--chain", "binance"])) == 0
    assert action.updated
    assert action.closed


def test_unknown_chain_is_rejected():
    with pytest.raises(SystemExit):
        asyncio.run(main.main(["check", "--chain", "nowhere"]))
