#!/usr/bin/env python3
"""
Token Registry Sync
===================
Keeps a chain folder of the assets repository in sync with the chain:
missing logos are downloaded and the token list is regenerated.

Usage:
    python main.py update [--chain binance]
    python main.py check [--chain binance]
"""
import argparse
import asyncio
import sys

from blockchains.base import ActionInterface, CheckResult
from blockchains.registry import ACTIONS, create_action
from config.settings import LOG_LEVEL
from ui.report import render_check_results, render_fetch_report
from utils.logger import setup_logging, get_logger

logger = get_logger(__name__)


async def run_checks(action: ActionInterface) -> int:
    """Run every sanity check of an action; returns the number of errors"""
    results: list[tuple[str, CheckResult]] = []
    for step in action.get_sanity_checks():
        logger.info(f"[cyan]Running check: {step.name}[/cyan]")
        results.append((step.name, await step.check()))
    return render_check_results(results)


async def run_update(action: ActionInterface):
    logger.info(f"[bold cyan]Updating {action.get_name()}[/bold cyan]")
    await action.update_auto()
    if action.last_report is not None:
        render_fetch_report(action.last_report)
    logger.info("[green]Update complete[/green]")


async def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Sync the assets repository with the chain")
    parser.add_argument("command", choices=["update", "check"])
    parser.add_argument("--chain", default="binance", choices=sorted(ACTIONS))
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    action = create_action(args.chain)
    try:
        if args.command == "check":
            errors = await run_checks(action)
            return 1 if errors else 0
        await run_update(action)
        return 0
    finally:
        await action.close()


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(130)
