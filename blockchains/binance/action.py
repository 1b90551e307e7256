"""
Binance chain action: logo sync, token list regeneration, sanity checks
"""
from pathlib import Path

from blockchains.base import ActionInterface, CheckResult, CheckStep
from blockchains.binance.api import BinanceApi
from blockchains.binance.tokenlist import generate_binance_tokens_list
from config.chains import CHAINS, ChainId
from config.settings import (
    ASSETS_REPO_ROOT,
    IMAGE_FETCH_CONCURRENCY,
    TOKEN_LIST_TIMESTAMP,
    TOKEN_LIST_VERSION,
)
from core.images import fetch_missing_images, find_images_to_fetch
from core.models import FetchReport
from core.repo_structure import (
    get_chain_assets_path,
    get_chain_denylist_path,
    get_chain_tokenlist_path,
)
from core.tokenlist import TokenList, Version, create_tokens_list, write_to_file_with_update
from utils.filesystem import read_dir, read_json_file
from utils.http_client import HttpClient
from utils.logger import get_logger

logger = get_logger(__name__)


class BinanceAction(ActionInterface):
    """
    Keeps the Binance chain folder of the assets repository in sync
    with the chain. One instance per run: the token cache lives with it.
    """

    def __init__(
        self,
        http: HttpClient | None = None,
        api: BinanceApi | None = None,
        root: str | Path = ASSETS_REPO_ROOT,
        timestamp: str = TOKEN_LIST_TIMESTAMP,
        version: Version | None = None,
        concurrency: int = IMAGE_FETCH_CONCURRENCY,
    ):
        self.chain = CHAINS[ChainId.BINANCE]
        self.http = http or HttpClient()
        self.api = api or BinanceApi(self.http)
        self.root = Path(root)
        self.timestamp = timestamp
        self.version = version or Version(*TOKEN_LIST_VERSION)
        self.concurrency = concurrency
        # Filled by the last update_auto() call
        self.last_report: FetchReport | None = None

    def get_name(self) -> str:
        return self.chain.name

    def get_sanity_checks(self) -> list[CheckStep]:
        return [
            CheckStep(
                name="Binance chain; assets must exist on chain",
                check=self.check_assets_exist_on_chain,
            ),
        ]

    async def check_assets_exist_on_chain(self) -> CheckResult:
        errors: list[str] = []
        token_symbols = set(await self.api.retrieve_asset_symbols())
        assets = read_dir(get_chain_assets_path(self.chain.folder, self.root))
        for asset in assets:
            if asset not in token_symbols:
                errors.append(f"Asset {asset} missing on chain")
        logger.info(f"     {len(assets)} assets checked.")
        return errors, []

    def read_denylist(self) -> list[str]:
        path = get_chain_denylist_path(self.chain.folder, self.root)
        if not path.exists():
            logger.warning(f"No denylist at {path}")
            return []
        return list(read_json_file(path))

    async def update_images(self) -> FetchReport:
        """Download logos missing locally (BEP2 only, the explorer has no BEP8 infos)"""
        asset_infos = await self.api.fetch_asset_infos()
        denylist = self.read_denylist()

        to_fetch = find_images_to_fetch(asset_infos, denylist, self.chain.folder, self.root)
        report = await fetch_missing_images(
            to_fetch, self.chain.folder, self.http, self.concurrency, self.root
        )

        if report.fetched:
            logger.info(f"Fetched {len(report.fetched)} asset(s):")
            for asset in report.fetched:
                logger.info(f"  {asset}")
        if report.failed:
            logger.error(f"[red]Failed to fetch {len(report.failed)} asset image(s)[/red]")
        return report

    async def update_tokenlist(self) -> TokenList:
        entries = await generate_binance_tokens_list(self.api, self.chain)
        token_list = create_tokens_list(
            self.chain.native_token,
            entries,
            self.timestamp,
            self.version.major,
            self.version.minor,
            self.version.patch,
        )
        path = get_chain_tokenlist_path(self.chain.folder, self.root)
        written = write_to_file_with_update(path, token_list)
        logger.info(f"Token list written: {path} ({len(entries)} tokens, version {written.version})")
        return written

    async def update_auto(self):
        self.last_report = await self.update_images()
        await self.update_tokenlist()

    async def close(self):
        await self.http.close()
