"""
Missing logo detection and download
"""
import asyncio
from pathlib import Path
from typing import Iterable, Protocol

from config.settings import ASSETS_REPO_ROOT, IMAGE_FETCH_CONCURRENCY
from core.errors import ImageFetchError
from core.models import AssetInfo, FetchReport, ImageFetch
from core.repo_structure import get_chain_asset_logo_path
from utils.logger import get_logger

logger = get_logger(__name__)


class Downloader(Protocol):
    async def download(self, url: str, path: Path): ...


def find_images_to_fetch(
    asset_infos: Iterable[AssetInfo],
    denylist: Iterable[str],
    chain: str,
    root: str | Path = ASSETS_REPO_ROOT,
) -> list[ImageFetch]:
    """Assets with an image URL, not denylisted and without a local logo"""
    denied = set(denylist)
    to_fetch: list[ImageFetch] = []
    logger.info("Checking for asset images to be fetched")

    for info in asset_infos:
        if not info.image_url:
            continue
        if info.symbol in denied:
            logger.info(f"{info.symbol} is denylisted")
            continue
        if not get_chain_asset_logo_path(chain, info.symbol, root).exists():
            logger.info(f"[red]Missing image: {info.symbol}[/red]")
            to_fetch.append(ImageFetch(symbol=info.symbol, image_url=info.image_url))

    logger.info(f"{len(to_fetch)} asset image(s) to be fetched")
    return to_fetch


async def _fetch_image(item: ImageFetch, chain: str, downloader: Downloader, root: str | Path) -> str:
    image_path = get_chain_asset_logo_path(chain, item.symbol, root)
    image_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        await downloader.download(item.image_url, image_path)
    except Exception as e:
        raise ImageFetchError(item.image_url, str(e)) from e
    logger.info(f"Fetched image {item.symbol} {image_path} from {item.image_url}")
    return item.symbol


async def fetch_missing_images(
    to_fetch: list[ImageFetch],
    chain: str,
    downloader: Downloader,
    concurrency: int = IMAGE_FETCH_CONCURRENCY,
    root: str | Path = ASSETS_REPO_ROOT,
) -> FetchReport:
    """
    Download images with at most `concurrency` transfers in flight.
    A failing item does not cancel the others; its error is reported.
    """
    logger.info(f"Attempting to fetch {len(to_fetch)} asset image(s)")
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def run(item: ImageFetch) -> str:
        async with semaphore:
            return await _fetch_image(item, chain, downloader, root)

    results: list[str | BaseException] = await asyncio.gather(
        *(run(item) for item in to_fetch),
        return_exceptions=True,
    )

    report = FetchReport()
    for item, result in zip(to_fetch, results):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.error(f"[red]{result}[/red]")
            report.failed.append((item.symbol, str(result)))
        else:
            report.fetched.append(result)
    return report
