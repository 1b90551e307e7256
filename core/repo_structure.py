"""
Paths inside the assets repository
"""
from pathlib import Path

from config.settings import ASSETS_REPO_ROOT

LOGO_NAME = "logo.png"


def get_chains_path(root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return Path(root) / "blockchains"


def get_chain_path(chain: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chains_path(root) / chain


def get_chain_assets_path(chain: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chain_path(chain, root) / "assets"


def get_chain_asset_path(chain: str, asset: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chain_assets_path(chain, root) / asset


def get_chain_asset_logo_path(chain: str, asset: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chain_asset_path(chain, asset, root) / LOGO_NAME


def get_chain_denylist_path(chain: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chain_path(chain, root) / "denylist.json"


def get_chain_tokenlist_path(chain: str, root: str | Path = ASSETS_REPO_ROOT) -> Path:
    return get_chain_path(chain, root) / "tokenlist.json"
