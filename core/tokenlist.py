"""
Token list document: creation, comparison and update-in-place writing
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

from core.models import TokenListEntry
from utils.filesystem import read_json_file, write_json_file
from utils.logger import get_logger

logger = get_logger(__name__)

LIST_LOGO_URI = "https://trustwallet.com/assets/images/favicon.png"


@dataclass
class Version:
    major: int
    minor: int
    patch: int

    def to_dict(self) -> dict[str, int]:
        return {"major": self.major, "minor": self.minor, "patch": self.patch}

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass
class TokenList:
    name: str
    logo_uri: str
    timestamp: str
    version: Version
    tokens: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "logoURI": self.logo_uri,
            "timestamp": self.timestamp,
            "tokens": self.tokens,
            "version": self.version.to_dict(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "TokenList":
        version = raw.get("version") or {}
        return cls(
            name=raw.get("name", ""),
            logo_uri=raw.get("logoURI", ""),
            timestamp=raw.get("timestamp", ""),
            version=Version(
                major=int(version.get("major", 0)),
                minor=int(version.get("minor", 0)),
                patch=int(version.get("patch", 0)),
            ),
            tokens=list(raw.get("tokens") or []),
        )


def create_tokens_list(
    title_prefix: str,
    entries: list[TokenListEntry],
    timestamp: str,
    major: int,
    minor: int,
    patch: int,
) -> TokenList:
    return TokenList(
        name=f"Trust Wallet: {title_prefix}",
        logo_uri=LIST_LOGO_URI,
        timestamp=timestamp,
        version=Version(major, minor, patch),
        tokens=[entry.to_dict() for entry in entries],
    )


def _token_key(token: dict[str, Any]) -> str:
    return token.get("asset", "")


def _normalized(tokens: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Tokens and their pairs in a stable order, for comparison only"""
    out = []
    for token in sorted(tokens, key=_token_key):
        token = dict(token)
        token["pairs"] = sorted(token.get("pairs") or [], key=lambda p: p.get("asset", ""))
        out.append(token)
    return out


def tokens_differ(new: TokenList, old: TokenList) -> bool:
    """True if the token content changed; ordering is ignored"""
    return _normalized(new.tokens) != _normalized(old.tokens)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def write_to_file_with_update(
    path: str | Path,
    token_list: TokenList,
    now: Callable[[], str] = _utc_now,
) -> TokenList:
    """
    Write a token list, merging with any list already at `path`.

    An existing list's version and timestamp are kept as long as the tokens
    are unchanged, so regeneration leaves the file byte-identical. When the
    tokens changed, the major version is bumped and the timestamp renewed.
    """
    old: Optional[TokenList] = None
    if Path(path).exists():
        old = TokenList.from_dict(read_json_file(path))

    if old is not None:
        token_list.version = old.version
        token_list.timestamp = old.timestamp
        if tokens_differ(token_list, old):
            token_list.version = Version(old.version.major + 1, 0, 0)
            token_list.timestamp = now()
            logger.info(
                f"Version and timestamp updated, {token_list.version} timestamp {token_list.timestamp}"
            )

    write_json_file(path, token_list.to_dict())
    return token_list
