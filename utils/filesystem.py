"""
Filesystem and JSON helpers
"""
import json
import os
from pathlib import Path
from typing import Any


def read_dir(path: str | Path) -> list[str]:
    """Sorted entry names of a directory, hidden entries excluded"""
    return sorted(name for name in os.listdir(path) if not name.startswith("."))


def read_json_file(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json_file(path: str | Path, content: Any):
    """Write JSON with 4-space indent and a trailing newline"""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(content, f, indent=4, ensure_ascii=False)
        f.write("\n")
