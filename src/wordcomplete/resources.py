# src/wordcomplete/resources.py
from __future__ import annotations
from collections import Counter
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Protocol


class ResourceLoader(Protocol):
    # raw bytes of the named resource, or None when it does not exist
    def load(self, name: str) -> Optional[bytes]: ...


class PackageLoader:
    """Resources bundled as package data."""
    def __init__(self, package: str) -> None:
        self.package = package

    def load(self, name: str) -> Optional[bytes]:
        entry = resources.files(self.package).joinpath(name)
        if not entry.is_file():
            return None
        return entry.read_bytes()


class DirectoryLoader:
    """Resources as plain files in one directory."""
    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def load(self, name: str) -> Optional[bytes]:
        path = self.root / name
        if not path.is_file():
            return None
        return path.read_bytes()


class MemoryLoader:
    """In-memory resources (useful for tests or embedders). Counts reads per name."""
    def __init__(self, items: Optional[Dict[str, bytes | str]] = None) -> None:
        self._items: Dict[str, bytes] = {}
        self.reads: Counter[str] = Counter()
        for name, data in (items or {}).items():
            self.add(name, data)

    def add(self, name: str, data: bytes | str) -> None:
        self._items[name] = data.encode("utf-8") if isinstance(data, str) else data

    def load(self, name: str) -> Optional[bytes]:
        self.reads[name] += 1
        return self._items.get(name)


def make_loader(dsn: str) -> ResourceLoader:
    """
    Factory:
      - package://dotted.package -> PackageLoader
      - file:///path/to/dir      -> DirectoryLoader
      - memory://                -> empty MemoryLoader
    """
    if dsn.startswith("package://"):
        package = dsn.removeprefix("package://")
        if not package:
            raise ValueError(f"Missing package name in resource DSN: {dsn}")
        return PackageLoader(package)

    if dsn.startswith("file://"):
        # file:///abs/dir keeps its leading slash, file://rel/dir stays relative
        return DirectoryLoader(dsn.removeprefix("file://"))

    if dsn.startswith("memory://"):
        return MemoryLoader()

    raise ValueError(f"Unsupported resource DSN: {dsn}")
