"""StreamShelf catalog search and saved-list core."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["CoreServices", "create_core", "open_core"]


def __getattr__(name: str) -> Any:
    if name in __all__:
        module = import_module("streamshelf.main")
        return getattr(module, name)
    raise AttributeError(f"module 'streamshelf' has no attribute {name}")
