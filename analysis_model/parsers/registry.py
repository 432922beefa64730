"""Parser registry: maps a tool id to a factory for its parser.

Usage::

    registry = ParserRegistry()
    registry.register("fxcop", FxCopParser)

    parser = registry.create("fxcop")   # fresh instance per parse
    names  = registry.list()            # ["fxcop", ...]
"""

from __future__ import annotations

from collections.abc import Callable

from .base import IssueParser

ParserFactory = Callable[[], IssueParser]


class ParserRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, ParserFactory] = {}

    def register(self, tool: str, factory: ParserFactory) -> None:
        self._factories[tool.lower()] = factory

    def create(self, tool: str) -> IssueParser:
        factory = self._factories.get((tool or "").lower())
        if factory is None:
            available = ", ".join(self.list())
            raise ValueError(f"Unknown tool '{tool}'. Available: {available}")
        return factory()

    def list(self) -> list[str]:
        return sorted(self._factories.keys())
