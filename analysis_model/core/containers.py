from __future__ import annotations

from analysis_model.parsers.cppcheck_parser import CppCheckParser
from analysis_model.parsers.fxcop.parser import FxCopParser
from analysis_model.parsers.registry import ParserRegistry


def build_parser_registry() -> ParserRegistry:
    """Register all supported report formats.

    To add a new format, implement ``IssueParser`` in ``analysis_model/parsers/``
    and register its class here under the tool id users pass on the command line.
    """
    registry = ParserRegistry()
    registry.register("fxcop", FxCopParser)
    registry.register("cppcheck", CppCheckParser)
    return registry
