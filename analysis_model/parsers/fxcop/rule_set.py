from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from analysis_model.parsers.xml_util import attr, child_text

RuleKey = tuple[str, str]


@dataclass(frozen=True)
class FxCopRule:
    category: str
    check_id: str
    type_name: str = ""
    name: str = ""
    url: str = ""
    description: str = ""


class FxCopRuleSet:
    """Read-only lookup of the rules declared in a report, by (category, check id)."""

    def __init__(self, rules: Mapping[RuleKey, FxCopRule]):
        self._rules = MappingProxyType(dict(rules))

    def get_rule(self, category: str, check_id: str) -> FxCopRule | None:
        return self._rules.get((category, check_id))

    def contains(self, category: str, check_id: str) -> bool:
        return (category, check_id) in self._rules

    def __len__(self) -> int:
        return len(self._rules)


class FxCopRuleSetLoader:
    """Collects ``Rule`` elements; ``freeze`` hands out the read-only rule set."""

    def __init__(self) -> None:
        self._rules: dict[RuleKey, FxCopRule] = {}

    def add_rule(self, element: ET.Element) -> None:
        rule = FxCopRule(
            category=attr(element, "Category"),
            check_id=attr(element, "CheckId"),
            type_name=attr(element, "TypeName"),
            name=child_text(element, "Name"),
            url=child_text(element, "Url"),
            description=child_text(element, "Description"),
        )
        self._rules[(rule.category, rule.check_id)] = rule

    def freeze(self) -> FxCopRuleSet:
        return FxCopRuleSet(self._rules)
