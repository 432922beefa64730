"""FxCop XML reports.

FxCop nests its findings inside the code structure it analyzed::

    FxCopReport
      Rules/Rule                                   rule catalog
      Namespaces/Namespace                         (also below Module)
        Types/Type
          Members/Member
            Accessors/Accessor
      Targets/Target
        Modules/Module
        Resources/Resource

Every level may carry ``Messages/Message/Issue``. A level adds nothing but
its ``Name`` to the qualified name of the issues below it, e.g.
``Company.Product.Widget.#Render()``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from analysis_model.core.errors import ParsingException
from analysis_model.domain.builder import IssueBuilder
from analysis_model.domain.models import Issue, Report
from analysis_model.parsers.base import CancellationToken, IssueParser, ReaderFactory, check_canceled
from analysis_model.parsers.xml_util import attr, children, first_child, grandchildren, text_content

from .rule_set import FxCopRuleSet, FxCopRuleSetLoader

ROOT_TAG = "FxCopReport"


class FxCopParser(IssueParser):
    """
    Parses FxCop XML reports.

    Cancellation is checked once per Target and once per Issue element.
    """

    def tool_name(self) -> str:
        return "fxcop"

    def parse(self, reader_factory: ReaderFactory, cancellation: CancellationToken | None = None) -> Report:
        root = reader_factory.read_document()
        if root.tag != ROOT_TAG:
            raise ParsingException(f"Expected root element <{ROOT_TAG}> but found <{root.tag}>", reader_factory.file_name)

        rules = load_rules(root)
        report = Report(reader_factory.file_name)
        with IssueBuilder(origin=self.tool_name()) as builder:
            walker = _ReportWalker(rules, builder, cancellation)
            report.add_all(walker.issues(root))

        report.log_info(f"Parsed {len(report)} issues using {len(rules)} FxCop rules")
        return report


def load_rules(root: ET.Element) -> FxCopRuleSet:
    loader = FxCopRuleSetLoader()
    for rule in grandchildren(root, "Rules", "Rule"):
        loader.add_rule(rule)
    return loader.freeze()


def qualify(parent_name: str, name: str) -> str:
    if not name:
        return parent_name
    if not parent_name:
        return name
    return f"{parent_name}.{name}"


class _ReportWalker:
    def __init__(self, rules: FxCopRuleSet, builder: IssueBuilder, cancellation: CancellationToken | None):
        self.rules = rules
        self.builder = builder
        self.cancellation = cancellation

    def issues(self, root: ET.Element) -> Iterator[Issue]:
        yield from self._namespaces(root)

        for target in grandchildren(root, "Targets", "Target"):
            check_canceled(self.cancellation)
            yield from self._messages(target, "")

            for module in grandchildren(target, "Modules", "Module"):
                yield from self._messages(module, "")
                yield from self._namespaces(module)

            for resource in grandchildren(target, "Resources", "Resource"):
                yield from self._messages(resource, "")

    def _namespaces(self, parent: ET.Element) -> Iterator[Issue]:
        for namespace in grandchildren(parent, "Namespaces", "Namespace"):
            name = attr(namespace, "Name")
            yield from self._messages(namespace, name)
            yield from self._types(namespace, name)

    def _types(self, namespace: ET.Element, parent_name: str) -> Iterator[Issue]:
        for type_ in grandchildren(namespace, "Types", "Type"):
            name = qualify(parent_name, attr(type_, "Name"))
            yield from self._messages(type_, name)
            yield from self._members(type_, "Members", "Member", name)

    def _members(self, parent: ET.Element, section: str, tag: str, parent_name: str) -> Iterator[Issue]:
        # Accessors (get_/set_ of a property) are members of their member
        for member in grandchildren(parent, section, tag):
            name = qualify(parent_name, attr(member, "Name"))
            yield from self._messages(member, name)
            yield from self._members(member, "Accessors", "Accessor", name)

    def _messages(self, element: ET.Element, qualified_name: str) -> Iterator[Issue]:
        messages = first_child(element, "Messages")
        for message in children(messages, "Message"):
            for issue in children(message, "Issue"):
                check_canceled(self.cancellation)
                yield self._issue(issue, message, qualified_name)

    def _issue(self, issue: ET.Element, message: ET.Element, qualified_name: str) -> Issue:
        type_name = attr(message, "TypeName")
        category = attr(message, "Category")
        check_id = attr(message, "CheckId")

        rule = self.rules.get_rule(category, check_id)
        if rule is None:
            title = type_name
        else:
            title = f'<a href="{rule.url}">{type_name}</a>'
        text = f"{title} - {text_content(issue).strip()}"

        b = self.builder
        b.set_file_name(_join_path(attr(issue, "Path"), attr(issue, "File")))
        b.set_line_start(attr(issue, "Line"))
        b.set_category(category)
        b.set_type(check_id)
        b.set_message(text)
        b.set_package_name(qualified_name)
        b.guess_severity(attr(issue, "Level"))
        if rule is not None:
            b.set_description(rule.description)
        return b.build_and_clean()


def _join_path(path: str, file: str) -> str:
    return "/".join(p.rstrip("/\\") for p in (path, file) if p)
