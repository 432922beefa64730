from __future__ import annotations

import xml.etree.ElementTree as ET

from analysis_model.core.errors import ParsingException
from analysis_model.domain.builder import IssueBuilder, parse_line
from analysis_model.domain.models import Issue, LineRange, Report, Severity
from .base import CancellationToken, IssueParser, ReaderFactory, check_canceled
from .xml_util import attr, children, grandchildren

_SEVERITIES = {
    "error": Severity.WARNING_HIGH,
    "warning": Severity.WARNING_NORMAL,
    "style": Severity.WARNING_LOW,
    "performance": Severity.WARNING_LOW,
    "portability": Severity.WARNING_LOW,
    "information": Severity.WARNING_LOW,
}


class CppCheckParser(IssueParser):
    """
    Parses CppCheck XML reports (``--xml-version=1`` and ``2``).

    Cancellation is checked once per ``error`` element.
    """

    def tool_name(self) -> str:
        return "cppcheck"

    def parse(self, reader_factory: ReaderFactory, cancellation: CancellationToken | None = None) -> Report:
        root = reader_factory.read_document()
        if root.tag != "results":
            raise ParsingException(f"Expected root element <results> but found <{root.tag}>", reader_factory.file_name)

        # version 2 nests errors below <errors>, version 1 keeps them at the top
        errors = grandchildren(root, "errors", "error") or children(root, "error")

        report = Report(reader_factory.file_name)
        with IssueBuilder(origin=self.tool_name()) as builder:
            for error in errors:
                check_canceled(cancellation)
                report.add(_to_issue(error, builder, report))
        return report


def _to_issue(error: ET.Element, builder: IssueBuilder, report: Report) -> Issue:
    severity = attr(error, "severity")
    builder.set_type(attr(error, "id"))
    builder.set_category(severity)
    builder.set_message(attr(error, "verbose") or attr(error, "msg"))
    builder.set_severity(_SEVERITIES.get(severity.lower()) or Severity.guess(severity))

    locations = children(error, "location")
    if locations:
        primary, *others = locations
        file_name = attr(primary, "file")
        builder.set_file_name(file_name)
        builder.set_line_start(attr(primary, "line"))
        for location in others:
            line = attr(location, "line")
            if attr(location, "file") == file_name:
                builder.add_line_range(LineRange(parse_line(line)))
            else:
                report.log_error(
                    f"Skipped location {attr(location, 'file')}:{line} of '{attr(error, 'id')}', it is not in {file_name}"
                )
    else:
        builder.set_file_name(attr(error, "file"))
        builder.set_line_start(attr(error, "line"))

    return builder.build_and_clean()
