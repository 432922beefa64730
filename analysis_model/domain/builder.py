from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from .models import Issue, LineRange, LineRangeList, Severity


@dataclass
class PendingIssue:
    """Field values collected for the next issue."""

    file_name: str = ""
    line_start: int = 0
    severity: Severity = Severity.WARNING_NORMAL
    message: str = ""
    category: str = ""
    type: str = ""
    description: str = ""
    package_name: str = ""
    line_ranges: list[LineRange] = field(default_factory=list)


class IssueBuilder:
    """
    Collects the fields of one issue at a time and creates immutable Issues.

    A builder is reused for every issue of a parse pass: ``build_and_clean``
    returns the issue and resets all pending fields. Use it as a context
    manager so the interned file names and the id sequence are released when
    the parse ends. Not thread safe.
    """

    def __init__(self, origin: str = "") -> None:
        self.origin = origin
        self.pending = PendingIssue()
        self._ids = itertools.count(1)
        self._file_names: dict[str, str] | None = {}

    def __enter__(self) -> IssueBuilder:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._file_names = None

    @property
    def closed(self) -> bool:
        return self._file_names is None

    def set_file_name(self, file_name: str | None) -> IssueBuilder:
        self.pending.file_name = _normalize_path(file_name or "")
        return self

    def set_line_start(self, line: int | str | None) -> IssueBuilder:
        self.pending.line_start = parse_line(line)
        return self

    def set_category(self, category: str | None) -> IssueBuilder:
        self.pending.category = category or ""
        return self

    def set_type(self, type_: str | None) -> IssueBuilder:
        self.pending.type = type_ or ""
        return self

    def set_message(self, message: str | None) -> IssueBuilder:
        self.pending.message = message or ""
        return self

    def set_description(self, description: str | None) -> IssueBuilder:
        self.pending.description = description or ""
        return self

    def set_package_name(self, package_name: str | None) -> IssueBuilder:
        self.pending.package_name = package_name or ""
        return self

    def set_severity(self, severity: Severity) -> IssueBuilder:
        self.pending.severity = severity
        return self

    def guess_severity(self, level: str | None) -> IssueBuilder:
        self.pending.severity = Severity.guess(level)
        return self

    def add_line_range(self, line_range: LineRange) -> IssueBuilder:
        self.pending.line_ranges.append(line_range)
        return self

    def build(self) -> Issue:
        if self._file_names is None:
            raise RuntimeError("IssueBuilder has been closed")

        p = self.pending
        file_name = self._file_names.setdefault(p.file_name, p.file_name)
        return Issue(
            file_name=file_name,
            line_start=p.line_start,
            line_end=p.line_start,
            severity=p.severity,
            message=p.message,
            category=p.category,
            type=p.type,
            description=p.description,
            package_name=p.package_name,
            origin=self.origin,
            line_ranges=LineRangeList(p.line_ranges),
            id=next(self._ids),
        )

    def build_and_clean(self) -> Issue:
        issue = self.build()
        self.pending = PendingIssue()
        return issue


def parse_line(value: int | str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        return max(int(str(value).strip()), 0)
    except ValueError:
        return 0


def _normalize_path(path: str) -> str:
    s = path.strip().replace("\\", "/")
    if s.startswith("./"):
        s = s[2:]
    return s
