from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Importance of an issue, ordered from most to least severe."""

    ERROR = "ERROR"
    WARNING_HIGH = "HIGH"
    WARNING_NORMAL = "NORMAL"
    WARNING_LOW = "LOW"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        # ERROR sorts first, so "less than" means "more severe"
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def guess(cls, level: str | None) -> Severity:
        """
        Map a tool-specific level string to a severity.

        Unknown or missing levels resolve to WARNING_NORMAL.
        """
        text = (level or "").strip().lower()
        if not text:
            return cls.WARNING_NORMAL
        if _contains_any(text, "error", "severe", "fatal"):
            return cls.ERROR
        if "critical" in text:
            # FxCop: CriticalWarning is a warning, CriticalError an error
            return cls.WARNING_HIGH if "warning" in text else cls.ERROR
        if "high" in text:
            return cls.WARNING_HIGH
        if _contains_any(text, "info", "note", "low", "style", "minor"):
            return cls.WARNING_LOW
        return cls.WARNING_NORMAL


_SEVERITY_ORDER = [Severity.ERROR, Severity.WARNING_HIGH, Severity.WARNING_NORMAL, Severity.WARNING_LOW]


def _contains_any(text: str, *needles: str) -> bool:
    return any(n in text for n in needles)


@dataclass(frozen=True)
class LineRange:
    start: int
    end: int | None = None

    def __post_init__(self) -> None:
        end = self.start if self.end is None else self.end
        start = self.start
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def contains(self, line: int) -> bool:
        return self.start <= line <= self.end


class LineRangeList(tuple):
    """Immutable sequence of line ranges in the order the tool reported them."""

    def __new__(cls, ranges: Iterable[LineRange] = ()):
        return super().__new__(cls, ranges)

    def contains(self, line: int) -> bool:
        return any(r.contains(line) for r in self)

    def __repr__(self) -> str:
        return f"LineRangeList({list(self)!r})"


@dataclass(frozen=True)
class Issue:
    file_name: str
    line_start: int
    line_end: int
    severity: Severity
    message: str
    category: str = ""
    type: str = ""
    description: str = ""
    package_name: str = ""
    origin: str = ""
    line_ranges: LineRangeList = field(default_factory=LineRangeList)
    id: int = field(default=0, compare=False)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["severity"] = self.severity.value
        d["line_ranges"] = [{"start": r.start, "end": r.end} for r in self.line_ranges]
        return d


class Report:
    """Issues collected from one tool report, in the order they were found."""

    def __init__(self, file_name: str = "", issues: Iterable[Issue] = ()):
        self.file_name = file_name
        self._issues: list[Issue] = list(issues)
        self._info_messages: list[str] = []
        self._error_messages: list[str] = []

    def add(self, issue: Issue) -> Report:
        self._issues.append(issue)
        return self

    def add_all(self, issues: Iterable[Issue]) -> Report:
        self._issues.extend(issues)
        return self

    def get(self, index: int) -> Issue:
        if index < 0 or index >= len(self._issues):
            raise IndexError(f"No issue at index {index}, report has {len(self._issues)} issues")
        return self._issues[index]

    def size(self) -> int:
        return len(self._issues)

    def is_empty(self) -> bool:
        return not self._issues

    def to_list(self) -> list[Issue]:
        return list(self._issues)

    def log_info(self, message: str) -> None:
        self._info_messages.append(message)

    def log_error(self, message: str) -> None:
        self._error_messages.append(message)

    @property
    def info_messages(self) -> list[str]:
        return list(self._info_messages)

    @property
    def error_messages(self) -> list[str]:
        return list(self._error_messages)

    def count_by_severity(self) -> dict[Severity, int]:
        counts = {s: 0 for s in Severity}
        for issue in self._issues:
            counts[issue.severity] += 1
        return counts

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __getitem__(self, index: int) -> Issue:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self._issues == other._issues

    def __repr__(self) -> str:
        return f"Report(file_name={self.file_name!r}, size={len(self._issues)})"


@dataclass
class Summary:
    total: int
    by_severity: dict[str, int]
    by_type: dict[str, int]
