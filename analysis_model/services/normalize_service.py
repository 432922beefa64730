import json
import logging
from collections import Counter
from pathlib import Path

from analysis_model.core.errors import AnalysisError
from analysis_model.domain.models import Report, Severity, Summary
from analysis_model.domain.schemas import ParseRequest
from analysis_model.parsers.base import CancellationToken, FileReaderFactory
from analysis_model.parsers.registry import ParserRegistry

logger = logging.getLogger(__name__)


class NormalizeService:
    def __init__(self, registry: ParserRegistry):
        self.registry = registry

    def parse(self, request: ParseRequest, cancellation: CancellationToken | None = None) -> Report:
        parser = self.registry.create(request.tool)
        reader = FileReaderFactory(request.report_path, encoding=request.encoding)
        extra = {"tool": request.tool, "file_name": reader.file_name}

        logger.info("Parsing report", extra=extra)
        try:
            report = parser.parse(reader, cancellation)
        except AnalysisError:
            logger.exception("Parsing report failed", extra=extra)
            raise

        for msg in report.error_messages:
            logger.warning(msg, extra=extra)
        logger.info("Parsed report", extra={**extra, "issues": len(report)})
        return report

    def summarize(self, report: Report) -> Summary:
        by_sev = {s.value: n for s, n in report.count_by_severity().items()}
        by_type = dict(Counter(i.type for i in report))
        return Summary(total=len(report), by_severity=by_sev, by_type=by_type)

    def write_json(self, report: Report, dest: Path) -> Path:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(
            json.dumps([i.to_dict() for i in report], indent=2),
            encoding="utf-8",
        )
        return dest

    @staticmethod
    def count_at_least(report: Report, severity: Severity) -> int:
        """Number of issues that are as severe as ``severity`` or worse."""
        return sum(1 for i in report if i.severity <= severity)
