"""Normalize a static analysis report and optionally gate on its errors.

    analysis-model --tool fxcop build/fxcop.xml --output out/fxcop.json --max-errors 0

Exit codes: 0 passed, 1 gate failed, 2 the report could not be parsed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from analysis_model.core.config import settings
from analysis_model.core.containers import build_parser_registry
from analysis_model.core.errors import AnalysisError
from analysis_model.core.logging import setup_logging
from analysis_model.domain.models import Severity
from analysis_model.domain.schemas import ParseRequest
from analysis_model.services.normalize_service import NormalizeService


def build_arg_parser(tools: list[str]) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="analysis-model", description=__doc__.splitlines()[0])
    ap.add_argument("report", help="path of the tool report")
    ap.add_argument("--tool", required=True, choices=tools)
    ap.add_argument("--encoding", default=None)
    ap.add_argument("--output", default=None, help="JSON destination (default: OUTPUT_DIR/<tool>.json)")
    ap.add_argument("--max-errors", type=int, default=None, help="fail when more ERROR issues are found")
    return ap


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    registry = build_parser_registry()
    args = build_arg_parser(registry.list()).parse_args(argv)

    service = NormalizeService(registry)
    request = ParseRequest(tool=args.tool, report_path=args.report, encoding=args.encoding)
    try:
        report = service.parse(request)
    except AnalysisError as e:
        print(f"[normalize] FAILED: {e}", file=sys.stderr)
        return 2

    dest = Path(args.output) if args.output else Path(settings.OUTPUT_DIR) / f"{args.tool}.json"
    service.write_json(report, dest)

    summary = service.summarize(report)
    print(json.dumps({"total": summary.total, "by_severity": summary.by_severity, "output": dest.as_posix()}))

    if args.max_errors is not None:
        errors = service.count_at_least(report, Severity.ERROR)
        print(f"[gate] errors={errors} (max {args.max_errors})")
        if errors > args.max_errors:
            print("[gate] FAILED")
            return 1
        print("[gate] PASSED")
    return 0


if __name__ == "__main__":
    sys.exit(main())
