from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures raised while turning a tool report into a Report."""


class ParsingException(AnalysisError):
    """The report is malformed relative to the schema the parser expects."""

    def __init__(self, message: str, file_name: str | None = None):
        self.file_name = file_name
        if file_name:
            message = f"{message} (file: {file_name})"
        super().__init__(message)


class ParsingCanceledException(AnalysisError):
    """The caller canceled the parse before it finished."""

    def __init__(self, message: str = "Parsing has been canceled"):
        super().__init__(message)
