from __future__ import annotations

import threading
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path

from analysis_model.core.config import settings
from analysis_model.core.errors import ParsingCanceledException, ParsingException
from analysis_model.domain.models import Report


class CancellationToken:
    """Cooperative cancel flag. Parsers poll it; nothing is interrupted."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_canceled(self) -> bool:
        return self._event.is_set()

    def check(self) -> None:
        if self._event.is_set():
            raise ParsingCanceledException()


class ReaderFactory(ABC):
    """Source of one tool report."""

    def __init__(self, file_name: str):
        self.file_name = file_name

    @abstractmethod
    def read_string(self) -> str: ...

    def read_document(self) -> ET.Element:
        try:
            return ET.fromstring(self._read_xml())
        except ET.ParseError as e:
            raise ParsingException(f"Can't parse XML: {e}", self.file_name) from e

    def _read_xml(self) -> str | bytes:
        return self.read_string()


class FileReaderFactory(ReaderFactory):
    def __init__(self, path: Path | str, encoding: str | None = None):
        self.path = Path(path)
        self.encoding = encoding
        super().__init__(self.path.as_posix())

    def read_string(self) -> str:
        encoding = self.encoding or settings.REPORT_ENCODING
        try:
            return self._read_bytes().decode(encoding)
        except LookupError as e:
            raise ParsingException(f"Unknown encoding: {encoding}", self.file_name) from e
        except UnicodeDecodeError as e:
            raise ParsingException(f"Report is not valid {encoding}: {e}", self.file_name) from e

    def _read_xml(self) -> str | bytes:
        # Bytes let the XML parser honor the document's own declaration
        if self.encoding:
            return self.read_string()
        return self._read_bytes()

    def _read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise ParsingException(f"Can't read report: {e}", self.file_name) from e


class StringReaderFactory(ReaderFactory):
    def __init__(self, content: str, file_name: str = "<string>"):
        super().__init__(file_name)
        self.content = content

    def read_string(self) -> str:
        return self.content


class IssueParser(ABC):
    """
    Turns the report of one static analysis tool into a Report.

    Instances keep no state between calls but must not be shared by
    concurrent parses.
    """

    @abstractmethod
    def tool_name(self) -> str: ...

    @abstractmethod
    def parse(self, reader_factory: ReaderFactory, cancellation: CancellationToken | None = None) -> Report: ...


def check_canceled(cancellation: CancellationToken | None) -> None:
    if cancellation is not None:
        cancellation.check()
