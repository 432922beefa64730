import os

from pydantic import BaseModel


class Settings(BaseModel):
    # Decoding for ReaderFactory.read_string() when no explicit encoding is given
    REPORT_ENCODING: str = os.getenv("REPORT_ENCODING", "utf-8")

    # CLI: where normalized issues are written when --output is omitted
    OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "out")


settings = Settings()
