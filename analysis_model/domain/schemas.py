from pydantic import BaseModel


class ParseRequest(BaseModel):
    tool: str
    report_path: str

    # None: use the XML declaration of the report
    encoding: str | None = None
