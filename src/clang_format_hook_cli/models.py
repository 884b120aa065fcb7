from enum import Enum

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class IssueKind(str, Enum):
    MISMATCH = "MISMATCH"
    TOOL_FAILURE = "TOOL_FAILURE"


class FormatIssue(BaseModel):
    file_path: str
    kind: IssueKind
    message: str


class FormatReport(BaseModel):
    files_checked: int
    needs_formatting: bool
    issues: list[FormatIssue] = Field(default_factory=list)
