import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class VerdictKind(str, Enum):
    MISMATCH = "mismatch"  # formatter output differs from the file
    TOOL_FAILURE = "tool-failure"  # formatter exited nonzero


@dataclass
class CmdResult:
    output: bytes = b""
    return_status: int = 0


@dataclass
class FormatVerdict:
    """A file that does not conform, and why"""

    file_path: Path
    kind: VerdictKind
    message: str


@dataclass
class CheckSettings:
    clang_format_exe: str = "clang-format"
    jobs: int = field(default_factory=lambda: os.cpu_count() or 1)
    echo: bool = True  # print verdicts as they arrive


@dataclass
class CheckSummary:
    files_checked: int
    verdicts: list[FormatVerdict]

    @property
    def needs_formatting(self) -> bool:
        return bool(self.verdicts)

    @property
    def exit_code(self) -> int:
        return 2 if self.needs_formatting else 0
