"""
clang-format-hook - Style-conformance gate for C++ sources

This package provides:
- Source file discovery over files and directory trees
- Formatter invocation with captured output
- Per-file format diff checking
- Parallel checking with a single aggregated exit status
"""

__version__ = "0.1.0"

from .aggregator import VerdictCollector, check_files
from .checker import get_file_format_diff
from .discovery import DEFAULT_EXTENSIONS, discover_inputs, discover_source_files
from .errors import FileReadError, FormatHookError, InputNotFoundError, ToolLaunchError
from .models import CheckSettings, CheckSummary, CmdResult, FormatVerdict, VerdictKind
from .runner import run_command

__all__ = [
    "DEFAULT_EXTENSIONS",
    "CheckSettings",
    "CheckSummary",
    "CmdResult",
    "FileReadError",
    "FormatHookError",
    "FormatVerdict",
    "InputNotFoundError",
    "ToolLaunchError",
    "VerdictCollector",
    "VerdictKind",
    "check_files",
    "discover_inputs",
    "discover_source_files",
    "get_file_format_diff",
    "run_command",
]
