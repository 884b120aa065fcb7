from pathlib import Path

from .errors import FileReadError
from .models import FormatVerdict, VerdictKind
from .runner import run_command


def get_file_format_diff(file_path: Path, clang_format_exe: str) -> FormatVerdict | None:
    """Check one file against the formatter's output.

    Returns None when the file already conforms. A nonzero formatter exit is
    reported as a TOOL_FAILURE verdict rather than a style mismatch.
    """
    # Binary read keeps line endings byte-exact for the comparison below
    try:
        file_contents = Path(file_path).read_bytes()
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e

    res = run_command([clang_format_exe, str(file_path)])
    if res.return_status != 0:
        return FormatVerdict(
            file_path=file_path,
            kind=VerdictKind.TOOL_FAILURE,
            message=f"Got return code {res.return_status} when executing {clang_format_exe} {file_path}",
        )

    if file_contents != res.output:
        return FormatVerdict(
            file_path=file_path,
            kind=VerdictKind.MISMATCH,
            message=f"{file_path} changes when formatted.",
        )
    return None
