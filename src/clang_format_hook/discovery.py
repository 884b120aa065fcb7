import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import InputNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".cpp", ".h")


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Return the allow-list with every entry carrying a leading dot."""
    return frozenset(ext if ext.startswith(".") else f".{ext}" for ext in extensions if ext)


def discover_source_files(root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[Path]:
    """List the regular files under root whose suffix is in the allow-list.

    Uses an explicit work-list instead of recursion so deep trees cannot
    exhaust the interpreter stack. Symlinked directories are followed and
    cycles are not detected.
    """
    root = Path(root)
    if not root.exists():
        raise InputNotFoundError(root)

    allowed = normalize_extensions(extensions)
    src_files: list[Path] = []
    to_process = [root]
    while to_process:
        current = to_process.pop()
        if current.is_dir():
            to_process.extend(current.iterdir())
        elif current.is_file() and current.suffix in allowed:
            src_files.append(current)

    logger.debug("Discovered %d source files under %s", len(src_files), root)
    return src_files


def discover_inputs(inputs: Iterable[Path], extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[Path]:
    """Concatenate discovery over several roots, in argument order."""
    allowed = normalize_extensions(extensions)
    files: list[Path] = []
    for path in inputs:
        files.extend(discover_source_files(Path(path), allowed))
    return files
