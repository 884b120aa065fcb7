import logging
import tomllib
from pathlib import Path

from clang_format_hook.discovery import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".clang-format-hook.toml")


class HookConfig:
    """Handles loading of the [tool.clang-format-hook] table from a TOML file"""

    def __init__(self, config_path: Path | None = None):
        self.clang_format: str = "clang-format"
        self.extensions: list[str] = list(DEFAULT_EXTENSIONS)
        self.jobs: int | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        hook_data = data.get("tool", {}).get("clang-format-hook", {})

        clang_format = hook_data.get("clang-format")
        if isinstance(clang_format, str) and clang_format:
            self.clang_format = clang_format
        elif clang_format is not None:
            logger.warning("Ignoring invalid clang-format value %r in %s", clang_format, path)

        extensions = hook_data.get("extensions")
        if isinstance(extensions, list) and all(isinstance(ext, str) for ext in extensions):
            self.extensions = extensions
        elif extensions is not None:
            logger.warning("Ignoring invalid extensions value %r in %s", extensions, path)

        jobs = hook_data.get("jobs")
        # bool is an int subclass; `jobs = true` is not a worker count
        if isinstance(jobs, int) and not isinstance(jobs, bool) and jobs >= 1:
            self.jobs = jobs
        elif jobs is not None:
            logger.warning("Ignoring invalid jobs value %r in %s", jobs, path)
