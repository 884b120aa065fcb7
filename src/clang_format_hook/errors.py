from pathlib import Path


class FormatHookError(Exception):
    """Base class for errors that abort a check run"""


class InputNotFoundError(FormatHookError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Input path {path} does not exist")


class FileReadError(FormatHookError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Unable to open src file {path}: {reason}")


class ToolLaunchError(FormatHookError):
    def __init__(self, command: list[str], reason: str):
        self.command = command
        super().__init__(f"Unable to run {' '.join(command)}: {reason}")
