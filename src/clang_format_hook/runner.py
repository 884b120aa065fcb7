import logging
import subprocess

from .errors import ToolLaunchError
from .models import CmdResult

logger = logging.getLogger(__name__)


def run_command(args: list[str]) -> CmdResult:
    """Run a command and capture its stdout and exit status.

    The argument vector goes straight to the process spawn, never through a
    shell, so paths containing spaces or shell metacharacters are passed
    intact. stdin is closed; stderr is left attached to ours.
    """
    if not args:
        return CmdResult()

    logger.debug("Running %s", args)
    try:
        proc = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError as e:
        raise ToolLaunchError(args, e.strerror or str(e)) from e

    return CmdResult(output=proc.stdout, return_status=proc.returncode)
