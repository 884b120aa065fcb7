import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from threading import Lock

from .checker import get_file_format_diff
from .errors import FormatHookError
from .models import CheckSettings, CheckSummary, FormatVerdict

logger = logging.getLogger(__name__)


class VerdictCollector:
    """Lock-guarded sink shared by every worker of a run.

    Printing a verdict and recording it happen under the same lock, so
    reports never interleave and no update to the failure flag is lost.
    """

    def __init__(self, echo: bool = True):
        self.echo = echo
        self._lock = Lock()
        self._verdicts: list[FormatVerdict] = []

    def report(self, verdict: FormatVerdict) -> None:
        with self._lock:
            self._verdicts.append(verdict)
            if self.echo:
                print(f'File "{verdict.file_path}" needs formatting\n{verdict.message}', flush=True)

    @property
    def needs_formatting(self) -> bool:
        with self._lock:
            return bool(self._verdicts)

    @property
    def verdicts(self) -> list[FormatVerdict]:
        with self._lock:
            return list(self._verdicts)


def _check_one(file_path: Path, clang_format_exe: str, collector: VerdictCollector) -> FormatVerdict | None:
    verdict = get_file_format_diff(file_path, clang_format_exe)
    if verdict is not None:
        collector.report(verdict)
    return verdict


def check_files(
    files: Sequence[Path],
    settings: CheckSettings,
    collector: VerdictCollector | None = None,
) -> CheckSummary:
    """Check every file in parallel and reduce the verdicts to one summary.

    All files are checked before returning; a failing file never stops its
    siblings. A FormatHookError from any worker cancels the checks that have
    not started yet and is re-raised.
    """
    if collector is None:
        collector = VerdictCollector(echo=settings.echo)

    jobs = max(1, settings.jobs)
    logger.debug("Checking %d files with %d workers", len(files), jobs)

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = [executor.submit(_check_one, path, settings.clang_format_exe, collector) for path in files]
        try:
            for future in as_completed(futures):
                future.result()
        except FormatHookError:
            for future in futures:
                future.cancel()
            raise

    return CheckSummary(files_checked=len(files), verdicts=collector.verdicts)
