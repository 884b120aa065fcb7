from clang_format_hook.models import CheckSummary, FormatVerdict, VerdictKind

from .models import FormatIssue, FormatReport, IssueKind


def verdict_to_issue(verdict: FormatVerdict) -> FormatIssue:
    """Convert an internal dataclass verdict to an external Pydantic issue"""
    kind = IssueKind.TOOL_FAILURE if verdict.kind is VerdictKind.TOOL_FAILURE else IssueKind.MISMATCH
    return FormatIssue(file_path=str(verdict.file_path), kind=kind, message=verdict.message)


def summary_to_report(summary: CheckSummary) -> FormatReport:
    # Workers finish in any order; sort so reports are stable between runs
    issues = sorted((verdict_to_issue(v) for v in summary.verdicts), key=lambda i: i.file_path)
    return FormatReport(
        files_checked=summary.files_checked,
        needs_formatting=summary.needs_formatting,
        issues=issues,
    )
