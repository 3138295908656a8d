"""Rendering of execution results for logs, job summaries and PR comments."""

import logging

from qualitymax_action.models.execution import ExecutionResults

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
    "skipped": "⏭️",
    "error": "❗",
}

MAX_ERROR_LENGTH = 100


def format_duration(seconds: float) -> str:
    """Format a duration as minutes and seconds (e.g. "2m 5s")."""
    minutes, remainder = divmod(int(seconds), 60)
    return f"{minutes}m {remainder}s"


def render_fallback_markdown(results: ExecutionResults) -> str:
    """Render a PR comment when the service does not provide one."""
    passed = results.result == "passed"
    status = f"{STATUS_SYMBOLS['passed' if passed else 'failed']} "
    status += "Passed" if passed else "Failed"

    lines = [
        "## 🧪 QualityMax Test Results",
        "",
        "| Status | Tests | Duration |",
        "|--------|-------|----------|",
        f"| {status} | {results.passed_tests}/{results.total_tests} "
        f"| {format_duration(results.duration_seconds)} |",
        "",
        "### Summary",
        f"- **Browser:** {results.browser}",
        f"- **Base URL:** {results.base_url or 'Default'}",
    ]

    if results.failed_tests > 0:
        lines += ["", "### ❌ Failed Tests", "", "| Test | Error |", "|------|-------|"]
        for test in results.failed_test_cases:
            error = (test.error_message or "Unknown error")[:MAX_ERROR_LENGTH]
            lines.append(f"| {test.test_name} | {error} |")

    lines += ["", f"[View Full Report]({results.report_url})"]
    return "\n".join(lines)


def comment_body(results: ExecutionResults) -> str:
    """Markdown to post on the pull request."""
    return results.summary_markdown or render_fallback_markdown(results)


def render_job_summary(results: ExecutionResults) -> str:
    """Render the job summary table."""
    symbol = STATUS_SYMBOLS["passed" if results.result == "passed" else "failed"]
    rows = [
        ("Status", results.result.upper()),
        ("Total Tests", str(results.total_tests)),
        ("Passed", f"✅ {results.passed_tests}"),
        ("Failed", f"❌ {results.failed_tests}"),
        ("Skipped", f"⏭️ {results.skipped_tests}"),
        ("Duration", f"{round(results.duration_seconds)}s"),
        ("Browser", results.browser),
    ]

    lines = [
        f"## {symbol} QualityMax Test Results",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        *(f"| {metric} | {value} |" for metric, value in rows),
        "",
        f"[View Full Report]({results.report_url})",
        "",
    ]
    return "\n".join(lines)


def result_outputs(results: ExecutionResults) -> dict[str, str]:
    """Step outputs describing the results."""
    return {
        "execution-id": results.execution_id,
        "status": results.result,
        "total-tests": str(results.total_tests),
        "passed-tests": str(results.passed_tests),
        "failed-tests": str(results.failed_tests),
        "duration-seconds": f"{results.duration_seconds:g}",
        "report-url": results.report_url,
        "summary-markdown": results.summary_markdown or "",
    }


def log_results_summary(log: logging.Logger, results: ExecutionResults) -> None:
    """Log a boxed summary of the execution results."""
    log.info("═" * 39)
    log.info("  Tests: %d/%d passed", results.passed_tests, results.total_tests)
    log.info("  Duration: %ds", round(results.duration_seconds))
    log.info("  Report: %s", results.report_url)
    log.info("═" * 39)

    for test in results.failed_test_cases:
        log.info(
            "%s %s (%.2fs)",
            STATUS_SYMBOLS[test.status],
            test.test_name,
            test.duration_seconds,
        )
        if test.error_message:
            log.info("  Message: %s", test.error_message)
