"""Models for the QualityMax test execution API."""

from collections.abc import Mapping, Sequence
from typing import Literal

from pydantic import Field

from qualitymax_action.models.base import Model

type RunState = Literal[
    "queued",
    "running",
    "completed",
    "failed",
    "cancelled",
    "timeout",
]

type TestOutcome = Literal["passed", "failed", "skipped", "error"]

TERMINAL_STATES: frozenset[str] = frozenset(
    {"completed", "failed", "cancelled", "timeout"}
)


class GitHubContext(Model):
    """CI context the execution was triggered from."""

    repository: str = Field(..., description="Repository in owner/repo format")
    sha: str = Field(..., description="Commit SHA")
    ref: str = Field(..., description="Git reference")
    run_id: str = Field(..., description="Workflow run identifier")
    run_number: int | None = None
    pr_number: int | None = None
    actor: str | None = None
    event_name: str | None = None


class ExecutionRequest(Model):
    """Request to start a single test execution."""

    project_id: str
    test_suite: str | None = None
    test_ids: Sequence[int] | None = None
    base_url: str | None = None
    browser: str | None = None
    headless: bool | None = None
    timeout_minutes: int | None = None
    github_context: GitHubContext
    variables: Mapping[str, str] | None = None

    def to_payload(self) -> dict[str, object]:
        """Serialize to the JSON body expected by the trigger endpoint."""
        return self.model_dump(mode="json", exclude_none=True)


class TriggerResponse(Model):
    """Response returned when an execution is triggered."""

    success: bool
    execution_id: str = ""
    status: RunState | None = None
    message: str = ""
    estimated_duration_seconds: float | None = None
    status_url: str | None = None
    cancel_url: str | None = None


class ExecutionStatus(Model):
    """Snapshot of a running execution."""

    execution_id: str | None = None
    status: RunState
    progress: float | None = None
    total_tests: int | None = None
    completed_tests: int | None = None
    passed_tests: int | None = None
    failed_tests: int | None = None
    started_at: str | None = None
    estimated_completion: str | None = None
    current_test: str | None = None

    @property
    def is_terminal(self) -> bool:
        """Whether no further progress will be reported for the execution."""
        return self.status in TERMINAL_STATES


class TestCaseResult(Model):
    """Outcome of an individual test within an execution."""

    __test__ = False

    test_id: int
    test_name: str
    status: TestOutcome
    duration_seconds: float = 0.0
    error_message: str | None = None
    screenshot_url: str | None = None
    video_url: str | None = None
    retry_count: int = 0


class ExecutionResults(Model):
    """Final results of a completed execution."""

    execution_id: str
    status: RunState
    result: TestOutcome
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    skipped_tests: int = 0
    duration_seconds: float = 0.0
    started_at: str | None = None
    completed_at: str | None = None
    browser: str = "chromium"
    base_url: str | None = None
    report_url: str = ""
    tests: Sequence[TestCaseResult] = Field(default_factory=list)
    github_context: GitHubContext | None = None
    summary_markdown: str | None = None

    @property
    def failed_test_cases(self) -> Sequence[TestCaseResult]:
        """Tests that finished with a failed outcome."""
        return [test for test in self.tests if test.status == "failed"]


class Project(Model):
    """Project visible to the API key."""

    id: int | str
    name: str
