"""Orchestration of a test execution from trigger to reported results."""

import logging
from dataclasses import dataclass, field

from pydantic import SecretStr

from qualitymax_action.client.client import QualityMaxClient
from qualitymax_action.client.errors import (
    InvalidApiKeyError,
    ProjectResolutionError,
)
from qualitymax_action.github.comments import DEFAULT_GITHUB_API_URL, post_pr_comment
from qualitymax_action.github.outputs import ActionOutputs
from qualitymax_action.models.execution import (
    ExecutionRequest,
    ExecutionResults,
    GitHubContext,
)
from qualitymax_action.models.inputs import ActionInputs
from qualitymax_action.reporting import (
    comment_body,
    log_results_summary,
    render_job_summary,
    result_outputs,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ExecutionOrchestrator:
    """Runs a single test execution and publishes its results to the workflow."""

    client: QualityMaxClient
    outputs: ActionOutputs
    github_context: GitHubContext
    github_token: SecretStr | None = field(default=None, repr=False)
    github_api_url: str = DEFAULT_GITHUB_API_URL

    async def run(self, inputs: ActionInputs) -> int:
        """Run the execution described by the inputs and return the exit code.

        Any error after the execution was triggered cancels it before the
        error is reported as the step failure.
        """
        execution_id: str | None = None

        log.info("🚀 QualityMax Test Runner")
        log.info(
            "Project: %s", inputs.project_id or inputs.project_name or "(auto-detect)"
        )
        log.info("Test Suite: %s", inputs.test_suite)
        log.info("Browser: %s", inputs.browser)

        try:
            log.info("Validating API key...")
            if not await self.client.validate_key():
                raise InvalidApiKeyError(
                    "Invalid API key. Get your API key from app.qamax.co/settings/api"
                )
            log.info("API key validated ✓")

            project_id = await self.resolve_project_id(inputs)

            request = ExecutionRequest(
                project_id=project_id,
                test_suite=inputs.test_suite,
                test_ids=inputs.test_ids,
                base_url=inputs.base_url,
                browser=inputs.browser,
                headless=inputs.headless,
                timeout_minutes=inputs.timeout_minutes,
                github_context=self.github_context,
            )

            trigger_response = await self.client.trigger(request)
            execution_id = trigger_response.execution_id

            log.info("Execution started: %s", execution_id)
            if trigger_response.estimated_duration_seconds:
                log.info(
                    "Estimated duration: %d minutes",
                    round(trigger_response.estimated_duration_seconds / 60),
                )

            results = await self.client.wait_for_completion(
                execution_id, inputs.timeout_minutes * 60
            )
            await self.publish(results, inputs)
        except Exception as e:
            log.error("Test execution failed: %s", e, exc_info=e)
            if execution_id:
                await self.client.cancel(execution_id)
            self.outputs.error(str(e) or "An unexpected error occurred")
            return 1

        log_results_summary(log, results)

        if results.result == "failed" and inputs.fail_on_test_failure:
            self.outputs.error(
                f"{results.failed_tests} test(s) failed. "
                f"View report: {results.report_url}"
            )
            return 1

        if results.result == "passed":
            log.info("✅ All tests passed!")
        return 0

    async def resolve_project_id(self, inputs: ActionInputs) -> str:
        """Determine the project to run.

        An explicit project ID wins. A project name is matched
        case-insensitively, falling back to the project linked to the
        repository. Without either, the linked project is auto-detected.

        Raises:
            ProjectResolutionError: If no project can be determined

        """
        repository = self.github_context.repository

        if inputs.project_id:
            log.info("Using provided project ID: %s", inputs.project_id)
            return inputs.project_id

        if inputs.project_name:
            log.info('Resolving project by name: "%s"...', inputs.project_name)
            projects = await self.client.list_projects()
            wanted = inputs.project_name.lower()
            for project in projects:
                if project.name.lower() == wanted:
                    log.info(
                        'Resolved project "%s" → %s', inputs.project_name, project.id
                    )
                    return str(project.id)

            log.info(
                'No exact name match for "%s". Trying to resolve by repository: %s...',
                inputs.project_name,
                repository,
            )
            if fallback := await self.client.resolve_project(repository):
                log.info("Resolved project via linked repository → %s", fallback)
                return fallback

            available = ", ".join(project.name for project in projects) or "none"
            raise ProjectResolutionError(
                f'Project "{inputs.project_name}" not found. '
                f"Available projects: {available}. "
                "Tip: use the exact project name from QualityMax, "
                "or link the repository to your project."
            )

        log.info("Auto-detecting project from repository: %s...", repository)
        if detected := await self.client.resolve_project(repository):
            log.info("Auto-detected project: %s", detected)
            return detected

        raise ProjectResolutionError(
            "Could not auto-detect project. Provide project-id or project-name "
            "input, or link your repository in QualityMax project settings."
        )

    async def publish(self, results: ExecutionResults, inputs: ActionInputs) -> None:
        """Publish results as step outputs, job summary and PR comment."""
        self.outputs.set_outputs(result_outputs(results))
        self.outputs.write_summary(render_job_summary(results))

        if inputs.post_pr_comment:
            await post_pr_comment(
                self.github_context,
                comment_body(results),
                self.github_token,
                api_base_url=self.github_api_url,
            )
