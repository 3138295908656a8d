"""QualityMax test execution API client."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import TypeAdapter

from qualitymax_action.client.config import ClientConfig
from qualitymax_action.client.errors import (
    ExecutionTimeoutError,
    NotFoundError,
    ProjectResolutionError,
    ResultsError,
    StatusError,
    TriggerError,
)
from qualitymax_action.models.execution import (
    ExecutionRequest,
    ExecutionResults,
    ExecutionStatus,
    Project,
    TriggerResponse,
)

log = logging.getLogger(__name__)

_projects_adapter = TypeAdapter(list[Project])


@dataclass(frozen=True, kw_only=True)
class QualityMaxClient:
    """Remote control for test executions run by the QualityMax service.

    Every call is made sequentially over a single session authenticated with
    the API key. Nothing is retried: a failed request fails the operation.
    """

    config: ClientConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ClientConfig
    ) -> AsyncGenerator["QualityMaxClient", None]:
        """Create client with managed session lifecycle."""
        headers = {
            "X-API-Key": config.api_key.get_secret_value(),
            "Content-Type": "application/json",
            "User-Agent": config.user_agent,
        }
        async with aiohttp.ClientSession(
            base_url=config.api_base_url.rstrip("/") + "/",
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def validate_key(self) -> bool:
        """Check whether the API key is accepted.

        Any failure, including transport errors and malformed bodies, is
        reported as an invalid key.
        """
        try:
            async with self.session.get("github-action/validate") as response:
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError, ValueError, RecursionError) as e:
            log.debug("API key validation failed: %s", e)
            return False

        return isinstance(data, dict) and data.get("valid") is True

    async def trigger(self, request: ExecutionRequest) -> TriggerResponse:
        """Start a test execution and return the trigger response.

        Raises:
            TriggerError: If the service rejects the request

        """
        log.info("Triggering tests for project %s...", request.project_id)

        async with self.session.post(
            "github-action/trigger", json=request.to_payload()
        ) as response:
            text = await response.text(errors="replace")
            if response.status >= 400:
                raise TriggerError(
                    f"Failed to trigger tests: {text}", status=response.status
                )

        trigger_response = TriggerResponse.model_validate_json(text)
        if not trigger_response.success:
            raise TriggerError(f"Failed to trigger tests: {trigger_response.message}")

        log.info("Tests queued with execution ID: %s", trigger_response.execution_id)
        return trigger_response

    async def get_status(self, execution_id: str) -> ExecutionStatus:
        """Fetch the current status of an execution.

        Raises:
            NotFoundError: If the execution is unknown or expired
            StatusError: If the service fails to report the status

        """
        async with self.session.get(f"github-action/status/{execution_id}") as response:
            text = await response.text(errors="replace")
            if response.status == 404:
                raise NotFoundError(f"Execution {execution_id} not found", status=404)
            if response.status >= 400:
                raise StatusError(
                    f"Failed to get status: {text}", status=response.status
                )

        return ExecutionStatus.model_validate_json(text)

    async def get_results(self, execution_id: str) -> ExecutionResults:
        """Fetch the results of a finished execution, with the markdown summary.

        Raises:
            NotFoundError: If the execution is unknown or has not completed
            ResultsError: If the service fails to report the results

        """
        async with self.session.get(
            f"github-action/results/{execution_id}",
            params={"include_markdown": "true"},
        ) as response:
            text = await response.text(errors="replace")
            if response.status == 404:
                raise NotFoundError(
                    f"Execution {execution_id} not found or not completed", status=404
                )
            if response.status >= 400:
                raise ResultsError(
                    f"Failed to get results: {text}", status=response.status
                )

        return ExecutionResults.model_validate_json(text)

    async def cancel(self, execution_id: str) -> None:
        """Ask the service to cancel an execution.

        Failures are logged as warnings and never raised.
        """
        log.info("Cancelling execution %s...", execution_id)

        try:
            async with self.session.post(
                f"github-action/cancel/{execution_id}", data=b""
            ) as response:
                text = await response.text(errors="replace")
        except (aiohttp.ClientError, TimeoutError) as e:
            log.warning("Failed to cancel execution: %s", e)
            return

        if response.status >= 400:
            log.warning("Failed to cancel execution: %s", text)
        else:
            log.info("Execution cancelled")

    async def list_projects(self) -> Sequence[Project]:
        """List the projects the API key has access to."""
        async with self.session.get("github-action/projects") as response:
            text = await response.text(errors="replace")
            if response.status >= 400:
                raise ProjectResolutionError(
                    f"Failed to list projects: {text}", status=response.status
                )

        return _projects_adapter.validate_json(text)

    async def resolve_project(self, repository: str) -> str | None:
        """Find the project linked to a repository, if any."""
        async with self.session.get(
            "github-action/resolve-project", params={"repository": repository}
        ) as response:
            if response.status == 404:
                return None
            text = await response.text(errors="replace")
            if response.status >= 400:
                raise ProjectResolutionError(
                    f"Failed to resolve project: {text}", status=response.status
                )
            data = await response.json(content_type=None)

        project_id = data.get("project_id") if isinstance(data, dict) else None
        return str(project_id) if project_id else None

    async def wait_for_completion(
        self, execution_id: str, timeout: float
    ) -> ExecutionResults:
        """Poll an execution until it reaches a terminal state.

        Args:
            execution_id: Identifier returned when the execution was triggered
            timeout: Maximum wait time in seconds

        Returns:
            Results of the finished execution

        Raises:
            ExecutionTimeoutError: If the execution does not finish in time.
                The execution is cancelled before raising.

        """
        loop = asyncio.get_event_loop()
        deadline = loop.time() + timeout
        last_progress: float | None = None

        log.info("Waiting for test execution to complete...")

        while loop.time() < deadline:
            status = await self.get_status(execution_id)

            if status.progress is not None and status.progress != last_progress:
                last_progress = status.progress
                log.info(
                    "Progress: %g%% (%d/%d tests)%s",
                    status.progress,
                    status.completed_tests or 0,
                    status.total_tests or 0,
                    f" - Running: {status.current_test}" if status.current_test else "",
                )

            if status.is_terminal:
                log.info("Execution finished with status: %s", status.status)
                return await self.get_results(execution_id)

            await asyncio.sleep(self.config.poll_interval)

        log.warning("Execution timeout reached, attempting to cancel...")
        await self.cancel(execution_id)
        raise ExecutionTimeoutError(execution_id, timeout)
