"""CLI entry point for the QualityMax test action."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Mapping

from pydantic import SecretStr

from qualitymax_action.client.client import QualityMaxClient
from qualitymax_action.client.config import DEFAULT_API_BASE_URL, ClientConfig
from qualitymax_action.github.comments import DEFAULT_GITHUB_API_URL
from qualitymax_action.github.context import load_github_context
from qualitymax_action.github.inputs import MissingInputError, load_inputs
from qualitymax_action.github.outputs import ActionOutputs
from qualitymax_action.orchestrator import ExecutionOrchestrator


async def run(
    environ: Mapping[str, str],
    api_url: str,
    poll_interval: float,
) -> int:
    """Run the action with inputs from the environment and return exit code."""
    log = logging.getLogger("qualitymax_action")
    outputs = ActionOutputs.from_environ(environ)

    try:
        inputs = load_inputs(environ)
    except (MissingInputError, ValueError) as e:
        log.error("Invalid action inputs: %s", e)
        outputs.error(str(e))
        return 1

    config = ClientConfig(
        api_key=inputs.api_key,
        api_base_url=api_url,
        poll_interval=poll_interval,
    )
    github_token = environ.get("GITHUB_TOKEN")

    async with QualityMaxClient.from_config(config) as client:
        orchestrator = ExecutionOrchestrator(
            client=client,
            outputs=outputs,
            github_context=load_github_context(environ),
            github_token=SecretStr(github_token) if github_token else None,
            github_api_url=environ.get("GITHUB_API_URL", DEFAULT_GITHUB_API_URL),
        )
        return await orchestrator.run(inputs)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run QualityMax tests and report results to GitHub Actions"
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get("QUALITYMAX_API_URL", DEFAULT_API_BASE_URL),
        help="QualityMax API base URL (default: $QUALITYMAX_API_URL)",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=5.0,
        help="Seconds between status polls",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            environ=os.environ,
            api_url=args.api_url,
            poll_interval=args.poll_interval,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
