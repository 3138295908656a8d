"""Parsing of action inputs from the runner environment."""

from collections.abc import Mapping, Sequence

from pydantic import SecretStr

from qualitymax_action.models.inputs import ActionInputs


class MissingInputError(Exception):
    """Raised when a required input is not provided."""


def get_input(environ: Mapping[str, str], name: str, *, required: bool = False) -> str:
    """Read an input the way the Actions runner exposes it (INPUT_<NAME>)."""
    value = environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise MissingInputError(f"Input required and not supplied: {name}")
    return value


def parse_test_ids(value: str) -> Sequence[int] | None:
    """Parse comma-separated test IDs."""
    if not value:
        return None
    return [int(test_id.strip()) for test_id in value.split(",") if test_id.strip()]


def load_inputs(environ: Mapping[str, str]) -> ActionInputs:
    """Build the action inputs from the environment.

    Boolean inputs are enabled unless explicitly set to "false".
    """
    return ActionInputs(
        api_key=SecretStr(get_input(environ, "api-key", required=True)),
        project_id=get_input(environ, "project-id"),
        project_name=get_input(environ, "project-name"),
        test_suite=get_input(environ, "test-suite") or "all",
        test_ids=parse_test_ids(get_input(environ, "test-ids")),
        base_url=get_input(environ, "base-url") or None,
        browser=get_input(environ, "browser") or "chromium",
        headless=get_input(environ, "headless").lower() != "false",
        timeout_minutes=int(get_input(environ, "timeout-minutes") or "30"),
        fail_on_test_failure=(
            get_input(environ, "fail-on-test-failure").lower() != "false"
        ),
        post_pr_comment=get_input(environ, "post-pr-comment").lower() != "false",
    )
