"""Models for the inputs the action is configured with."""

from collections.abc import Sequence

from pydantic import BaseModel, SecretStr


class ActionInputs(BaseModel):
    """Inputs of the action as declared in the workflow step."""

    api_key: SecretStr
    project_id: str = ""
    project_name: str = ""
    test_suite: str = "all"
    test_ids: Sequence[int] | None = None
    base_url: str | None = None
    browser: str = "chromium"
    headless: bool = True
    timeout_minutes: int = 30
    fail_on_test_failure: bool = True
    post_pr_comment: bool = True
