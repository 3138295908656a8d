"""Posting of test results to pull requests."""

import logging

import aiohttp
from pydantic import SecretStr

from qualitymax_action.models.execution import GitHubContext

log = logging.getLogger(__name__)

DEFAULT_GITHUB_API_URL = "https://api.github.com"


async def post_pr_comment(
    github_context: GitHubContext,
    body: str,
    token: SecretStr | None,
    api_base_url: str = DEFAULT_GITHUB_API_URL,
) -> bool:
    """Post a comment to the pull request that triggered the run.

    Failures are logged as warnings and never raised.

    Returns:
        True if the comment was posted

    """
    if github_context.pr_number is None:
        log.debug("Not a PR, skipping comment")
        return False

    if token is None or not token.get_secret_value():
        log.warning(
            "GITHUB_TOKEN not available, cannot post PR comment. "
            "Add `env: GITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}` to your workflow."
        )
        return False

    url = (
        f"repos/{github_context.repository}"
        f"/issues/{github_context.pr_number}/comments"
    )
    headers = {
        "Authorization": f"Bearer {token.get_secret_value()}",
        "Accept": "application/vnd.github+json",
    }

    try:
        async with (
            aiohttp.ClientSession(
                base_url=api_base_url.rstrip("/") + "/", headers=headers
            ) as session,
            session.post(url, json={"body": body}) as response,
        ):
            if response.status >= 400:
                text = await response.text()
                log.warning(
                    "Failed to post PR comment: %s %s", response.status, text
                )
                return False
    except (aiohttp.ClientError, TimeoutError) as e:
        log.warning("Failed to post PR comment: %s", e)
        return False

    log.info("Posted test results to PR #%d", github_context.pr_number)
    return True
