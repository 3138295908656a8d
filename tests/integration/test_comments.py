"""Integration tests for pull request comments."""

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr
from yarl import URL

from qualitymax_action.github.comments import post_pr_comment
from qualitymax_action.testing.factories import GitHubContextFactory

GITHUB_API_URL = "http://github.test"
COMMENTS_URL = f"{GITHUB_API_URL}/repos/owner/repo/issues/7/comments"


async def test_posts_comment_to_pull_request(aioresponses: aioresponses_cls) -> None:
    """Posts the body to the pull request issue comments."""
    aioresponses.post(COMMENTS_URL, status=201, payload={"id": 1})
    context = GitHubContextFactory.build(pr_number=7)

    posted = await post_pr_comment(
        context, "## Results", SecretStr("gh-token"), api_base_url=GITHUB_API_URL
    )

    assert posted is True
    call = aioresponses.requests[("POST", URL(COMMENTS_URL))][0]
    assert call.kwargs["json"] == {"body": "## Results"}


async def test_supports_enterprise_api_path(aioresponses: aioresponses_cls) -> None:
    """API base URLs with a path prefix are preserved."""
    url = "http://ghe.test/api/v3/repos/owner/repo/issues/7/comments"
    aioresponses.post(url, status=201)
    context = GitHubContextFactory.build(pr_number=7)

    posted = await post_pr_comment(
        context, "body", SecretStr("gh-token"), api_base_url="http://ghe.test/api/v3"
    )

    assert posted is True


async def test_skips_when_not_pull_request(
    aioresponses: aioresponses_cls,
) -> None:
    """Nothing is posted outside pull requests."""
    context = GitHubContextFactory.build(pr_number=None)

    posted = await post_pr_comment(context, "body", SecretStr("gh-token"))

    assert posted is False
    assert not aioresponses.requests


async def test_warns_without_token(
    aioresponses: aioresponses_cls, caplog: pytest.LogCaptureFixture
) -> None:
    """A missing token is reported as a warning."""
    context = GitHubContextFactory.build(pr_number=7)

    posted = await post_pr_comment(context, "body", None)

    assert posted is False
    assert "GITHUB_TOKEN not available" in caplog.text
    assert not aioresponses.requests


async def test_warns_on_api_error(
    aioresponses: aioresponses_cls, caplog: pytest.LogCaptureFixture
) -> None:
    """API errors are logged, not raised."""
    aioresponses.post(COMMENTS_URL, status=403, body="Resource not accessible")
    context = GitHubContextFactory.build(pr_number=7)

    posted = await post_pr_comment(
        context, "body", SecretStr("gh-token"), api_base_url=GITHUB_API_URL
    )

    assert posted is False
    assert "Failed to post PR comment: 403 Resource not accessible" in caplog.text


async def test_warns_on_transport_error(
    aioresponses: aioresponses_cls, caplog: pytest.LogCaptureFixture
) -> None:
    """Transport errors are logged, not raised."""
    aioresponses.post(COMMENTS_URL, exception=aiohttp.ClientConnectionError("down"))
    context = GitHubContextFactory.build(pr_number=7)

    posted = await post_pr_comment(
        context, "body", SecretStr("gh-token"), api_base_url=GITHUB_API_URL
    )

    assert posted is False
    assert "Failed to post PR comment: down" in caplog.text
