"""Extraction of the workflow run context."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from qualitymax_action.models.execution import GitHubContext

log = logging.getLogger(__name__)


def load_event_payload(environ: Mapping[str, str]) -> Mapping[str, Any]:
    """Load the webhook payload that triggered the workflow, if available."""
    event_path = environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.is_file():
        log.debug("Event payload %s does not exist", event_path)
        return {}

    payload = json.loads(path.read_text(encoding="utf-8"))
    return payload if isinstance(payload, dict) else {}


def load_github_context(environ: Mapping[str, str]) -> GitHubContext:
    """Build the run context from the default Actions environment variables."""
    payload = load_event_payload(environ)
    pull_request = payload.get("pull_request") or {}
    run_number = environ.get("GITHUB_RUN_NUMBER")

    return GitHubContext(
        repository=environ.get("GITHUB_REPOSITORY", ""),
        sha=environ.get("GITHUB_SHA", ""),
        ref=environ.get("GITHUB_REF", ""),
        run_id=environ.get("GITHUB_RUN_ID", ""),
        run_number=int(run_number) if run_number else None,
        pr_number=pull_request.get("number"),
        actor=environ.get("GITHUB_ACTOR") or None,
        event_name=environ.get("GITHUB_EVENT_NAME") or None,
    )
