"""GitHub Actions host integration."""

from qualitymax_action.github.comments import post_pr_comment
from qualitymax_action.github.context import load_github_context
from qualitymax_action.github.inputs import MissingInputError, load_inputs
from qualitymax_action.github.outputs import ActionOutputs

__all__ = [
    "ActionOutputs",
    "MissingInputError",
    "load_github_context",
    "load_inputs",
    "post_pr_comment",
]
