"""Tests for action input parsing."""

import pytest

from qualitymax_action.github.inputs import (
    MissingInputError,
    load_inputs,
    parse_test_ids,
)


def test_loads_defaults_with_only_api_key() -> None:
    """Unset inputs fall back to their defaults."""
    inputs = load_inputs({"INPUT_API-KEY": "qm_testapikey123"})

    assert inputs.api_key.get_secret_value() == "qm_testapikey123"
    assert inputs.project_id == ""
    assert inputs.test_suite == "all"
    assert inputs.test_ids is None
    assert inputs.base_url is None
    assert inputs.browser == "chromium"
    assert inputs.headless is True
    assert inputs.timeout_minutes == 30
    assert inputs.fail_on_test_failure is True
    assert inputs.post_pr_comment is True


def test_loads_all_inputs() -> None:
    """Every input is read from its INPUT_ variable."""
    inputs = load_inputs(
        {
            "INPUT_API-KEY": "qm_key",
            "INPUT_PROJECT-ID": "proj_abc123",
            "INPUT_PROJECT-NAME": "Shop",
            "INPUT_TEST-SUITE": "smoke",
            "INPUT_TEST-IDS": "1, 2,3",
            "INPUT_BASE-URL": "https://staging.example.com",
            "INPUT_BROWSER": "firefox",
            "INPUT_HEADLESS": "false",
            "INPUT_TIMEOUT-MINUTES": "10",
            "INPUT_FAIL-ON-TEST-FAILURE": "FALSE",
            "INPUT_POST-PR-COMMENT": "false",
        }
    )

    assert inputs.project_id == "proj_abc123"
    assert inputs.project_name == "Shop"
    assert inputs.test_suite == "smoke"
    assert inputs.test_ids == [1, 2, 3]
    assert inputs.base_url == "https://staging.example.com"
    assert inputs.browser == "firefox"
    assert inputs.headless is False
    assert inputs.timeout_minutes == 10
    assert inputs.fail_on_test_failure is False
    assert inputs.post_pr_comment is False


def test_raises_when_api_key_missing() -> None:
    """The API key is required."""
    with pytest.raises(MissingInputError, match="api-key"):
        load_inputs({"INPUT_PROJECT-ID": "proj_abc123"})


def test_api_key_hidden_from_repr() -> None:
    """The API key is not exposed in logs."""
    inputs = load_inputs({"INPUT_API-KEY": "qm_secret"})

    assert "qm_secret" not in repr(inputs)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", None),
        ("5", [5]),
        ("1,2,3", [1, 2, 3]),
        (" 4 , 5 ,", [4, 5]),
    ],
)
def test_parse_test_ids(value: str, expected: list[int] | None) -> None:
    """Parses comma-separated test IDs."""
    assert parse_test_ids(value) == expected


def test_parse_test_ids_rejects_non_numeric() -> None:
    """Non-numeric test IDs are rejected."""
    with pytest.raises(ValueError, match="invalid literal"):
        parse_test_ids("1,abc")
