import pytest

from openapi_mock_export.naming import sanitize

SAMPLES = [
    "",
    "OK",
    "OK\n",
    "  Pet Store  ",
    "Not found: <id> / \"name\"",
    "a\\b|c?d*e",
    "multi\nline\r\ndescription",
    "tabs\tand   spaces",
    "a < b",
]


def test_sanitize_trims_and_replaces_spaces() -> None:
    assert sanitize("  Pet Store  ") == "Pet_Store"
    assert sanitize("OK\n") == "OK"
    assert sanitize("tabs\tand   spaces") == "tabs_and_spaces"


def test_sanitize_removes_forbidden_characters() -> None:
    assert sanitize('Not found: <id> / "name"') == "Not_found_id__name"
    assert sanitize("a\\b|c?d*e") == "abcde"


def test_sanitize_empty_input() -> None:
    assert sanitize("") == ""
    assert sanitize(None) == ""
    assert sanitize("\n") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_sanitize_output_is_safe_and_idempotent(text: str) -> None:
    token = sanitize(text)
    assert not set(token) & set('<>:"/\\|?*\n\r')
    assert sanitize(token) == token
