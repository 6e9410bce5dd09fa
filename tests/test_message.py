from unittest.mock import patch

from firebase_ci.core.message import clean_message, sanitize_message, shellescape


def test_plain_message_is_unchanged():
    assert sanitize_message("Update_readme") == "Update_readme"


def test_missing_message_uses_default():
    assert sanitize_message(None) == "Update"
    assert sanitize_message("") == "Update"


def test_whitespace_only_message_uses_default():
    assert sanitize_message("\n\t`\r") == "Update"


def test_quotes_and_backticks():
    assert sanitize_message('He said "hi" `now`') == "'He said '\\''hi'\\'' now'"


def test_line_breaks_are_removed():
    assert sanitize_message("first\nsecond") == "firstsecond"


def test_message_is_truncated():
    raw = "a" * 151
    assert sanitize_message(raw) == "a" * 150
    assert sanitize_message("a" * 150) == "a" * 150


def test_truncation_happens_before_escaping():
    cleaned = clean_message("a b" * 100)
    assert len(cleaned) == 150


def test_shellescape_safe_arguments():
    assert shellescape(["deploy", "--only", "hosting:site"]) == "deploy --only hosting:site"


def test_shellescape_unsafe_arguments():
    assert shellescape(["hello world"]) == "'hello world'"
    assert shellescape(["it's"]) == "'it'\\''s'"


def test_shellescape_leading_quote():
    assert shellescape(["'quoted'"]) == "\\''quoted'\\'"


def test_sanitize_falls_back_on_error(logger, output):
    with patch("firebase_ci.core.message.shellescape", side_effect=ValueError("boom")):
        assert sanitize_message("some message", logger) == "Update"
    assert "falling back to default message" in output.export_text()
