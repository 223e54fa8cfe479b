import pytest

from parsers.basic_extract import find_email, has_email


@pytest.mark.parametrize(
    "text, expected",
    [
        ("reach me at a.b@x.co", True),
        ("call 555-1234", False),
        ("a@b.c", False),
        ("a@b.co", True),
        ("Jane Doe\nJANE_DOE+jobs@mail.example.org\nBerlin", True),
        ("twitter: @janedoe", False),
        ("", False),
    ],
)
def test_has_email(text, expected):
    assert has_email(text) is expected


def test_find_email_returns_first_match():
    assert find_email("x first@a.io then second@b.io") == "first@a.io"
    assert find_email("no address here") is None
