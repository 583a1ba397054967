from __future__ import annotations

import pytest

from manifest_model import ComplexContributor, FlatContributor, parse_contributor


def test_name_and_email_yield_complex_contributor() -> None:
    assert parse_contributor('name="Antoine L",email="email@domain.net"') == ComplexContributor(
        name="Antoine L", email="email@domain.net"
    )


def test_complex_contributor_ignores_surrounding_text() -> None:
    token = 'author: email="bo@x.io" (work) and name="Bo-Ann Smith Jr." trailing'
    assert parse_contributor(token) == ComplexContributor(name="Bo-Ann Smith Jr.", email="bo@x.io")


def test_name_only_yields_flat_name() -> None:
    assert parse_contributor('name="Antoine L"') == FlatContributor("Antoine L")


def test_email_only_yields_flat_email() -> None:
    assert parse_contributor('email="a.l@domain.net"') == FlatContributor("a.l@domain.net")


@pytest.mark.parametrize(
    "token",
    [
        "Antoine Langlois",
        '"Antoine Langlois"',
        'name="unterminated',
        'name="bad+chars"',
        "  spaced  ",
    ],
)
def test_unmatched_token_is_kept_verbatim(token: str) -> None:
    assert parse_contributor(token) == FlatContributor(token)


def test_malformed_name_falls_back_to_email_capture() -> None:
    token = 'name="Bo<script>",email="bo@x.io"'
    assert parse_contributor(token) == FlatContributor("bo@x.io")


def test_contributors_are_immutable() -> None:
    contributor = parse_contributor("Ann")
    with pytest.raises(AttributeError):
        contributor.name_or_email = "Bo"  # type: ignore[misc]


def test_document_values_are_string_or_table() -> None:
    assert FlatContributor("Ann").as_document_value() == "Ann"
    assert ComplexContributor(name="Bo", email="bo@x.io").as_document_value() == {
        "name": "Bo",
        "email": "bo@x.io",
    }
