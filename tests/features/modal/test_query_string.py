"""Tests for pair-wise query string editing."""

from __future__ import annotations

import pytest

from querysync.features.modal.domain.query_string import delete_param, get_param, set_param


@pytest.mark.parametrize(
    ("query", "name", "expected"),
    [
        ("tab=active&locationId=42", "locationId", "42"),
        ("?modal=edit", "modal", "edit"),
        ("q=north+park", "q", "north park"),
        ("q=a%26b", "q", "a&b"),
        ("flag", "flag", ""),
        ("a=1&a=2", "a", "1"),
        ("tab=active", "modal", None),
        ("", "modal", None),
    ],
)
def test_get_param(query: str, name: str, expected: str | None) -> None:
    assert get_param(query, name) == expected


def test_set_param_appends_missing_parameter() -> None:
    assert set_param("tab=active", "modal", "edit") == "tab=active&modal=edit"
    assert set_param("", "modal", "edit") == "modal=edit"


def test_set_param_replaces_in_place_and_drops_duplicates() -> None:
    assert set_param("modal=details&tab=1&modal=edit", "modal", "create") == "modal=create&tab=1"


def test_set_param_keeps_unrelated_pairs_raw() -> None:
    query = "filter=%E2%9C%93&sort=name%20asc&page=2"

    assert set_param(query, "locationId", "42") == f"{query}&locationId=42"


def test_set_param_encodes_value() -> None:
    assert set_param("", "q", "a&b c") == "q=a%26b+c"


def test_delete_param_removes_every_occurrence() -> None:
    assert delete_param("a=1&modal=edit&b=2&modal=x", "modal") == "a=1&b=2"
    assert delete_param("locationId=4&modal=edit", "locationId", "modal") == ""


def test_delete_param_without_match_returns_query_unchanged() -> None:
    assert delete_param("?tab=1&&x=%20", "modal") == "tab=1&&x=%20"
