"""
Summary: Read and edit single parameters of a form-encoded query string in place.
Why: Modal updates must leave every unrelated parameter byte-for-byte unchanged.
"""

from __future__ import annotations

from urllib.parse import quote_plus, unquote_plus


def _pairs(query: str) -> list[str]:
    return [pair for pair in query.lstrip("?").split("&") if pair]


def _decoded_name(pair: str) -> str:
    return unquote_plus(pair.partition("=")[0], encoding="utf-8", errors="replace")


def _encode_pair(name: str, value: str) -> str:
    return f"{quote_plus(name, encoding='utf-8')}={quote_plus(value, encoding='utf-8')}"


def get_param(query: str, name: str) -> str | None:
    """Return the decoded value of the first ``name`` parameter, or None."""

    for pair in _pairs(query):
        if _decoded_name(pair) == name:
            return unquote_plus(pair.partition("=")[2], encoding="utf-8", errors="replace")
    return None


def set_param(query: str, name: str, value: str) -> str:
    """Set ``name`` to ``value``.

    The first occurrence is replaced where it stands and later duplicates are
    dropped; a missing parameter is appended. Other pairs keep their raw text.
    """

    encoded = _encode_pair(name, value)
    result: list[str] = []
    replaced = False
    for pair in _pairs(query):
        if _decoded_name(pair) != name:
            result.append(pair)
        elif not replaced:
            result.append(encoded)
            replaced = True
    if not replaced:
        result.append(encoded)
    rebuilt = "&".join(result)
    return query.lstrip("?") if rebuilt == query.lstrip("?") else rebuilt


def delete_param(query: str, *names: str) -> str:
    """Remove every occurrence of ``names``; returns ``query`` untouched if none exist."""

    pairs = _pairs(query)
    kept = [pair for pair in pairs if _decoded_name(pair) not in names]
    if len(kept) == len(pairs):
        return query.lstrip("?")
    return "&".join(kept)


__all__ = ["delete_param", "get_param", "set_param"]
