"""Ordered request header list.

Headers are kept as an insertion-ordered key -> value mapping and rendered
as ``"Key: Value"`` lines. Setting an existing key replaces its value in
place (last write wins); a new key is appended. Keys are matched exactly on
the text before the first colon, so a key never appears twice.

Only printable ASCII is accepted in keys and values; anything else raises
``ValueError`` when the header is set, not when a request is sent.
"""

from __future__ import annotations

CONTENT_TYPE = "Content-Type"
AUTH_TOKEN = "X-Auth-Token"


def is_header_text(text: str) -> bool:
    """True when ``text`` can be sent as-is in an HTTP header."""
    return text.isascii() and all(char.isprintable() for char in text)


def split_header(line: str) -> tuple[str, str]:
    """Split ``"Key: Value"`` into its key and trimmed value."""
    key, sep, value = line.partition(":")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"Malformed header line: {line!r}")
    return key, value.strip()


class HeaderList:
    """Insertion-ordered headers with replace-or-append semantics."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self._headers: dict[str, str] = {}
        for line in lines or []:
            self.set(line)

    def set(self, line: str) -> None:
        """Set a header from a ``"Key: Value"`` line."""
        key, value = split_header(line)
        self.set_value(key, value)

    def set_value(self, key: str, value: str) -> None:
        if not key or ":" in key or " " in key or not is_header_text(key):
            raise ValueError(f"Invalid header name: {key!r}")
        if not is_header_text(value):
            raise ValueError(f"Header {key} must be printable ASCII")
        self._headers[key] = value

    def remove(self, key: str) -> None:
        self._headers.pop(key, None)

    def get(self, key: str) -> str | None:
        return self._headers.get(key)

    def as_lines(self) -> list[str]:
        return [f"{key}: {value}" for key, value in self._headers.items()]

    def as_dict(self) -> dict[str, str]:
        return dict(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, key: object) -> bool:
        return key in self._headers
