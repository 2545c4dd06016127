"""Parsing helpers for response headers and cookies, plus URL escaping."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote, unquote

from .cookies import Cookie, Cookies

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)
_TIME_T_MAX = 2**63 - 1
_TIME_T_MIN = -(2**63)
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

# Field order of one line in the Netscape cookie-jar format.
_DOMAIN, _INCLUDE_SUBDOMAINS, _PATH, _HTTPS_ONLY, _EXPIRES, _NAME, _VALUE = range(7)
_COOKIE_FIELD_COUNT = _VALUE + 1

_TRAILING_WHITESPACE = "\t\n\r "
_SEPARATORS = "\t "


class CaseInsensitiveDict(MutableMapping):
    """A mapping of strings whose keys compare without regard to case."""

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] = (), **kwargs: str) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        self.update(data, **kwargs)

    def __setitem__(self, key: str, value: str) -> None:
        self._store[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._store[key.lower()][1]

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._store:
            raise KeyError(key)
        self._store.pop(folded)

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def copy(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self.items())

    def __repr__(self) -> str:
        return f"CaseInsensitiveDict({dict(self.items())!r})"


@dataclass
class ParsedHeader:
    """Headers of the last response in a header block, with its status line and reason."""

    header: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    status_line: str = ""
    reason: str = ""


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on a delimiter; a trailing empty field is dropped."""
    tokens = to_split.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def is_true(s: str) -> bool:
    """Return True if the string is 'true' in any letter case."""
    return s.isascii() and s.lower() == "true"


def s_timestamp_to_t(st: str) -> int:
    """Parse the leading integer of a string as a Unix timestamp."""
    match = _LEADING_INTEGER.match(st)
    if match is None:
        raise ValueError(f"no integer timestamp in {st!r}")
    value = int(match.group(1))
    if not _TIME_T_MIN <= value <= _TIME_T_MAX:
        raise OverflowError(f"timestamp out of range: {match.group(1)}")
    return value


def parse_cookies(raw_cookies: Iterable[str]) -> Cookies:
    """Build cookies from lines in the tab-separated Netscape cookie-jar format."""
    cookies = Cookies()
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens.extend([""] * (_COOKIE_FIELD_COUNT - len(tokens)))
        expires = s_timestamp_to_t(tokens[_EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_NAME],
                value=tokens[_VALUE],
                domain=tokens[_DOMAIN],
                include_subdomains=is_true(tokens[_INCLUDE_SUBDOMAINS]),
                path=tokens[_PATH],
                https_only=is_true(tokens[_HTTPS_ONLY]),
                expires=_EPOCH + timedelta(seconds=expires),
            )
        )
    return cookies


def _first_separator(text: str, start: int) -> int:
    positions = [pos for pos in (text.find(sep, start) for sep in _SEPARATORS) if pos != -1]
    return min(positions, default=-1)


def parse_header(headers: str) -> ParsedHeader:
    """Parse raw response headers; each status line starts the header set afresh."""
    result = ParsedHeader()
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_WHITESPACE)
            result.status_line = line
            pos1 = _first_separator(line, 0)
            pos2 = _first_separator(line, pos1 + 1) if pos1 != -1 else -1
            if pos2 != -1:
                line = line[pos2 + 1 :]
                result.reason = line
            result.header.clear()

        if line:
            name, colon, value = line.partition(":")
            if colon:
                result.header[name] = value.lstrip(_SEPARATORS).rstrip(_TRAILING_WHITESPACE)
    return result


def url_encode(s: str) -> str:
    """Percent-encode every character except the unreserved ones."""
    return quote(s, safe="")


def url_decode(s: str) -> str:
    """Decode percent-escapes; '+' is left as it is."""
    return unquote(s)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)