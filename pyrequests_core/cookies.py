"""Cookie values and cookie collections."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

EXPIRES_STRING_SIZE = 100

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class Cookie:
    """A single cookie; an expiry at the epoch means a session cookie."""

    name: str = ""
    value: str = ""
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default=_EPOCH)


class Cookies(list):
    """A list of cookies and whether they are URL-encoded when sent."""

    def __init__(self, cookies: Cookie | Iterable[Cookie] = (), encode: bool = True) -> None:
        if isinstance(cookies, Cookie):
            cookies = (cookies,)
        super().__init__(cookies)
        self.encode = encode

    def __repr__(self) -> str:
        return f"Cookies({list.__repr__(self)}, encode={self.encode})"