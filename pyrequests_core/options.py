"""Small value types describing request options."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike


class AuthMode(enum.Enum):
    BASIC = enum.auto()
    DIGEST = enum.auto()
    NTLM = enum.auto()
    NEGOTIATE = enum.auto()


class Authentication:
    """User credentials together with the authentication scheme to use."""

    __slots__ = ("_auth_string", "auth_mode")

    def __init__(self, username: str, password: str, auth_mode: AuthMode) -> None:
        self._auth_string = f"{username}:{password}"
        self.auth_mode = auth_mode

    def auth_string(self) -> str:
        """Return the credentials as 'username:password'."""
        return self._auth_string

    def __repr__(self) -> str:
        return f"Authentication(auth_mode={self.auth_mode!r})"


@dataclass
class File:
    """A file to upload, optionally sent under a different name."""

    filepath: str
    overriden_filename: str = ""

    def has_overriden_filename(self) -> bool:
        return bool(self.overriden_filename)


class Files(list):
    """A list of files to upload."""

    def __init__(self, files: File | Iterable[File] = ()) -> None:
        if isinstance(files, File):
            files = (files,)
        super().__init__(files)

    @classmethod
    def from_paths(cls, filepaths: Iterable[str]) -> Files:
        """Build a list of files from plain paths."""
        return cls(File(path) for path in filepaths)


@dataclass(frozen=True)
class Body:
    """A raw request body."""

    content: bytes = b""

    def __post_init__(self) -> None:
        content = self.content
        if isinstance(content, str):
            content = content.encode("utf-8")
        elif isinstance(content, (bytearray, memoryview)):
            content = bytes(content)
        elif not isinstance(content, bytes):
            raise TypeError(f"body must be str or bytes, not {type(content).__name__}")
        object.__setattr__(self, "content", content)

    @classmethod
    def from_file(cls, file: File | str | PathLike) -> Body:
        """Read the whole file, in binary mode, as the body."""
        path = file.filepath if isinstance(file, File) else file
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise ValueError("Can't open the file for HTTP request body!") from exc
        return cls(data)

    def __bytes__(self) -> bytes:
        return self.content

    def __len__(self) -> int:
        return len(self.content)


class HttpVersionCode(enum.Enum):
    VERSION_NONE = enum.auto()
    VERSION_1_0 = enum.auto()
    VERSION_1_1 = enum.auto()
    VERSION_2_0 = enum.auto()
    VERSION_2_0_TLS = enum.auto()
    VERSION_2_0_PRIOR_KNOWLEDGE = enum.auto()
    VERSION_3_0 = enum.auto()


@dataclass(frozen=True)
class HttpVersion:
    """The HTTP version to use; VERSION_NONE leaves the choice open."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


@dataclass(frozen=True)
class LimitRate:
    """Transfer speed limits in bytes per second; 0 means unlimited."""

    downrate: int
    uprate: int


@dataclass(frozen=True)
class LocalPortRange:
    """Number of local ports to try, an unsigned 16-bit value."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"local port range must fit in 16 bits, got {self.value}")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class UserAgent:
    """The User-Agent string to send."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Verbose:
    """Whether to produce verbose transfer output."""

    verbose: bool = True


@dataclass(frozen=True)
class UnixSocket:
    """Path of a Unix domain socket to connect through."""

    unix_socket: str

    def socket_string(self) -> str:
        return self.unix_socket


class CertInfo(list):
    """Lines of certificate information reported for one certificate."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        super().__init__(entries)


__all__ = [
    "AuthMode",
    "Authentication",
    "File",
    "Files",
    "Body",
    "HttpVersionCode",
    "HttpVersion",
    "LimitRate",
    "LocalPortRange",
    "UserAgent",
    "Verbose",
    "UnixSocket",
    "CertInfo",
]

_ = field  # dataclass helpers imported for symmetry with other modules