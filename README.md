# pyrequests_core

Building blocks for an HTTP client, in plain Python with no third-party
dependencies.

## Modules

- `pyrequests_core.status_codes`: named HTTP status code constants
  (`HTTP_OK`, `HTTP_NOT_FOUND`, ...) and the range checks `is_informational`,
  `is_success`, `is_redirect`, `is_client_error` and `is_server_error`.
- `pyrequests_core.timeout`: `Timeout` and `ConnectTimeout`. Each takes a
  `datetime.timedelta` or an `int` number of milliseconds. Fractions of a
  millisecond are truncated toward zero. `milliseconds()` raises
  `OverflowError` or `TimeoutUnderflowError` when the value does not fit a
  signed 64-bit integer.
- `pyrequests_core.options`: request option values.
  - `Authentication` with `AuthMode`. `auth_string()` returns `"user:password"`.
  - `Body`, which holds bytes. A `str` is encoded as UTF-8. `Body.from_file`
    reads a whole file and raises `ValueError` if it cannot be opened.
  - `File`, with `has_overriden_filename()`, and `Files`, a list of files with
    `Files.from_paths`.
  - `HttpVersion` with `HttpVersionCode`.
  - `LimitRate`.
  - `LocalPortRange`, which must fit in 16 bits.
  - `UserAgent`, `Verbose`, `UnixSocket` (with `socket_string()`) and
    `CertInfo`.
- `pyrequests_core.cookies`: the `Cookie` dataclass and `Cookies`. `Cookies`
  is a list of cookies with an `encode` flag. A cookie whose expiry is the
  epoch is a session cookie.
- `pyrequests_core.util`:
  - `parse_header` turns a raw header block into a `ParsedHeader` with
    `header`, `status_line` and `reason`. `header` is a `CaseInsensitiveDict`.
    Each `HTTP/` status line starts the header set afresh.
  - `parse_cookies` reads lines in the tab-separated Netscape cookie-jar
    format.
  - `split`, `is_true` and `s_timestamp_to_t`.
  - `url_encode` percent-encodes everything except unreserved characters.
    `url_decode` leaves `+` as it is.
- `pyrequests_core.threadpool`: `ThreadPool`, which runs callables on between
  `min_threads` and `max_threads` workers.
  - `start`, `stop`, `pause`, `resume` and `wait` control the pool, and
    `submit` queues work. `submit` returns a `concurrent.futures.Future`.
  - Workers beyond the minimum leave after `max_idle` without work. `max_idle`
    is a `timedelta` or a number of milliseconds.
  - The pool also works as a context manager.

## Installation

```
pip install .
```

## Examples

```python
from pyrequests_core.status_codes import is_success
from pyrequests_core.util import parse_header

parsed = parse_header("HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n")
print(parsed.status_line)                 # HTTP/1.1 200 OK
print(parsed.reason)                      # OK
print(parsed.header["content-type"])      # text/html
print(is_success(200))                    # True
```

```python
from pyrequests_core.options import Authentication, AuthMode

password = "password"
auth = Authentication("user", password, AuthMode.BASIC)
print(auth.auth_string())                 # user:password
```

```python
from pyrequests_core.threadpool import ThreadPool

pool = ThreadPool(1, 4)
pool.start(2)
future = pool.submit(sum, [1, 2, 3])
pool.wait()
print(future.result())                    # 6
pool.stop()
```

## What this package does not do

The package has no network transport. It does not open connections, send
requests, follow redirects or perform TLS, and it has no session object. It
provides the values, parsers and worker pool that such a client would use.

## Running the tests

```
pip install ".[test]"
pytest
```