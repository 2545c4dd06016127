"""Building blocks for an HTTP client: status codes, timeouts, request options, cookies, parsing helpers and a thread pool."""

__version__ = "1.11.1"

__all__ = ["cookies", "options", "status_codes", "threadpool", "timeout", "util"]