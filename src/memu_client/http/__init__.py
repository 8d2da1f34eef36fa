"""HTTP request execution for memu-client."""

from .executor import RequestExecutor, decode_body, parse_retry_after

__all__ = [
    "RequestExecutor",
    "decode_body",
    "parse_retry_after",
]
