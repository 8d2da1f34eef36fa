"""Retry policies for memu-client."""

from .policy import (
    RetryPolicy,
    RetryConfig,
    DefaultRetryPolicy,
    NoRetryPolicy,
    CustomRetryPolicy,
    CustomRetryFunc,
    CustomBackoffFunc,
    create_retry_policy,
)

__all__ = [
    "RetryPolicy",
    "RetryConfig",
    "DefaultRetryPolicy",
    "NoRetryPolicy",
    "CustomRetryPolicy",
    "CustomRetryFunc",
    "CustomBackoffFunc",
    "create_retry_policy",
]
