"""Tests for retry policies."""

import httpx
import pytest

from memu_client.retry import (
    CustomRetryPolicy,
    DefaultRetryPolicy,
    NoRetryPolicy,
    RetryConfig,
    RetryPolicy,
    create_retry_policy,
)


class TestRetryConfig:
    """Test retry configuration defaults and validation."""

    def test_defaults(self):
        config = RetryConfig()
        assert config.max_retries == 3
        assert config.base_delay == 1.0
        assert config.max_delay == 32.0
        assert config.retryable_status_codes == frozenset({429, 500, 502, 503, 504})

    def test_status_codes_accept_any_iterable(self):
        config = RetryConfig(retryable_status_codes=[503])
        assert config.retryable_status_codes == frozenset({503})

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            RetryConfig(max_retries=-1)
        with pytest.raises(ValueError):
            RetryConfig(base_delay=-0.5)


class TestDefaultRetryPolicy:
    """Test the default exponential backoff policy."""

    @pytest.fixture
    def policy(self):
        return DefaultRetryPolicy()

    @pytest.mark.parametrize("attempt", [3, 4, 10, 100])
    @pytest.mark.parametrize("status_code", [0, 429, 500, 503])
    def test_never_retries_at_or_beyond_ceiling(self, policy, attempt, status_code):
        error = httpx.ConnectError("refused") if status_code == 0 else None
        assert policy.should_retry(attempt, status_code, error) is False

    def test_transport_error_retried_regardless_of_status(self, policy):
        error = httpx.ConnectError("refused")
        assert policy.should_retry(0, 0, error) is True
        assert policy.should_retry(2, 400, error) is True

    @pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504])
    def test_retryable_status_codes(self, policy, status_code):
        assert policy.should_retry(0, status_code, None) is True

    @pytest.mark.parametrize("status_code", [400, 401, 404, 422, 501, 505])
    def test_non_retryable_status_codes(self, policy, status_code):
        assert policy.should_retry(0, status_code, None) is False

    def test_no_status_and_no_error_is_not_retried(self, policy):
        assert policy.should_retry(0, 0, None) is False

    @pytest.mark.parametrize("attempt", range(12))
    def test_backoff_formula(self, policy, attempt):
        assert policy.get_backoff(attempt) == min(1.0 * 2 ** attempt, 32.0)

    def test_backoff_sequence_and_saturation(self, policy):
        assert [policy.get_backoff(n) for n in range(7)] == [1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 32.0]
        assert policy.get_backoff(10) == 32.0

    @pytest.mark.parametrize("attempt", [63, 64, 1023, 1024, 5000])
    def test_backoff_saturates_for_large_attempts(self, policy, attempt):
        assert policy.get_backoff(attempt) == 32.0

    def test_zero_base_delay_never_overflows(self):
        policy = DefaultRetryPolicy(RetryConfig(base_delay=0.0))
        assert policy.get_backoff(2000) == 0.0

    def test_custom_config(self):
        policy = DefaultRetryPolicy(
            RetryConfig(max_retries=5, base_delay=0.5, max_delay=3.0, retryable_status_codes={503})
        )
        assert policy.should_retry(4, 503, None) is True
        assert policy.should_retry(5, 503, None) is False
        assert policy.should_retry(0, 500, None) is False
        assert policy.get_backoff(0) == 0.5
        assert policy.get_backoff(3) == 3.0

    def test_satisfies_protocol(self, policy):
        assert isinstance(policy, RetryPolicy)


class TestNoRetryPolicy:
    """Test the policy that disables retries."""

    @pytest.mark.parametrize("attempt", [0, 1, 5])
    @pytest.mark.parametrize("status_code", [0, 429, 500, 503])
    def test_never_retries(self, attempt, status_code):
        policy = NoRetryPolicy()
        assert policy.should_retry(attempt, status_code, httpx.ConnectError("x")) is False
        assert policy.should_retry(attempt, status_code, None) is False

    @pytest.mark.parametrize("attempt", [0, 1, 10])
    def test_zero_backoff(self, attempt):
        assert NoRetryPolicy().get_backoff(attempt) == 0

    def test_satisfies_protocol(self):
        assert isinstance(NoRetryPolicy(), RetryPolicy)


class TestCustomRetryPolicy:
    """Test caller-supplied retry functions."""

    def test_delegates_below_ceiling(self):
        calls = []

        def should_retry(attempt, status_code, error):
            calls.append((attempt, status_code, error))
            return status_code == 418

        policy = CustomRetryPolicy(2, should_retry, lambda attempt: 0.25 * (attempt + 1))

        assert policy.should_retry(0, 418, None) is True
        assert policy.should_retry(1, 500, None) is False
        assert calls == [(0, 418, None), (1, 500, None)]
        assert policy.get_backoff(3) == 1.0

    def test_ceiling_applies_before_custom_function(self):
        calls = []

        def always(attempt, status_code, error):
            calls.append(attempt)
            return True

        policy = CustomRetryPolicy(2, always, lambda attempt: 0.0)

        assert policy.should_retry(2, 500, None) is False
        assert policy.should_retry(7, 0, httpx.ConnectError("x")) is False
        assert calls == []

    def test_zero_max_retries_disables_retries(self):
        policy = CustomRetryPolicy(0, lambda *args: True, lambda attempt: 1.0)
        assert policy.should_retry(0, 500, None) is False

    def test_satisfies_protocol(self):
        assert isinstance(CustomRetryPolicy(1, lambda *a: True, lambda n: 0.0), RetryPolicy)


def test_create_retry_policy():
    policy = create_retry_policy(max_retries=1, base_delay=2.0, max_delay=5.0)
    assert isinstance(policy, DefaultRetryPolicy)
    assert policy.max_retries == 1
    assert policy.get_backoff(2) == 5.0
