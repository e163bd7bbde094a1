from __future__ import annotations

import logging
import sys

import httpx

import aretryer
from aretryer.predicates.http import StatusCodePredicate, TransportErrorPredicate
from aretryer.strategies import exponential_wait, fixed_wait, join, stop_after_attempt

logger: logging.Logger = logging.getLogger(__name__)

TEST_URL = "https://api.example.com/data"


def check_retry_exception() -> None:
    logger.info("Checking retry on exception...")
    calls = []

    def operation() -> str:
        calls.append(1)
        if len(calls) < 3:
            msg = "sorry"
            raise RuntimeError(msg)
        return "good"

    retryer = (
        aretryer.RetryerBuilder()
        .retry_if_exception_type(RuntimeError)
        .with_stop_strategy(stop_after_attempt(5))
        .with_wait_strategy(join(exponential_wait(0.001, 0.01), fixed_wait(0.001)))
        .build()
    )
    assert retryer.call(operation) == "good"
    assert len(calls) == 3


def check_retry_error() -> None:
    logger.info("Checking retry error...")
    retryer = (
        aretryer.RetryerBuilder()
        .retry_if_result(lambda result: result == "sorry")
        .with_stop_strategy(stop_after_attempt(2))
        .build()
    )
    try:
        retryer.call(lambda: "sorry")
    except aretryer.RetryError as exc:
        assert exc.attempt_number == 2
        assert exc.last_attempt.result == "sorry"
    else:
        msg = "RetryError was not raised"
        raise AssertionError(msg)


def check_http_status() -> None:
    logger.info("Checking retry on HTTP status codes...")
    status_codes = iter([503, 502, 200])
    transport = httpx.MockTransport(lambda request: httpx.Response(next(status_codes)))
    retryer = (
        aretryer.RetryerBuilder()
        .retry_if(StatusCodePredicate())
        .retry_if(TransportErrorPredicate())
        .with_stop_strategy(stop_after_attempt(5))
        .build()
    )
    with httpx.Client(transport=transport) as client:
        response = retryer.call(lambda: client.get(TEST_URL))
    assert response.status_code == 200


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_retry_exception()
        check_retry_error()
        check_http_status()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
