"""This module provides the HTTP client used to reach the procurement data proxy.

The proxy sits in front of the Compras.gov.br open-data APIs, which are
known to time out and to answer with gateway errors under load. Requests
are therefore retried on connection failures and on gateway statuses; once
the attempts are exhausted, the last response (or error) is handed back to
the caller unchanged.
"""

import time
from typing import Any

import requests
from licitax_advisor.providers.config import Config, ConfigProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_random_exponential,
)

RETRYABLE_STATUS_CODES = frozenset({502, 503, 504})
RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)
MAX_ATTEMPTS = 3
USER_AGENT = "licitax-advisor/0.1"


def _is_retryable_response(response: requests.Response) -> bool:
    return response.status_code in RETRYABLE_STATUS_CODES


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    if outcome is None:
        return
    reason = outcome.exception() if outcome.failed else f"status {outcome.result().status_code}"
    LoggingProvider().get_logger().warning(
        f"Proxy request attempt {retry_state.attempt_number}/{MAX_ATTEMPTS} failed ({reason}); retrying."
    )


def _last_outcome(retry_state: RetryCallState) -> requests.Response:
    return retry_state.outcome.result()  # type: ignore[union-attr]


class HttpProvider:
    """Owns a `requests.Session` and performs GET requests with retries.

    Each instance keeps its own session, created on first use.
    """

    _config: Config
    _logger: Logger

    def __init__(self) -> None:
        """Initializes the provider from the application configuration."""
        self._config = ConfigProvider.get_config()
        self._logger = LoggingProvider().get_logger()
        self._session: requests.Session | None = None

    def _get_session(self) -> requests.Session:
        """Returns the session, creating it on first use.

        System-level proxy settings are ignored (`trust_env` is off) and JSON
        is requested by default.

        Returns:
            The configured session.
        """
        if self._session is None:
            self._session = requests.Session()
            self._session.trust_env = False
            self._session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
        return self._session

    @retry(
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_random_exponential(multiplier=1, max=10),
        retry=retry_if_exception_type(RETRYABLE_ERRORS) | retry_if_result(_is_retryable_response),
        before_sleep=_log_retry,
        retry_error_callback=_last_outcome,
    )
    def get(self, url: str, **kwargs: Any) -> requests.Response:
        """Performs a GET request.

        The connect and read timeouts come from the configuration unless the
        caller passes its own. Connection failures, timeouts and gateway
        statuses (502, 503, 504) are retried.

        Args:
            url: The URL to request.
            **kwargs: Additional keyword arguments for `requests.Session.get`.

        Returns:
            The response, possibly a gateway error once retries are exhausted.

        Raises:
            requests.RequestException: If the last attempt failed without a response.
        """
        time.sleep(self._config.HTTP_REQUEST_DELAY_SECONDS)
        kwargs.setdefault(
            "timeout", (self._config.HTTP_CONNECT_TIMEOUT_SECONDS, self._config.HTTP_READ_TIMEOUT_SECONDS)
        )
        self._logger.debug(f"GET {url} params={kwargs.get('params')}")
        response = self._get_session().get(url, **kwargs)
        self._logger.debug(f"GET {response.url} answered {response.status_code}")
        return response

    def close(self) -> None:
        """Closes the session, if one was opened."""
        if self._session is not None:
            self._session.close()
            self._session = None
