"""OpenRouter chat completions client."""

from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Optional

import requests
from pydantic import SecretStr, ValidationError

import constants
from log import get_logger
from models.requests import ChatRequest
from models.responses import ChatResponse

logger = get_logger(__name__)


class ResearchToolError(Exception):
    """Base class for errors reported to user; the message is shown as is."""


class TransportError(ResearchToolError):
    """Request did not reach the service or no response has been received."""


class ConnectionFailedError(TransportError):
    """Connection to the service failed or has been lost."""


class RequestTimeoutError(TransportError):
    """Configured timeout expired before the response was received."""


class APIStatusError(ResearchToolError):
    """Service returned non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize the error with the HTTP status code."""
        super().__init__(message)
        self.status_code = status_code


class AuthenticationFailedError(APIStatusError):
    """API key has been rejected (HTTP 401)."""


class InsufficientCreditsError(APIStatusError):
    """Account has no credits left (HTTP 402)."""


class RateLimitedError(APIStatusError):
    """Too many requests (HTTP 429)."""


class ResponseParseError(ResearchToolError):
    """Response body is not a valid chat completion response."""


class APIResponseError(ResearchToolError):
    """Response carries an error envelope instead of choices."""


def check_status(status_code: int, body: str) -> None:
    """Raise an error matching the HTTP status code when it is not a success."""
    if 200 <= status_code < 300:
        return
    if status_code == 401:
        raise AuthenticationFailedError(
            f"Authentication failed (401). Check your {constants.API_KEY_ENV_VAR}.\n"
            f"Get a key at {constants.OPENROUTER_KEYS_URL}",
            status_code,
        )
    if status_code == 402:
        raise InsufficientCreditsError(
            f"Insufficient credits (402). Add credits at {constants.OPENROUTER_CREDITS_URL}",
            status_code,
        )
    if status_code == 429:
        raise RateLimitedError(
            "Rate limited (429). Wait a moment and try again.", status_code
        )
    raise APIStatusError(f"API error ({status_code}): {body}", status_code)


def parse_response(body: str) -> ChatResponse:
    """Parse response body and check it for an error envelope."""
    try:
        response = ChatResponse.model_validate_json(body)
    except ValidationError as e:
        raise ResponseParseError(
            "Failed to parse API response: "
            f"{body[: constants.RESPONSE_PREFIX_LENGTH]}"
        ) from e

    if response.error is not None:
        raise APIResponseError(
            f"API error: {response.error.message or 'unknown error'}"
        )
    return response


class OpenRouterClient:
    """Client sending one chat completion request to OpenRouter."""

    def __init__(
        self,
        api_key: SecretStr,
        url: str = constants.OPENROUTER_CHAT_COMPLETIONS_URL,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the client; timeout None means no deadline."""
        self.url = url
        self.timeout = timeout
        self._api_key = api_key
        self._session = requests.Session()

    @property
    def headers(self) -> dict[str, str]:
        """HTTP headers sent with the request."""
        return {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "HTTP-Referer": constants.HTTP_REFERER,
            "X-Title": constants.CLIENT_TITLE,
            "Content-Type": "application/json",
        }

    def send(
        self,
        request: ChatRequest,
        on_connected: Optional[Callable[[], None]] = None,
    ) -> tuple[int, str]:
        """
        POST the request and return HTTP status code with response body.

        When timeout is set, the whole exchange including reading the body
        is bounded by it. The on_connected callback is called once response
        headers arrive, before the body is read.

        Raises:
            ConnectionFailedError: On connection problems.
            RequestTimeoutError: When the timeout expires.
        """
        body = request.to_json()
        logger.debug("Sending %d bytes to %s", len(body), self.url)

        if self.timeout is None:
            return self._post(body, on_connected)

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="http")
        try:
            future: Future[tuple[int, str]] = executor.submit(
                self._post, body, on_connected
            )
            return future.result(timeout=self.timeout)
        except FutureTimeoutError as e:
            raise RequestTimeoutError(self._timeout_message()) from e
        finally:
            # do not wait for the abandoned request
            executor.shutdown(wait=False, cancel_futures=True)

    def _timeout_message(self) -> str:
        """Return message shown when the request times out."""
        return (
            f"Request to OpenRouter timed out after {self.timeout}s. "
            "Retry with a longer --timeout?"
        )

    def _post(
        self, body: str, on_connected: Optional[Callable[[], None]]
    ) -> tuple[int, str]:
        """Perform the HTTP POST and read the response body."""
        try:
            response = self._session.post(
                self.url,
                data=body.encode("utf-8"),
                headers=self.headers,
                timeout=self.timeout,
                stream=True,
            )
        except requests.Timeout as e:
            raise RequestTimeoutError(self._timeout_message()) from e
        except requests.RequestException as e:
            raise ConnectionFailedError(
                f"Connection to OpenRouter failed: {e}\n"
                "Check your network and retry?"
            ) from e

        with response:
            if on_connected is not None:
                on_connected()
            try:
                text = response.text
            except requests.RequestException as e:
                raise ConnectionFailedError(
                    "Connection to OpenRouter lost while waiting for response: "
                    f"{e}\nRetry?"
                ) from e

        logger.debug("Received HTTP status %d", response.status_code)
        return response.status_code, text

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
