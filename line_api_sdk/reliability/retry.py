"""
Retry orchestration for LINE API calls.

One logical call runs as a sequential loop of attempts. Each attempt builds
a fresh request from the caller's factory, sends it on the injected client,
classifies the response, and either returns, raises, or backs off and tries
again.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config.constants import FALLBACK_STATUS_CODE, JITTER_MAX_SECONDS
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..observability.logging import ApiLogger
from .classifier import AttemptFailure, AttemptOutcome, AttemptSuccess, ResponseClassifier
from .errors import DeadlineExceededError, LineApiError, MalformedResponseError, TransportError
from .idempotency import apply_retry_key

T = TypeVar('T')

RequestFactory = Callable[[], httpx.Request]
RetryPredicate = Callable[[int], bool]


def is_standard_retry(status_code: int) -> bool:
    """Retry server errors and rate limiting."""
    return 500 <= status_code < 600 or status_code == 429


def never_retry(status_code: int) -> bool:
    """Policy for one-shot calls such as exchanging a single-use authorization code."""
    return False


@dataclass
class RetryState:
    """Progress of one logical call, readable after a deadline cancels it."""
    attempts: int = 0


def compute_backoff(retry_base_delay: float, attempt_index: int, rng: random.Random) -> float:
    """
    Exponential backoff with jitter.

    The zero-based attempt index doubles the base delay each time
    (x1, x2, x4, x8, ...) and up to 100ms of jitter is added, so the result
    lies in [base * 2**index, base * 2**index + 0.1).
    """
    jitter = rng.uniform(0, JITTER_MAX_SECONDS)
    # uniform() may return its upper bound
    if jitter >= JITTER_MAX_SECONDS:
        jitter = 0.0
    return retry_base_delay * (2 ** attempt_index) + jitter


class RetryManager:
    """
    Executes a request factory with retry logic.

    The manager holds no per-call state, so one instance can serve
    concurrent calls; the attempt counter and the jitter generator live in
    ``execute``.
    """

    def __init__(self, logger: Optional[ApiLogger] = None):
        self.logger = logger or ApiLogger("engine")

    async def execute(
        self,
        request_factory: RequestFactory,
        response_type: Type[T],
        client: httpx.AsyncClient,
        options: ExecutionOptions,
        is_retryable: RetryPredicate = is_standard_retry,
        idempotency_key: Optional[str] = None,
        deadline: Optional[float] = None
    ) -> Tuple[T, ResponseMetadata]:
        """
        Run one logical call.

        Args:
            request_factory: Zero-argument callable returning a fresh request;
                called once per attempt
            response_type: Type the success payload is validated into
            client: Transport used to send each attempt
            options: Execution options (attempt limit, backoff base)
            is_retryable: Decides from the HTTP status whether a failure may
                be retried; transport failures are judged as status 500
            idempotency_key: Sent as X-Line-Retry-Key on every attempt when
                more than one attempt is allowed; also makes 409 a success
            deadline: Optional bound in seconds for the whole call

        Returns:
            Tuple of the validated payload and the response metadata

        Raises:
            LineApiError: The classified error of the final attempt
            DeadlineExceededError: When ``deadline`` elapsed first
        """
        state = RetryState()
        call = self._run(
            request_factory, response_type, client, options, is_retryable, idempotency_key, state
        )
        if deadline is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=deadline)
        except asyncio.TimeoutError:
            raise DeadlineExceededError(deadline, attempts=state.attempts) from None

    async def _run(
        self,
        request_factory: RequestFactory,
        response_type: Type[T],
        client: httpx.AsyncClient,
        options: ExecutionOptions,
        is_retryable: RetryPredicate,
        idempotency_key: Optional[str],
        state: RetryState
    ) -> Tuple[T, ResponseMetadata]:
        attempt_limit = options.attempt_limit
        adapter = TypeAdapter(response_type)
        rng = random.Random()
        conflict_is_success = idempotency_key is not None
        last_error: Optional[LineApiError] = None

        for attempt_index in range(attempt_limit):
            state.attempts = attempt_index + 1
            request = apply_retry_key(request_factory(), idempotency_key, attempt_limit)
            outcome = await self._attempt(client, request, conflict_is_success)

            if isinstance(outcome, AttemptSuccess):
                try:
                    value = adapter.validate_python(outcome.payload)
                except ValidationError:
                    # some endpoints report an error body with a success status
                    error = ResponseClassifier.classify_payload(
                        outcome.payload, outcome.status_code, outcome.metadata
                    )
                else:
                    if attempt_index > 0:
                        self.logger.info(
                            f"Request succeeded after {attempt_index} retries",
                            request_id=outcome.metadata.request_id,
                            attempts=attempt_index + 1
                        )
                    return value, outcome.metadata
            else:
                error = outcome.error

            error.attempts = attempt_index + 1
            self.logger.debug(
                f"Attempt {attempt_index + 1}/{attempt_limit} failed",
                request_id=error.metadata.request_id if error.metadata else None,
                status_code=error.status_code,
                error_type=type(error).__name__
            )

            if not self._should_retry(error, is_retryable):
                raise error

            last_error = error
            is_last_attempt = attempt_index + 1 >= attempt_limit
            # no sleep after the final attempt; the result is already decided
            if not is_last_attempt and options.retry_base_delay > 0:
                delay = compute_backoff(options.retry_base_delay, attempt_index, rng)
                self.logger.warning(
                    f"Retrying after {type(error).__name__}",
                    attempt=attempt_index + 1,
                    status_code=error.status_code,
                    error_category=ResponseClassifier.categorize(error).value,
                    delay=round(delay, 3)
                )
                await asyncio.sleep(delay)

        self.logger.warning(
            f"Giving up after {attempt_limit} attempts",
            status_code=last_error.status_code,
            error_category=ResponseClassifier.categorize(last_error).value
        )
        raise last_error

    async def _attempt(
        self,
        client: httpx.AsyncClient,
        request: httpx.Request,
        conflict_is_success: bool
    ) -> AttemptOutcome:
        """Send one request and classify what came back."""
        try:
            response = await client.send(request, stream=True)
        except httpx.RequestError as e:
            return AttemptFailure(self._transport_error(e))

        try:
            await response.aread()
        except httpx.DecodingError:
            # the status and headers arrived; only the body is unreadable
            return AttemptFailure(MalformedResponseError(
                response.status_code, "", ResponseMetadata.from_headers(response.headers)
            ))
        except httpx.RequestError as e:
            return AttemptFailure(self._transport_error(e))
        finally:
            await response.aclose()

        return ResponseClassifier.classify(
            response.status_code,
            response.headers,
            response.text,
            conflict_is_success=conflict_is_success
        )

    @staticmethod
    def _transport_error(e: httpx.RequestError) -> TransportError:
        error = TransportError(f"{type(e).__name__}: {e}", original_error=e)
        error.__cause__ = e
        return error

    def _should_retry(self, error: LineApiError, is_retryable: RetryPredicate) -> bool:
        status_code = error.status_code
        if status_code is None:
            status_code = FALLBACK_STATUS_CODE
        return is_retryable(status_code)


async def execute_api(
    request_factory: RequestFactory,
    response_type: Type[T],
    client: httpx.AsyncClient,
    options: ExecutionOptions,
    is_retryable: RetryPredicate = is_standard_retry,
    idempotency_key: Optional[str] = None,
    deadline: Optional[float] = None,
    logger: Optional[ApiLogger] = None
) -> Tuple[T, ResponseMetadata]:
    """Execute one logical call; see ``RetryManager.execute``."""
    return await RetryManager(logger).execute(
        request_factory,
        response_type,
        client,
        options,
        is_retryable=is_retryable,
        idempotency_key=idempotency_key,
        deadline=deadline
    )
