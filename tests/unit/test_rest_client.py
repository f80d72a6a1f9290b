"""Unit tests for the GitHub REST transport."""

from __future__ import annotations

import asyncio
import json
import secrets
import typing as typ

import httpx
import msgspec
import pytest

from ghactivity.rest import (
    MEDIA_TYPE_V3,
    AbuseRateLimitError,
    AcceptedError,
    GitHubAPIError,
    GitHubClientConfig,
    GitHubConfigError,
    GitHubRestClient,
    ListOptions,
    RateLimitError,
    ResponseDecodeError,
    TwoFactorAuthError,
)

_TOKEN = secrets.token_hex(8)
_BASE_URL = "https://example.test/api/v3/"
_ABUSE_DOCS = "https://developer.github.com/v3#abuse-rate-limits"

Handler = typ.Callable[[httpx.Request], httpx.Response]


class _Widget(msgspec.Struct, kw_only=True):
    id: int
    name: str | None = None


def _make_client(
    handler: Handler,
    *,
    token: str | None = _TOKEN,
) -> tuple[GitHubRestClient, httpx.AsyncClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def _recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
    client = GitHubRestClient(
        GitHubClientConfig(token=token, base_url=_BASE_URL),
        http_client=http_client,
    )
    return client, http_client, requests


def _respond(
    status: int,
    payload: object | None = None,
    headers: dict[str, str] | None = None,
) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        del request
        if payload is None:
            return httpx.Response(status_code=status, headers=headers)
        return httpx.Response(status_code=status, json=payload, headers=headers)

    return _handler


def test_client_rejects_blank_token() -> None:
    """A whitespace-only token is a configuration error."""
    with pytest.raises(GitHubConfigError):
        GitHubRestClient(GitHubClientConfig(token="   "))


@pytest.mark.asyncio
async def test_new_request_resolves_relative_paths_and_sets_headers() -> None:
    """Relative paths resolve against the base URL with standard headers."""
    client, http_client, _ = _make_client(_respond(200, {}))
    try:
        request = client.new_request("GET", "repos/octo/reef/events")

        assert str(request.url) == f"{_BASE_URL}repos/octo/reef/events"
        assert request.headers["Accept"] == MEDIA_TYPE_V3
        assert request.headers["User-Agent"] == "ghactivity/0.1"
        assert request.headers["Authorization"] == f"Bearer {_TOKEN}"
        assert "Content-Type" not in request.headers
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_new_request_encodes_json_body() -> None:
    """Bodies are JSON-encoded and flagged with a JSON content type."""
    client, http_client, _ = _make_client(_respond(200, {}))
    try:
        request = client.new_request("POST", "user/repos", {"name": "reef"})

        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"name": "reef"}
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_anonymous_client_omits_authorization() -> None:
    """Without a token no Authorization header is sent."""
    client, http_client, _ = _make_client(_respond(200, {}), token=None)
    try:
        request = client.new_request("GET", "events")
        assert "Authorization" not in request.headers
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_request_encodes_options_and_decodes_result() -> None:
    """request() adds query options and decodes the body into result_type."""
    client, http_client, requests = _make_client(
        _respond(
            200,
            [{"id": 1, "name": "reef"}, {"id": 2}],
            headers={
                "Link": '<https://example.test/api/v3/widgets?page=3>; rel="next", '
                '<https://example.test/api/v3/widgets?page=9>; rel="last"',
                "X-RateLimit-Limit": "5000",
                "X-RateLimit-Remaining": "4999",
                "X-RateLimit-Reset": "1372700873",
            },
        )
    )
    try:
        widgets, response = await client.request(
            "GET",
            "widgets",
            options=ListOptions(page=2, per_page=50),
            result_type=list[_Widget],
        )
    finally:
        await http_client.aclose()

    assert widgets == [_Widget(id=1, name="reef"), _Widget(id=2)]
    assert requests[0].url.params["page"] == "2"
    assert requests[0].url.params["per_page"] == "50"
    assert response.status_code == 200
    assert response.next_page == 3
    assert response.last_page == 9
    assert response.prev_page == 0, "Expected missing relations to default to 0"
    assert response.rate.limit == 5000
    assert response.rate.remaining == 4999
    assert response.rate.reset == 1372700873


@pytest.mark.asyncio
async def test_do_returns_none_for_empty_body() -> None:
    """A 204 with no body decodes to None."""
    client, http_client, _ = _make_client(_respond(204))
    try:
        value, response = await client.request(
            "GET", "user/starred/octo/reef", result_type=_Widget
        )
    finally:
        await http_client.aclose()

    assert value is None, "Expected an empty body to decode as None"
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_do_raises_on_unexpected_body_shape() -> None:
    """Bodies that do not match result_type raise ResponseDecodeError."""
    client, http_client, _ = _make_client(_respond(200, {"id": "one"}))
    try:
        with pytest.raises(ResponseDecodeError):
            await client.request("GET", "widgets/1", result_type=_Widget)
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_http_error_carries_status_and_details() -> None:
    """Non-2xx responses raise GitHubAPIError with the decoded body."""
    client, http_client, _ = _make_client(
        _respond(
            422,
            {
                "message": "Validation Failed",
                "errors": [
                    {"resource": "Issue", "field": "title", "code": "missing_field"}
                ],
            },
        )
    )
    try:
        with pytest.raises(GitHubAPIError) as exc_info:
            await client.request("POST", "repos/octo/reef/issues", body={})
    finally:
        await http_client.aclose()

    error = exc_info.value
    assert type(error) is GitHubAPIError, "Expected an unclassified API error"
    assert error.status_code == 422
    assert error.message == "Validation Failed"
    assert error.errors[0].field == "title"
    assert "missing_field error caused by title field on Issue resource" in str(error)
    assert error.response is not None, "Expected the failed response to be kept"


@pytest.mark.asyncio
async def test_http_error_tolerates_non_json_body() -> None:
    """Error bodies that are not JSON still produce a GitHubAPIError."""

    def _handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(status_code=502, text="<html>bad gateway</html>")

    client, http_client, _ = _make_client(_handler)
    try:
        with pytest.raises(GitHubAPIError) as exc_info:
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "", "Expected non-JSON bodies to be ignored"


@pytest.mark.asyncio
async def test_error_message_redacts_client_secret() -> None:
    """Error messages never echo the client_secret query parameter."""
    client, http_client, _ = _make_client(_respond(404, {"message": "Not Found"}))
    try:
        with pytest.raises(GitHubAPIError) as exc_info:
            await client.request("GET", "events?client_id=abc&client_secret=hunter2")
    finally:
        await http_client.aclose()

    assert "hunter2" not in str(exc_info.value), "Expected client_secret to be hidden"
    assert "REDACTED" in str(exc_info.value), "Expected a redaction marker"


@pytest.mark.parametrize(
    ("status", "payload", "headers", "expected"),
    [
        (202, None, {}, AcceptedError),
        (
            401,
            {"message": "Must specify two-factor authentication OTP code."},
            {"X-GitHub-OTP": "required; sms"},
            TwoFactorAuthError,
        ),
        (
            403,
            {"message": "API rate limit exceeded for 203.0.113.7."},
            {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1372700873"},
            RateLimitError,
        ),
        (
            403,
            {
                "message": "You have triggered an abuse detection mechanism.",
                "documentation_url": _ABUSE_DOCS,
            },
            {"Retry-After": "30"},
            AbuseRateLimitError,
        ),
        (403, {"message": "Forbidden"}, {}, GitHubAPIError),
    ],
)
@pytest.mark.asyncio
async def test_error_classification(
    status: int,
    payload: object | None,
    headers: dict[str, str],
    expected: type[GitHubAPIError],
) -> None:
    """Failures are classified into the matching error type."""
    client, http_client, _ = _make_client(_respond(status, payload, headers))
    try:
        with pytest.raises(GitHubAPIError) as exc_info:
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    assert type(exc_info.value) is expected, (
        f"Expected {expected.__name__}, got {type(exc_info.value).__name__}"
    )
    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_rate_limit_error_exposes_rate() -> None:
    """RateLimitError carries the parsed rate headers."""
    client, http_client, _ = _make_client(
        _respond(
            403,
            {"message": "API rate limit exceeded for octo."},
            {
                "X-RateLimit-Limit": "60",
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": "1372700873",
            },
        )
    )
    try:
        with pytest.raises(RateLimitError) as exc_info:
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    rate = exc_info.value.rate
    assert rate is not None
    assert rate.limit == 60
    assert rate.remaining == 0
    assert rate.reset_at is not None
    assert rate.reset_at.year == 2013, "Expected the reset header as epoch seconds"


@pytest.mark.asyncio
async def test_abuse_error_exposes_retry_after() -> None:
    """AbuseRateLimitError carries the Retry-After seconds."""
    client, http_client, _ = _make_client(
        _respond(
            403,
            {
                "message": "Slow down",
                "documentation_url": _ABUSE_DOCS,
            },
            {"Retry-After": "45"},
        )
    )
    try:
        with pytest.raises(AbuseRateLimitError) as exc_info:
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    assert exc_info.value.retry_after == 45, "Expected Retry-After in seconds"


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged() -> None:
    """Network failures surface as the original httpx exception."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, http_client, _ = _make_client(_handler)
    try:
        with pytest.raises(httpx.ConnectError):
            await client.request("GET", "events")
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_cancellation_aborts_the_request() -> None:
    """Cancelling the awaiting task raises CancelledError, not a transport error."""
    started = asyncio.Event()

    class _SlowTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            del request
            started.set()
            await asyncio.sleep(60)
            return httpx.Response(status_code=200, json=[])

    http_client = httpx.AsyncClient(transport=_SlowTransport())
    client = GitHubRestClient(
        GitHubClientConfig(base_url=_BASE_URL), http_client=http_client
    )
    try:
        task = asyncio.create_task(client.request("GET", "events"))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_rate_limits_decodes_resources() -> None:
    """rate_limits() returns the core and search limits."""
    client, http_client, requests = _make_client(
        _respond(
            200,
            {
                "resources": {
                    "core": {"limit": 5000, "remaining": 4321, "reset": 1372700873},
                    "search": {"limit": 30, "remaining": 29, "reset": 1372697452},
                }
            },
        )
    )
    try:
        limits, _ = await client.rate_limits()
    finally:
        await http_client.aclose()

    assert str(requests[0].url) == f"{_BASE_URL}rate_limit", (
        "Expected rate_limit to resolve against the base URL"
    )
    assert limits.core is not None
    assert limits.core.remaining == 4321
    assert limits.search is not None
    assert limits.search.limit == 30


@pytest.mark.asyncio
async def test_client_context_manager_closes_owned_client() -> None:
    """The async context manager closes the client it created."""
    async with GitHubRestClient() as client:
        assert client.config.base_url == "https://api.github.com/"
    assert client._client.is_closed, "Expected the owned client to be closed on exit"


class _RecordingLogger:
    """Collects femtologging-style calls for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, object | None]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        del stack_info
        self.records.append((level, message, exc_info))
        return message


@pytest.fixture
def transport_logger(monkeypatch: pytest.MonkeyPatch) -> _RecordingLogger:
    """Replace the transport's logger with a recording one."""
    recorder = _RecordingLogger()
    monkeypatch.setattr("ghactivity.rest.client.logger", recorder)
    return recorder


@pytest.mark.parametrize(
    ("status", "payload", "headers", "expected_level"),
    [
        (
            403,
            {"message": "API rate limit exceeded for octo."},
            {"X-RateLimit-Remaining": "0"},
            "WARNING",
        ),
        (503, {"message": "Service Unavailable"}, {}, "ERROR"),
    ],
)
@pytest.mark.asyncio
async def test_failures_are_logged_at_their_severity(
    transport_logger: _RecordingLogger,
    status: int,
    payload: object,
    headers: dict[str, str],
    expected_level: str,
) -> None:
    """Throttling logs a warning and server errors log an error."""
    client, http_client, _ = _make_client(_respond(status, payload, headers))
    try:
        with pytest.raises(GitHubAPIError):
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    levels = [level for level, _, _ in transport_logger.records]
    assert levels == ["DEBUG", expected_level], (
        f"Expected a DEBUG request line followed by {expected_level}, got {levels}"
    )


@pytest.mark.asyncio
async def test_client_errors_are_not_logged_above_debug(
    transport_logger: _RecordingLogger,
) -> None:
    """A plain 404 is the caller's concern and only gets the request line."""
    client, http_client, _ = _make_client(_respond(404, {"message": "Not Found"}))
    try:
        with pytest.raises(GitHubAPIError):
            await client.request("GET", "events")
    finally:
        await http_client.aclose()

    assert [level for level, _, _ in transport_logger.records] == ["DEBUG"]


@pytest.mark.asyncio
async def test_decode_failures_log_the_decoder_error(
    transport_logger: _RecordingLogger,
) -> None:
    """Undecodable bodies are logged with the decoder error attached."""
    client, http_client, _ = _make_client(_respond(200, {"id": "one"}))
    try:
        with pytest.raises(ResponseDecodeError):
            await client.request("GET", "widgets/1", result_type=_Widget)
    finally:
        await http_client.aclose()

    level, message, exc_info = transport_logger.records[-1]
    assert level == "ERROR"
    assert "widgets/1" in message, "Expected the request URL in the log message"
    assert isinstance(exc_info, msgspec.ValidationError), (
        "Expected the decoder error as exc_info"
    )
