"""
Tests for the request dispatcher: instagram_api.dispatcher
"""

from __future__ import annotations

import logging

import httpx
import pytest

from instagram_api.dispatcher import HTTPMethod, RequestDescriptor, unwrap_envelope
from instagram_api.errors import ApplicationFailure, FailureKind
from instagram_api.results import Ok, RequestFailure
from tests.conftest import BASE_URL, envelope


# ---------------------------------------------------------------------------
# URL construction
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_dispatch_builds_url_with_token(api, mock_api):
    mock_api.respond_with(envelope({"id": "1", "username": "x"}))

    payload = await api.dispatcher.dispatch("/users/self")

    assert payload == {"id": "1", "username": "x"}
    assert str(mock_api.last_request.url) == f"{BASE_URL}/users/self?access_token=T"
    assert mock_api.last_request.method == "GET"


@pytest.mark.asyncio
async def test_dispatch_appends_parameters_after_token_in_order(api, mock_api):
    mock_api.respond_with(envelope([]))

    await api.dispatcher.dispatch("/tags/cat/media/recent", {"max_tag_id": "9", "count": 3})

    assert mock_api.last_query == "access_token=T&max_tag_id=9&count=3"


@pytest.mark.asyncio
async def test_dispatch_percent_encodes_parameter_values(api, mock_api):
    mock_api.respond_with(envelope([]))

    await api.dispatcher.dispatch("/users/search", {"q": "tom & jerry=1"})

    assert mock_api.last_query == "access_token=T&q=tom%20%26%20jerry%3D1"
    assert mock_api.last_request.url.params["q"] == "tom & jerry=1"


@pytest.mark.asyncio
async def test_build_url_encodes_token(api):
    api.access_token = "a/b+c"
    url = api.dispatcher.build_url(RequestDescriptor("/media/1"), api.access_token)

    assert url == f"{BASE_URL}/media/1?access_token=a%2Fb%2Bc"


@pytest.mark.asyncio
async def test_dispatch_uses_requested_verb(api, mock_api):
    mock_api.respond_with(envelope(None))

    await api.dispatcher.dispatch("/media/1/likes", method=HTTPMethod.DELETE)

    assert mock_api.last_request.method == "DELETE"


# ---------------------------------------------------------------------------
# Unauthenticated
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_missing_token_makes_no_network_call(anonymous_api, mock_api):
    result = await anonymous_api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.UNAUTHENTICATED
    assert mock_api.requests == []


@pytest.mark.asyncio
async def test_cleared_token_makes_no_network_call(api, mock_api):
    api.access_token = None

    assert await api.dispatcher.dispatch("/users/self") is None
    assert mock_api.requests == []


@pytest.mark.asyncio
async def test_token_set_after_construction_is_used(anonymous_api, mock_api):
    mock_api.respond_with(envelope({}))
    anonymous_api.access_token = "late"

    await anonymous_api.dispatcher.dispatch("/users/self")

    assert mock_api.last_request.url.params["access_token"] == "late"


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize("exc_type", [httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError])
async def test_transport_failure_is_no_result(api, mock_api, exc_type):
    mock_api.raise_error(exc_type)

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.TRANSPORT
    assert await api.dispatcher.dispatch("/users/self") is None


@pytest.mark.asyncio
async def test_invalid_base_url_is_transport_failure(api, mock_api):
    api.session.base_url = "https://api.instagram.com:notaport/v1"

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.TRANSPORT
    assert mock_api.requests == []


# ---------------------------------------------------------------------------
# Envelope handling
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize("code", [400, 404, 429, 500])
async def test_non_200_meta_code_is_no_result(api, mock_api, code):
    mock_api.respond_with(envelope({"id": "1", "username": "x"}, code=code))

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.APPLICATION
    assert result.error.meta_code == code


@pytest.mark.asyncio
async def test_error_status_with_usable_envelope_still_parses(api, mock_api, caplog):
    """A non-200 HTTP status is logged, then the body is parsed anyway."""
    mock_api.respond_with(envelope({"id": "1", "username": "x"}), status_code=202)

    with caplog.at_level(logging.WARNING, logger="instagram_api.dispatcher"):
        payload = await api.dispatcher.dispatch("/users/self")

    assert payload == {"id": "1", "username": "x"}
    assert "HTTP 202" in caplog.text


@pytest.mark.asyncio
async def test_error_body_from_api_is_no_result(api, mock_api):
    mock_api.respond_with(
        {
            "meta": {
                "code": 400,
                "error_type": "OAuthAccessTokenException",
                "error_message": "The access_token provided is invalid.",
            }
        },
        status_code=400,
    )

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert "OAuthAccessTokenException" in str(result.error)
    assert result.error.status_code == 400


@pytest.mark.asyncio
async def test_invalid_json_is_no_result(api, mock_api):
    mock_api.respond_with_text("<html>502 Bad Gateway</html>", status_code=502)

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.APPLICATION


@pytest.mark.asyncio
async def test_deeply_nested_body_is_no_result(api, mock_api):
    """A body too deep for the JSON decoder fails the request instead of raising."""
    depth = 100_000
    mock_api.respond_with_text("[" * depth + "]" * depth)

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.APPLICATION
    assert await api.get_user() is None


@pytest.mark.asyncio
async def test_deeply_nested_data_is_no_result(api, mock_api):
    depth = 100_000
    mock_api.respond_with_text(
        '{"meta": {"code": 200}, "data": ' + "[" * depth + "]" * depth + "}"
    )

    assert await api.search_tags("cat") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/users/", "/tags/", "/media//comments", "/media/1/comments/"])
async def test_empty_path_segment_makes_no_network_call(api, mock_api, path):
    result = await api.dispatcher.send(path)

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.INVALID_REQUEST
    assert mock_api.requests == []


@pytest.mark.asyncio
async def test_missing_data_is_no_result(api, mock_api):
    mock_api.respond_with({"meta": {"code": 200}})

    assert await api.dispatcher.dispatch("/users/self") is None


@pytest.mark.asyncio
async def test_null_data_is_a_present_payload(api, mock_api):
    mock_api.respond_with(envelope(None))

    result = await api.dispatcher.send("/media/1/comments/2", method=HTTPMethod.DELETE)

    assert isinstance(result, Ok)
    assert result.value is None


def test_unwrap_envelope_rejects_non_objects():
    with pytest.raises(ApplicationFailure):
        unwrap_envelope([{"meta": {"code": 200}, "data": []}])


def test_unwrap_envelope_rejects_missing_meta():
    with pytest.raises(ApplicationFailure):
        unwrap_envelope({"data": []})


def test_unwrap_envelope_returns_data():
    assert unwrap_envelope(envelope([1, 2])) == [1, 2]


# ---------------------------------------------------------------------------
# Session release
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_released_session_is_no_result(api, mock_api):
    await api.aclose()

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.SESSION_RELEASED
    assert mock_api.requests == []


@pytest.mark.asyncio
async def test_session_released_mid_flight_is_no_result(api, mock_api):
    async def _close_then_respond(request):
        await api.aclose()
        return httpx.Response(200, json=envelope({"id": "1", "username": "x"}))

    mock_api.set_handler(_close_then_respond)

    result = await api.dispatcher.send("/users/self")

    assert isinstance(result, RequestFailure)
    assert result.kind == FailureKind.SESSION_RELEASED


@pytest.mark.asyncio
async def test_access_token_is_not_logged(api, mock_api, caplog):
    api.access_token = "secret-token"
    mock_api.respond_with(envelope({}))

    with caplog.at_level(logging.DEBUG, logger="instagram_api.dispatcher"):
        await api.dispatcher.dispatch("/users/self")

    assert "secret-token" not in caplog.text
    assert "access_token=<redacted>" in caplog.text
