"""Tests for the HTTP request invoker."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests

from bookshare.errors import ConnectError, RequestTimeout, TransportError
from bookshare.formats.descriptor import ANONYMOUS, endpoint
from bookshare.normalize import normalize
from bookshare.transport import RawOutcome, RequestInvoker
from tests.conftest import BASE_URL, make_response, make_session

GET_THING = endpoint(
    "get_thing", "GET", "/things/{thingId}",
    required={"thingId": "string"},
    optional={"limit": "integer"},
    role=ANONYMOUS,
)
CREATE_THING = endpoint(
    "create_thing", "POST", "/things",
    required={"name": "string"},
    optional={"public": "boolean"},
)


def _invoker(session, **kwargs) -> RequestInvoker:
    kwargs.setdefault("base_url", BASE_URL)
    return RequestInvoker(session=session, **kwargs)


class TestUrls:
    def test_version_prefix_and_placeholder(self) -> None:
        invoker = _invoker(make_session())
        url = invoker.build_url(GET_THING, {"thingId": "abc"})
        assert url == f"{BASE_URL}/v2/things/abc"

    def test_placeholder_is_encoded(self) -> None:
        invoker = _invoker(make_session())
        url = invoker.build_url(GET_THING, {"thingId": "a/b c"})
        assert url == f"{BASE_URL}/v2/things/a%2Fb%20c"

    def test_trailing_slash_in_base(self) -> None:
        invoker = _invoker(make_session(), base_url=BASE_URL + "/")
        assert invoker.build_url(GET_THING, {"thingId": "x"}) == f"{BASE_URL}/v2/things/x"


class TestRequests:
    def test_get_sends_query(self) -> None:
        session = make_session(make_response(200, {}))
        invoker = _invoker(session)
        invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "abc", "limit": 5}))

        session.request.assert_called_once()
        call_args = session.request.call_args
        assert call_args[0] == ("GET", f"{BASE_URL}/v2/things/abc")
        assert call_args[1]["params"] == {"limit": 5}
        assert "json" not in call_args[1]

    def test_post_sends_json_body(self) -> None:
        session = make_session(make_response(201, {}))
        invoker = _invoker(session, token="tok")
        invoker.invoke(CREATE_THING, normalize(CREATE_THING, {"name": "n", "public": "yes"}))

        call_args = session.request.call_args
        assert call_args[0] == ("POST", f"{BASE_URL}/v2/things")
        assert call_args[1]["json"] == {"name": "n", "public": True}
        assert call_args[1]["headers"]["Content-Type"] == "application/json"
        assert call_args[1]["params"] is None

    def test_api_key_always_in_query(self) -> None:
        session = make_session(make_response(201, {}))
        invoker = _invoker(session, api_key="key123")
        invoker.invoke(CREATE_THING, normalize(CREATE_THING, {"name": "n"}))
        assert session.request.call_args[1]["params"] == {"api_key": "key123"}

    def test_undeclared_params_stay_in_query_for_post(self) -> None:
        session = make_session(make_response(201, {}))
        invoker = _invoker(session, api_key="key123")
        normalized = normalize(CREATE_THING, {"name": "n", "dryRun": True}, strict=False)
        invoker.invoke(CREATE_THING, normalized)

        call_args = session.request.call_args
        assert call_args[1]["json"] == {"name": "n"}
        assert call_args[1]["params"] == {"dryRun": "true", "api_key": "key123"}

    def test_bearer_token_sent_for_anonymous_endpoint(self) -> None:
        session = make_session(make_response(200, {}))
        invoker = _invoker(session, token="tok")
        invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "x"}))
        headers = session.request.call_args[1]["headers"]
        assert headers["Authorization"] == "Bearer tok"

    def test_missing_token_warns_but_calls(self, caplog: pytest.LogCaptureFixture) -> None:
        session = make_session(make_response(201, {}))
        invoker = _invoker(session)
        with caplog.at_level("WARNING", logger="bookshare.transport"):
            invoker.invoke(CREATE_THING, normalize(CREATE_THING, {"name": "n"}))
        session.request.assert_called_once()
        assert "Authorization" not in session.request.call_args[1]["headers"]
        assert "no token" in caplog.text

    def test_timeout_tuple(self) -> None:
        session = make_session(make_response(200, {}))
        invoker = _invoker(session, timeout=12.0, open_timeout=3.0)
        invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "x"}))
        assert session.request.call_args[1]["timeout"] == (3.0, 12.0)

    def test_max_redirects_configured(self) -> None:
        session = make_session()
        _invoker(session, max_redirects=4)
        assert session.max_redirects == 4

    def test_outcome_fields(self) -> None:
        resp = make_response(200, {"a": 1}, url=f"{BASE_URL}/v2/things/x")
        invoker = _invoker(make_session(resp))
        outcome = invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "x"}))
        assert isinstance(outcome, RawOutcome)
        assert outcome.status == 200
        assert outcome.body == '{"a": 1}'
        assert outcome.url.endswith("/v2/things/x")


class TestFailures:
    def test_connect_error_is_returned(self) -> None:
        session = make_session(requests.exceptions.ConnectionError("refused"))
        outcome = _invoker(session, max_retries=0).invoke(
            GET_THING, normalize(GET_THING, {"thingId": "x"})
        )
        assert isinstance(outcome, ConnectError)
        assert isinstance(outcome.cause, requests.exceptions.ConnectionError)

    def test_timeout_is_returned(self) -> None:
        session = make_session(requests.exceptions.ReadTimeout("slow"))
        outcome = _invoker(session, max_retries=0).invoke(
            GET_THING, normalize(GET_THING, {"thingId": "x"})
        )
        assert isinstance(outcome, RequestTimeout)

    def test_other_request_errors(self) -> None:
        session = make_session(requests.exceptions.InvalidURL("bad"))
        outcome = _invoker(session).invoke(GET_THING, normalize(GET_THING, {"thingId": "x"}))
        assert type(outcome) is TransportError
        session.request.assert_called_once()

    @patch("bookshare.transport.time.sleep")
    def test_get_retried_with_backoff(self, mock_sleep) -> None:
        session = make_session(
            requests.exceptions.ConnectTimeout("t1"),
            requests.exceptions.ConnectionError("c2"),
            make_response(200, {}),
        )
        outcome = _invoker(session, max_retries=2, backoff=0.5).invoke(
            GET_THING, normalize(GET_THING, {"thingId": "x"})
        )
        assert isinstance(outcome, RawOutcome)
        assert session.request.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [0.5, 1.0]

    @patch("bookshare.transport.time.sleep")
    def test_retries_are_bounded(self, mock_sleep) -> None:
        session = make_session(requests.exceptions.ConnectionError("down"))
        outcome = _invoker(session, max_retries=2).invoke(
            GET_THING, normalize(GET_THING, {"thingId": "x"})
        )
        assert isinstance(outcome, ConnectError)
        assert session.request.call_count == 3

    @patch("bookshare.transport.time.sleep")
    def test_post_never_retried(self, mock_sleep) -> None:
        session = make_session(requests.exceptions.ConnectionError("down"))
        outcome = _invoker(session, max_retries=3, token="tok").invoke(
            CREATE_THING, normalize(CREATE_THING, {"name": "n"})
        )
        assert isinstance(outcome, ConnectError)
        session.request.assert_called_once()
        mock_sleep.assert_not_called()

    def test_too_many_redirects_keeps_last_response(self) -> None:
        exc = requests.exceptions.TooManyRedirects("loop")
        exc.response = make_response(302, "", headers={"Location": "/elsewhere"}, reason="Found")
        outcome = _invoker(make_session(exc)).invoke(
            GET_THING, normalize(GET_THING, {"thingId": "x"})
        )
        assert isinstance(outcome, RawOutcome)
        assert outcome.status == 302


class TestFetch:
    def test_absolute_url(self) -> None:
        session = make_session(make_response(200, "data", headers={"Content-Type": "text/plain"}))
        _invoker(session, token="tok").fetch("https://download.example.org/file.zip")
        assert session.request.call_args[0] == ("GET", "https://download.example.org/file.zip")

    def test_relative_url_uses_base(self) -> None:
        session = make_session(make_response(200, {}))
        _invoker(session).fetch("/v2/titles/1")
        assert session.request.call_args[0] == ("GET", f"{BASE_URL}/v2/titles/1")

    def test_api_key_only_sent_to_api_host(self) -> None:
        session = make_session(make_response(200, "data", headers={"Content-Type": "text/plain"}))
        invoker = _invoker(session, api_key="key123")
        invoker.fetch("https://download.example.org/file.zip")
        assert session.request.call_args[1]["params"] is None

        invoker.fetch(f"{BASE_URL}.other.example/file.zip")
        assert session.request.call_args[1]["params"] is None

        invoker.fetch("/v2/titles/1")
        assert session.request.call_args[1]["params"] == {"api_key": "key123"}


class TestDebugTranscripts:
    def test_transcript_written(self, tmp_path) -> None:
        session = make_session(make_response(200, {"title": "Foo"}))
        invoker = _invoker(session, debug_dir=tmp_path)
        invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "x", "limit": 2}))

        files = list(tmp_path.iterdir())
        assert len(files) == 1
        assert files[0].name.endswith("_get_thing")
        text = files[0].read_text()
        assert f"GET {BASE_URL}/v2/things/x" in text
        assert "=== RESPONSE 200 ===" in text
        assert '"title": "Foo"' in text

    def test_transcript_for_transport_error(self, tmp_path) -> None:
        session = make_session(requests.exceptions.ConnectionError("refused"))
        invoker = _invoker(session, debug_dir=tmp_path, max_retries=0)
        invoker.invoke(GET_THING, normalize(GET_THING, {"thingId": "x"}))
        text = next(tmp_path.iterdir()).read_text()
        assert "=== ERROR ===" in text
        assert "ConnectError" in text
