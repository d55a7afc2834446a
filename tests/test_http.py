"""Tests for request composition and error normalization."""

import json
from unittest.mock import MagicMock

import pytest
import requests
import responses

from discourse_api import ApiError, AuthConfig, HTTPClient, MultipartForm, QueryParams
from discourse_api.http import strip_content_type, suffix_endpoint


BASE = "http://api.test"


def make_http(**auth):
    return HTTPClient({"base_url": BASE + "/"}, AuthConfig(auth))


@pytest.mark.parametrize(
    "endpoint,expected",
    [
        ("/t/5", "/t/5.json"),
        ("/t/5?foo=bar", "/t/5.json?foo=bar"),
        ("/t/5.json", "/t/5.json"),
        ("/t/5.json?foo=bar", "/t/5.json?foo=bar"),
        ("/latest?a=1&b=2", "/latest.json?a=1&b=2"),
        ("https://other.test/notifications", "https://other.test/notifications"),
        ("https://other.test/n?x=1", "https://other.test/n?x=1"),
    ],
)
def test_suffix_endpoint(endpoint, expected):
    assert suffix_endpoint(endpoint) == expected


def test_suffix_endpoint_skip():
    assert suffix_endpoint("/posts/1/raw", skip_path_suffixing=True) == "/posts/1/raw"
    assert suffix_endpoint("/posts/1/raw?x=1", skip_path_suffixing=True) == "/posts/1/raw?x=1"
    assert suffix_endpoint("https://other.test/a", skip_path_suffixing=False) == "https://other.test/a"


def test_strip_content_type_is_case_insensitive():
    headers = {"content-type": "application/json", "Api-Key": "k"}
    assert strip_content_type(headers) == {"Api-Key": "k"}


@responses.activate
def test_request_parses_json():
    responses.add(responses.GET, f"{BASE}/site.json", json={"ok": True}, status=200)
    res = make_http().request("/site")
    assert res == {"ok": True}


@responses.activate
def test_request_returns_text_for_non_json():
    responses.add(responses.GET, f"{BASE}/posts/1/raw", body="hello", status=200, content_type="text/plain")
    res = make_http().request("/posts/1/raw", options={"skip_path_suffixing": True})
    assert res == "hello"


@responses.activate
def test_request_returns_none_for_204():
    responses.add(responses.DELETE, f"{BASE}/t/1.json", status=204)
    assert make_http().request("/t/1", "DELETE") is None


@responses.activate
def test_absolute_url_is_not_suffixed_nor_prefixed():
    responses.add(responses.GET, "https://other.test/notifications", json={}, status=200)
    make_http().request("https://other.test/notifications")
    assert responses.calls[0].request.url == "https://other.test/notifications"


@responses.activate
def test_query_string_survives_suffixing():
    responses.add(responses.GET, f"{BASE}/t/5.json", json={}, status=200)
    make_http().request("/t/5?foo=bar")
    assert responses.calls[0].request.url == f"{BASE}/t/5.json?foo=bar"


@responses.activate
def test_default_headers_from_auth_config():
    responses.add(responses.GET, f"{BASE}/site.json", json={}, status=200)
    make_http(api_key="k", api_username="system").request("/site")
    headers = responses.calls[0].request.headers
    assert headers["Api-Key"] == "k"
    assert headers["Api-Username"] == "system"
    assert "User-Api-Key" not in headers


@responses.activate
def test_caller_headers_merge_and_win():
    responses.add(responses.GET, f"{BASE}/site.json", json={}, status=200)
    make_http(api_key="k", api_username="system").request(
        "/site", options={"headers": {"Api-Username": "alice", "X-Extra": "1"}}
    )
    headers = responses.calls[0].request.headers
    assert headers["Api-Key"] == "k"
    assert headers["Api-Username"] == "alice"
    assert headers["X-Extra"] == "1"


@responses.activate
def test_override_headers_replaces_defaults():
    responses.add(responses.POST, f"{BASE}/user-api-key/revoke.json", json={}, status=200)
    make_http(user_api_key="u", user_api_client_id="c").request(
        "/user-api-key/revoke",
        "POST",
        options={"headers": {"User-Api-Key": "other"}, "override_headers": True},
    )
    headers = responses.calls[0].request.headers
    assert headers["User-Api-Key"] == "other"
    assert "User-Api-Client-Id" not in headers


@responses.activate
def test_json_payload_and_query_params():
    responses.add(responses.POST, f"{BASE}/posts.json", json={"id": 1}, status=200)
    make_http().request("/posts", "POST", {"raw": "hi"}, {"query_params": {"a": "1"}})
    request = responses.calls[0].request
    assert json.loads(request.body) == {"raw": "hi"}
    assert request.url == f"{BASE}/posts.json?a=1"


@responses.activate
def test_string_payload_is_sent_as_is():
    responses.add(responses.POST, f"{BASE}/posts.json", json={}, status=200)
    make_http().request("/posts", "POST", "raw=hi&topic_id=1")
    assert responses.calls[0].request.body == "raw=hi&topic_id=1"


@responses.activate
def test_query_params_data_goes_to_query_string():
    responses.add(responses.DELETE, f"{BASE}/post_actions/3.json", json={}, status=200)
    make_http().request("/post_actions/3", "DELETE", QueryParams(post_action_type_id=2))
    request = responses.calls[0].request
    assert request.url == f"{BASE}/post_actions/3.json?post_action_type_id=2"
    assert not request.body


@responses.activate
def test_multipart_strips_content_type():
    responses.add(responses.POST, f"{BASE}/uploads.json", json={"id": 9}, status=200)
    form = MultipartForm(fields={"type": "composer"}, files={"file": ("a.txt", b"abc")})
    make_http(api_key="k").request(
        "/uploads", "POST", form, {"headers": {"Content-Type": "application/json"}}
    )
    request = responses.calls[0].request
    assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert request.headers["Api-Key"] == "k"
    assert b"abc" in request.body


@responses.activate
def test_error_with_errors_list_is_joined():
    responses.add(responses.POST, f"{BASE}/posts.json", json={"errors": ["a", "b"]}, status=422)
    with pytest.raises(ApiError) as ei:
        make_http().request("/posts", "POST", {"raw": ""})
    err = ei.value
    assert err.status == 422
    assert err.status_code == 422
    assert err.message.endswith(": a;b")
    assert err.body == {"errors": ["a", "b"]}
    assert err.response is not None
    assert err.request is not None
    assert isinstance(err.__cause__, requests.HTTPError)


@responses.activate
def test_error_with_non_list_errors_is_stringified():
    responses.add(responses.GET, f"{BASE}/t/1.json", json={"errors": {"title": "bad"}}, status=400)
    with pytest.raises(ApiError) as ei:
        make_http().request("/t/1")
    assert ei.value.message.endswith(': {"title": "bad"}')


@responses.activate
def test_error_without_errors_field_keeps_transport_message():
    responses.add(responses.GET, f"{BASE}/t/1.json", body="Not Found", status=404, content_type="text/plain")
    with pytest.raises(ApiError) as ei:
        make_http().request("/t/1")
    err = ei.value
    assert err.status == 404
    assert err.status_text == "Not Found"
    assert err.body == "Not Found"
    assert err.message.startswith("404 Client Error")


@responses.activate
def test_transport_error_propagates_unchanged():
    boom = requests.ConnectionError("boom")
    responses.add(responses.GET, f"{BASE}/site.json", body=boom)
    with pytest.raises(requests.ConnectionError) as ei:
        make_http().request("/site")
    assert ei.value is boom


def test_http_error_without_response_propagates_unchanged():
    error = requests.HTTPError("no response")
    response = MagicMock()
    response.raise_for_status.side_effect = error
    session = MagicMock()
    session.request.return_value = response

    http = HTTPClient({"base_url": BASE, "session": session}, AuthConfig())
    with pytest.raises(requests.HTTPError) as ei:
        http.request("/site")
    assert ei.value is error


def test_custom_session_receives_composed_call():
    response = MagicMock()
    response.status_code = 200
    response.content = b'{"ok": true}'
    response.json.return_value = {"ok": True}
    session = MagicMock()
    session.request.return_value = response

    http = HTTPClient({"base_url": BASE, "session": session, "timeout": 3}, AuthConfig({"api_key": "k"}))
    assert http.request("/site") == {"ok": True}
    session.request.assert_called_once_with(
        "GET",
        f"{BASE}/site.json",
        headers={"Api-Key": "k"},
        params=None,
        timeout=3,
    )


def test_encode_url_component():
    assert HTTPClient.encode_url_component("a b/c") == "a%20b%2Fc"
    assert HTTPClient.encode_url_component(12) == "12"
