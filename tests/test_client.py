"""Tests for the DiscourseClient facade and its endpoint services."""

import json
from datetime import datetime

import pytest
import responses

from discourse_api import DiscourseApi, DiscourseClient, MissingUserApiKeyError


BASE = "http://api.test"


@pytest.fixture
def client():
    return DiscourseClient(BASE, api_key="k", api_username="system")


def last_request():
    return responses.calls[-1].request


def test_client_initialization():
    options = {"api_key": "k", "api_username": "system", "timeout": 5}

    c = DiscourseApi(BASE + "/", options)
    assert isinstance(c, DiscourseClient)
    assert c.base_url == BASE
    assert c.http.timeout == 5
    assert c.options.api_key == "k"

    c = DiscourseClient(BASE, options, api_username="alice")
    assert c.options.api_username == "alice"


def test_method_existence(client):
    for name in ["site", "posts", "topics", "uploads", "notifications", "users", "chat", "webhook"]:
        assert getattr(client, name) is not None, f"Missing {name}"

    post_methods = [
        "list_posts", "get_post", "get_post_raw", "get_post_cooked", "create_topic_post_pm",
        "update_post", "delete_post", "get_post_replies", "perform_post_action",
        "delete_post_action", "like_post", "unlike_post", "lock_post", "unlock_post",
    ]
    for method in post_methods:
        assert callable(getattr(client.posts, method)), f"{method} is not callable"

    topic_methods = [
        "list_latest", "get_latest", "get_topic", "get_topic_info", "get_topic_posts",
        "remove_topic", "update_topic", "invite_to_topic", "update_topic_status",
        "close_topic", "open_topic", "archive_topic", "unarchive_topic", "pin_topic",
        "unpin_topic", "unlist_topic", "list_topic",
    ]
    for method in topic_methods:
        assert callable(getattr(client.topics, method)), f"{method} is not callable"


@responses.activate
def test_client_request_uses_admin_headers(client):
    responses.add(responses.GET, f"{BASE}/site.json", json={"categories": []}, status=200)
    assert client.get_site() == {"categories": []}
    assert last_request().headers["Api-Key"] == "k"
    assert last_request().headers["Api-Username"] == "system"


@responses.activate
def test_revoke_user_api_key_sends_only_user_api_key():
    c = DiscourseClient(BASE, user_api_key="u", user_api_client_id="c")
    responses.add(responses.POST, f"{BASE}/user-api-key/revoke.json", json={"success": "OK"}, status=200)

    assert c.revoke_user_api_key() == {"success": "OK"}
    headers = last_request().headers
    assert headers["User-Api-Key"] == "u"
    assert "User-Api-Client-Id" not in headers

    c.revoke_user_api_key("other")
    assert last_request().headers["User-Api-Key"] == "other"


@responses.activate
def test_revoke_explicit_key_with_admin_client(client):
    responses.add(responses.POST, f"{BASE}/user-api-key/revoke.json", json={}, status=200)
    client.revoke_user_api_key("u")
    headers = last_request().headers
    assert headers["User-Api-Key"] == "u"
    assert "Api-Key" not in headers


def test_revoke_without_key_raises(client):
    with pytest.raises(MissingUserApiKeyError):
        client.revoke_user_api_key()


@responses.activate
def test_post_endpoints(client):
    responses.add(responses.GET, f"{BASE}/posts/1/raw", body="**raw**", status=200, content_type="text/plain")
    assert client.posts.get_post_raw(1) == "**raw**"

    responses.add(responses.POST, f"{BASE}/posts.json", json={"id": 10}, status=200)
    assert client.create_topic_post_pm({"title": "Hello there", "raw": "body"}) == {"id": 10}
    assert json.loads(last_request().body) == {"title": "Hello there", "raw": "body"}

    responses.add(responses.PUT, f"{BASE}/posts/10.json", json={"id": 10}, status=200)
    client.posts.update_post(10, {"raw": "edited", "edit_reason": "typo"})
    assert json.loads(last_request().body) == {"post": {"raw": "edited", "edit_reason": "typo"}}

    responses.add(responses.DELETE, f"{BASE}/posts/10.json", status=200, body="")
    client.posts.delete_post(10, permanently=True)
    assert json.loads(last_request().body) == {"force_destroy": True}


@responses.activate
def test_like_and_unlike_post(client):
    responses.add(responses.POST, f"{BASE}/post_actions.json", json={"id": 5}, status=200)
    client.posts.like_post(5)
    assert json.loads(last_request().body) == {"id": 5, "post_action_type_id": 2}

    responses.add(responses.DELETE, f"{BASE}/post_actions/5.json", json={"id": 5}, status=200)
    client.posts.unlike_post(5)
    assert last_request().url == f"{BASE}/post_actions/5.json?post_action_type_id=2"


@responses.activate
def test_lock_post(client):
    responses.add(responses.PUT, f"{BASE}/posts/5/locked.json", json={"locked": True}, status=200)
    client.posts.lock_post(5)
    assert json.loads(last_request().body) == {"locked": True}


@responses.activate
def test_topic_endpoints(client):
    responses.add(responses.GET, f"{BASE}/t/5.json", json={"id": 5}, status=200)
    assert client.get_topic(5) == {"id": 5}

    responses.add(responses.GET, f"{BASE}/t/-/5/last.json", json={"id": 5}, status=200)
    client.topics.get_topic_info(5, around_post_number="last")
    assert last_request().url == f"{BASE}/t/-/5/last.json"

    responses.add(responses.GET, f"{BASE}/t/5/posts.json", json={"id": 5}, status=200)
    client.topics.get_topic_posts(5, [1, 2])
    assert last_request().url == f"{BASE}/t/5/posts.json?post_ids%5B%5D=1&post_ids%5B%5D=2"

    responses.add(responses.PUT, f"{BASE}/t/-/5.json", json={"basic_topic": {}}, status=200)
    client.topics.update_topic(5, title="New title")
    assert json.loads(last_request().body) == {"topic": {"title": "New title"}}


@responses.activate
def test_list_latest(client):
    responses.add(responses.GET, f"{BASE}/latest.json", json={"topic_list": {}}, status=200)
    client.list_latest(order="views", ascending=True)
    assert last_request().url == f"{BASE}/latest.json?order=views&ascending=true"

    client.topics.get_latest()
    assert last_request().url == f"{BASE}/latest.json"

    client.topics.list_latest(custom_url="/latest?page=2", order="views")
    assert last_request().url == f"{BASE}/latest.json?page=2"


@responses.activate
def test_topic_status_helpers(client):
    responses.add(responses.PUT, f"{BASE}/t/5/status.json", json={"success": "OK"}, status=200)

    client.topics.pin_topic(5, globally=True, until=datetime(2030, 1, 2, 3, 4, 5))
    assert json.loads(last_request().body) == {
        "status": "pinned_globally",
        "enabled": True,
        "until": "2030-01-02T03:04:05",
    }

    client.topics.open_topic(5)
    assert json.loads(last_request().body) == {"status": "closed", "enabled": False}

    client.topics.unlist_topic(5)
    assert json.loads(last_request().body) == {"status": "visible", "enabled": False}


def test_topic_status_rejects_unknown_status(client):
    with pytest.raises(ValueError):
        client.topics.update_topic_status(5, "frozen", True)


def test_invite_requires_user_or_email(client):
    with pytest.raises(ValueError):
        client.topics.invite_to_topic(5)


@responses.activate
def test_create_upload_from_path(client, tmp_path):
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"\xff\xd8jpeg")
    responses.add(responses.POST, f"{BASE}/uploads.json", json={"id": 1, "url": "/u/1"}, status=200)

    assert client.create_upload(str(image), user_id=3) == {"id": 1, "url": "/u/1"}
    request = last_request()
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="photo.jpg"' in request.body
    assert b"\xff\xd8jpeg" in request.body
    assert b'name="user_id"' in request.body


@responses.activate
def test_create_upload_from_bytes(client):
    responses.add(responses.POST, f"{BASE}/uploads.json", json={"id": 2}, status=200)
    client.uploads.create_upload(b"data", type="avatar", filename="me.png", synchronous=False)
    body = last_request().body
    assert b'filename="me.png"' in body
    assert b"avatar" in body


def test_create_upload_rejects_unknown_type(client):
    with pytest.raises(ValueError):
        client.uploads.create_upload(b"data", type="banner")


@responses.activate
def test_notifications(client):
    responses.add(responses.GET, f"{BASE}/notifications.json", json={"notifications": []}, status=200)
    client.get_notifications()
    client.get_notifications("/notifications?offset=60")
    assert last_request().url == f"{BASE}/notifications.json?offset=60"

    responses.add(responses.PUT, f"{BASE}/notifications/mark-read.json", json={"success": "OK"}, status=200)
    client.notifications.mark_notifications_as_read()
    assert json.loads(last_request().body) == {}

    client.notifications.mark_notifications_as_read(12)
    assert json.loads(last_request().body) == {"id": 12}


@responses.activate
def test_get_user_encodes_username(client):
    responses.add(responses.GET, f"{BASE}/u/a%20b.json", json={"user": {}}, status=200)
    client.get_user("a b")
    assert last_request().url == f"{BASE}/u/a%20b.json"


@responses.activate
def test_chat_messages(client):
    responses.add(responses.POST, f"{BASE}/chat/3.json", json={"id": 1}, status=200)
    client.chat.send_message(3, "hello", in_reply_to_id=9, uploads=[4, {"id": 5}])
    assert json.loads(last_request().body) == {
        "message": "hello",
        "upload_ids": [4, 5],
        "in_reply_to_id": 9,
    }

    responses.add(responses.PUT, f"{BASE}/chat/3/edit/1.json", json={"id": 1}, status=200)
    client.chat.edit_message(3, 1, "edited")
    assert json.loads(last_request().body) == {"new_message": "edited"}

    responses.add(responses.DELETE, f"{BASE}/chat/api/channels/3/messages/1.json", status=204)
    assert client.chat.delete_message(3, 1) is None
