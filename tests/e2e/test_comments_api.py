"""End-to-end tests for comment and reaction endpoints."""

import pytest
from fastapi.testclient import TestClient

from gallery.domain.value import PhotoId
from gallery.interface.api.app import create_app
from gallery.persistence.repository.inmemory import InMemoryDatabase
from gallery.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container and one seeded photo."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as test_client:
        database = test_client.portal.call(test_container.get, InMemoryDatabase)
        database.add_photo(PhotoId("101"))
        yield test_client


def post_comment(client, text, parent_id=None, author="Alice"):
    response = client.post(
        "/photos/101/comments",
        json={"author": author, "text": text, "parent_id": parent_id},
    )
    assert response.status_code == 201
    return response.json()


def toggle(client, comment_id, emoji, user_id):
    return client.post(
        f"/comments/{comment_id}/reactions", json={"emoji": emoji, "user_id": user_id}
    )


class TestCommentsEndpoints:
    """End-to-end tests for the comment thread flow."""

    def test_empty_photo(self, client):
        response = client.get("/photos/101/comments")

        assert response.status_code == 200
        assert response.json() == {"photo_id": "101", "comments": [], "total": 0}

    def test_thread_delete_removes_subtree(self, client):
        """Deleting a reply removes its own replies but leaves the root."""
        c1 = post_comment(client, "Lovely light")
        c2 = post_comment(client, "Agreed", parent_id=c1["comment_id"], author="Bob")
        c3 = post_comment(client, "Golden hour", parent_id=c2["comment_id"])
        assert toggle(client, c1["comment_id"], "👍", "u1").status_code == 200
        assert toggle(client, c3["comment_id"], "😂", "u2").status_code == 200

        response = client.delete(f"/comments/{c2['comment_id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "deleted_count": 2}
        comments = client.get("/photos/101/comments").json()["comments"]
        assert [c["comment_id"] for c in comments] == [c1["comment_id"]]
        assert comments[0]["reactions"] == {"👍": ["u1"]}

    def test_tree_endpoint_nests_replies(self, client):
        c1 = post_comment(client, "Root")
        post_comment(client, "Reply", parent_id=c1["comment_id"])

        data = client.get("/photos/101/comments/tree").json()

        assert data["total"] == 2
        assert data["root_ids"] == [c1["comment_id"]]
        assert [n["depth"] for n in data["nodes"]] == [0, 1]
        assert data["nodes"][0]["reply_ids"] == [data["nodes"][1]["comment"]["comment_id"]]

    def test_toggle_twice_removes_reaction(self, client):
        c1 = post_comment(client, "Hello")

        first = toggle(client, c1["comment_id"], "❤️", "u1")
        second = toggle(client, c1["comment_id"], "❤️", "u1")

        assert first.json() == {"success": True}
        assert second.json() == {"success": True}
        comments = client.get("/photos/101/comments").json()["comments"]
        assert comments[0]["reactions"] == {}

    def test_post_to_unknown_photo(self, client):
        response = client.post(
            "/photos/999/comments", json={"author": "Alice", "text": "Hi"}
        )

        assert response.status_code == 404

    def test_post_blank_text(self, client):
        response = client.post(
            "/photos/101/comments", json={"author": "Alice", "text": "  "}
        )

        assert response.status_code == 400

    def test_reply_to_unknown_parent(self, client):
        response = client.post(
            "/photos/101/comments",
            json={"author": "Alice", "text": "Hi", "parent_id": "missing"},
        )

        assert response.status_code == 404

    def test_delete_unknown_comment(self, client):
        response = client.delete("/comments/missing")

        assert response.status_code == 404
        assert "missing" in response.json()["detail"]

    def test_react_to_unknown_comment(self, client):
        assert toggle(client, "missing", "👍", "u1").status_code == 404

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
