import pytest

from server.services.github import GitHubProfile


@pytest.fixture
def hubot():
    return GitHubProfile(github_id="480938", username="hubot")


def _create(client, title="Hello", content="First post"):
    return client.post("/posts", json={"title": title, "content": content})


def test_list_posts_empty(client):
    response = client.get("/posts")

    assert response.status_code == 200
    assert response.json() == []


def test_create_post_requires_login(client):
    response = _create(client)

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_create_and_fetch_post(client, login, octocat):
    login(client, octocat)
    me = client.get("/auth/profile").json()

    created = _create(client)
    assert created.status_code == 201
    post = created.json()
    assert post["title"] == "Hello"
    assert post["user_id"] == me["id"]
    assert post["author"]["username"] == "octocat"

    fetched = client.get(f"/posts/{post['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["content"] == "First post"


def test_list_posts_newest_first(client, login, octocat):
    login(client, octocat)
    _create(client, title="one")
    _create(client, title="two")

    titles = [post["title"] for post in client.get("/posts").json()]
    assert titles == ["two", "one"]


def test_get_missing_post(client):
    assert client.get("/posts/123").status_code == 404


@pytest.mark.parametrize(
    "body",
    [
        {"content": "no title"},
        {"title": "   ", "content": "blank title"},
        {"title": "x" * 201, "content": "long title"},
        {"title": "no content"},
    ],
)
def test_create_post_validates_body(client, login, octocat, body):
    login(client, octocat)

    assert client.post("/posts", json=body).status_code == 400


def test_author_can_update_post(client, login, octocat):
    login(client, octocat)
    post_id = _create(client).json()["id"]

    response = client.patch(f"/posts/{post_id}", json={"title": "Edited"})
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Edited"
    assert body["content"] == "First post"
    assert body["updated_at"] is not None


def test_other_user_cannot_modify_post(client, login, octocat, hubot):
    login(client, octocat)
    post_id = _create(client).json()["id"]

    login(client, hubot)
    assert client.patch(f"/posts/{post_id}", json={"title": "Mine"}).status_code == 403
    assert client.delete(f"/posts/{post_id}").status_code == 403
    assert client.get(f"/posts/{post_id}").json()["title"] == "Hello"


def test_author_can_delete_post(client, login, octocat):
    login(client, octocat)
    post_id = _create(client).json()["id"]

    response = client.delete(f"/posts/{post_id}")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "deleted_post": post_id}
    assert client.get(f"/posts/{post_id}").status_code == 404


def test_delete_requires_login(client):
    assert client.delete("/posts/1").status_code == 401


def test_create_post_rejects_non_object_body(client, login, octocat):
    login(client, octocat)

    response = client.post("/posts", json=["x"])
    assert response.status_code == 400


def test_create_post_rejects_malformed_json(client, login, octocat):
    login(client, octocat)

    response = client.post(
        "/posts",
        content=b"not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400


def test_update_post_rejects_non_object_body(client, login, octocat):
    login(client, octocat)
    post_id = _create(client).json()["id"]

    assert client.patch(f"/posts/{post_id}", json="Edited").status_code == 400
    assert client.get(f"/posts/{post_id}").json()["title"] == "Hello"


def test_list_posts_embeds_each_author(client, login, octocat, hubot):
    login(client, octocat)
    _create(client, title="from octocat")
    login(client, hubot)
    _create(client, title="from hubot")

    posts = client.get("/posts").json()
    assert [(p["title"], p["author"]["username"]) for p in posts] == [
        ("from hubot", "hubot"),
        ("from octocat", "octocat"),
    ]
