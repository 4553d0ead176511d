# tests/api/test_queries.py
"""Tests for query collection endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi import status

from query_board.models import Query

QUERIES_URL = "/api/queries"
MISSING_ID = "0123456789abcdef01234567"


def test_create_query_success(client, test_user, auth_token) -> None:
    """Creating a query snapshots the author's name and avatar."""
    response = client.post(QUERIES_URL, json={"text": "Is this normal?"}, headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["text"] == "Is this normal?"
    assert data["user"] == test_user.id
    assert data["name"] == test_user.name
    assert data["avatar"] == test_user.avatar
    assert data["likes"] == []
    assert data["comments"] == []
    assert len(data["id"]) == 24
    assert "date" in data


def test_create_query_persists(client, db_session, auth_token) -> None:
    response = client.post(QUERIES_URL, json={"text": "Persist me"}, headers=auth_token)

    stored = db_session.get(Query, response.json()["id"])
    assert stored is not None
    assert stored.text == "Persist me"


def test_create_query_empty_text(client, auth_token) -> None:
    """Empty text is rejected with a field error."""
    response = client.post(QUERIES_URL, json={"text": ""}, headers=auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "errors": [{"value": "", "msg": "Text is required", "param": "text", "location": "body"}]
    }


def test_create_query_missing_text(client, auth_token) -> None:
    response = client.post(QUERIES_URL, json={}, headers=auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["msg"] == "Text is required"


def test_create_query_whitespace_text_is_kept(client, auth_token) -> None:
    """Only empty text is rejected; whitespace is stored as sent."""
    response = client.post(QUERIES_URL, json={"text": "   "}, headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["text"] == "   "


def test_create_query_non_string_text_is_stringified(client, auth_token) -> None:
    response = client.post(QUERIES_URL, json={"text": 42}, headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["text"] == "42"


def test_create_query_null_text(client, auth_token) -> None:
    response = client.post(QUERIES_URL, json={"text": None}, headers=auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["msg"] == "Text is required"


def test_create_query_requires_auth(client) -> None:
    response = client.post(QUERIES_URL, json={"text": "anonymous"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"msg": "No token, authorization denied"}


def test_list_queries_newest_first(client, make_query, test_user, other_user, auth_token) -> None:
    """Queries are listed strictly by descending creation time."""
    now = datetime.now(UTC)
    oldest = make_query(test_user, "oldest", now - timedelta(hours=2))
    newest = make_query(other_user, "newest", now)
    middle = make_query(test_user, "middle", now - timedelta(hours=1))

    response = client.get(QUERIES_URL, headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    ids = [item["id"] for item in response.json()]
    assert ids == [newest.id, middle.id, oldest.id]


def test_list_queries_empty(client, auth_token) -> None:
    response = client.get(QUERIES_URL, headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_get_query(client, test_query, auth_token) -> None:
    response = client.get(f"{QUERIES_URL}/{test_query.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == test_query.id
    assert data["text"] == test_query.text


def test_get_nonexistent_query(client, auth_token) -> None:
    response = client.get(f"{QUERIES_URL}/{MISSING_ID}", headers=auth_token)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"msg": "Query not found"}


def test_get_query_invalid_id(client, auth_token) -> None:
    response = client.get(f"{QUERIES_URL}/not-an-id", headers=auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"msg": "Invalid ID"}


def test_delete_own_query(client, db_session, test_query, auth_token) -> None:
    query_id = test_query.id

    response = client.delete(f"{QUERIES_URL}/{query_id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"msg": "Query removed"}
    assert db_session.get(Query, query_id) is None


def test_delete_other_query(client, test_query, other_auth_token) -> None:
    """Only the author can delete a query."""
    response = client.delete(f"{QUERIES_URL}/{test_query.id}", headers=other_auth_token)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"msg": "User not authorized"}


def test_delete_nonexistent_query(client, auth_token) -> None:
    response = client.delete(f"{QUERIES_URL}/{MISSING_ID}", headers=auth_token)

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_query_removes_comments_and_likes(
    client, db_session, test_query, test_comment, auth_token, other_auth_token
) -> None:
    from query_board.models import QueryComment, QueryLike

    client.put(f"{QUERIES_URL}/like/{test_query.id}", headers=other_auth_token)

    response = client.delete(f"{QUERIES_URL}/{test_query.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert db_session.query(QueryComment).count() == 0
    assert db_session.query(QueryLike).count() == 0


def test_get_query_with_uppercase_id(client, test_query, auth_token) -> None:
    """Ids are matched regardless of hex case."""
    response = client.get(f"{QUERIES_URL}/{test_query.id.upper()}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == test_query.id


def test_query_dates_carry_utc_offset(client, test_query, auth_token) -> None:
    response = client.get(f"{QUERIES_URL}/{test_query.id}", headers=auth_token)

    date = datetime.fromisoformat(response.json()["date"].replace("Z", "+00:00"))
    assert date.utcoffset() == timedelta(0)


def test_delete_query_invalid_id(client, auth_token) -> None:
    response = client.delete(f"{QUERIES_URL}/not-an-id", headers=auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"msg": "Invalid ID"}
