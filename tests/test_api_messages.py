from sqlmodel import select

from app.core.config import settings
from app.models.message import Message, MessageStatus

from conftest import minutes_ago


def test_submit_creates_pending_message(client, db_session):
    response = client.post(
        "/api/v1/messages",
        json={"author_name": "  Iqra  ", "author_email": "", "message": " Miss you all! "},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert "after approval" in body["message"]

    stored = db_session.exec(select(Message)).one()
    assert stored.author_name == "Iqra"
    assert stored.author_email is None
    assert stored.message == "Miss you all!"
    assert stored.status == MessageStatus.PENDING


def test_submit_with_email(client, db_session):
    response = client.post(
        "/api/v1/messages",
        json={"author_name": "Ali", "author_email": "ali@example.com", "message": "Hello"},
    )
    assert response.status_code == 201
    assert db_session.exec(select(Message)).one().author_email == "ali@example.com"


def test_blank_name_or_message_is_rejected(client, db_session):
    for payload in (
        {"author_name": "   ", "message": "Hello"},
        {"author_name": "Ali", "message": ""},
        {"message": "Hello"},
    ):
        response = client.post("/api/v1/messages", json=payload)
        assert response.status_code == 422

    # Nothing was attempted
    assert db_session.exec(select(Message)).all() == []


def test_invalid_email_is_rejected(client):
    response = client.post(
        "/api/v1/messages",
        json={"author_name": "Ali", "author_email": "not-an-email", "message": "Hi"},
    )
    assert response.status_code == 422


def test_only_approved_messages_are_listed(client, db_session):
    db_session.add_all([
        Message(author_name="Old", author_email="old@example.com", message="first",
                status=MessageStatus.APPROVED, created_at=minutes_ago(30)),
        Message(author_name="New", message="second",
                status=MessageStatus.APPROVED, created_at=minutes_ago(5)),
        Message(author_name="Hidden", message="pending",
                status=MessageStatus.PENDING, created_at=minutes_ago(1)),
    ])
    db_session.commit()

    data = client.get("/api/v1/messages").json()

    assert [m["author_name"] for m in data] == ["New", "Old"]
    # Public listing never exposes email addresses
    assert all("author_email" not in m for m in data)


def test_default_limit(client, db_session):
    db_session.add_all([
        Message(author_name=f"Author {i}", message="hi",
                status=MessageStatus.APPROVED, created_at=minutes_ago(i))
        for i in range(settings.MESSAGES_LIMIT + 3)
    ])
    db_session.commit()

    assert len(client.get("/api/v1/messages").json()) == settings.MESSAGES_LIMIT
    assert len(client.get("/api/v1/messages", params={"limit": 2}).json()) == 2
    assert client.get("/api/v1/messages", params={"limit": 0}).status_code == 422
