from tests.utils.auth import get_user_authentication_headers
from tests.utils.event import create_random_event
from tests.utils.graphql import error_code, execute
from tests.utils.user import create_random_user

ADD_COMMENT = """
mutation Comment($input: CreateCommentInput!) {
  addComment(input: $input) { id text createdAt author { id } event { id } }
}
"""

COMMENTS = """
query Comments($eventId: ID!) {
  comments(eventId: $eventId) { text author { name } }
}
"""


def test_add_comment_requires_authentication(client, db_session):
    user = create_random_user(db_session)
    event = create_random_event(db_session, user.id)

    body = execute(client, ADD_COMMENT, {"input": {"eventId": event.id, "text": "hi"}})

    assert error_code(body) == "UNAUTHENTICATED"


def test_add_comment_with_whitespace_text_is_rejected(client, db_session):
    user = create_random_user(db_session)
    event = create_random_event(db_session, user.id)

    body = execute(
        client,
        ADD_COMMENT,
        {"input": {"eventId": event.id, "text": "   "}},
        get_user_authentication_headers(user.id),
    )

    assert error_code(body) == "BAD_USER_INPUT"
    assert body["errors"][0]["message"] == "Comment text is required"


def test_add_comment_to_unknown_event_is_not_found(client, db_session):
    user = create_random_user(db_session)

    body = execute(
        client,
        ADD_COMMENT,
        {"input": {"eventId": "evt_missing", "text": "hi"}},
        get_user_authentication_headers(user.id),
    )

    assert error_code(body) == "NOT_FOUND"


def test_add_comment_uses_server_timestamp(client, db_session):
    user = create_random_user(db_session)
    event = create_random_event(db_session, user.id)

    body = execute(
        client,
        ADD_COMMENT,
        {"input": {"eventId": event.id, "text": "  hello  "}},
        get_user_authentication_headers(user.id),
    )

    comment = body["data"]["addComment"]
    assert comment["text"] == "  hello  "
    assert comment["author"]["id"] == user.id
    assert comment["event"]["id"] == event.id
    assert comment["createdAt"].endswith("Z")


def test_comments_query(client, db_session):
    alice = create_random_user(db_session, name="Alice")
    bob = create_random_user(db_session, name="Bob")
    event = create_random_event(db_session, alice.id)
    for user, text in [(alice, "first"), (bob, "second")]:
        execute(
            client,
            ADD_COMMENT,
            {"input": {"eventId": event.id, "text": text}},
            get_user_authentication_headers(user.id),
        )

    body = execute(client, COMMENTS, {"eventId": event.id})
    missing = execute(client, COMMENTS, {"eventId": "evt_missing"})

    assert body["data"]["comments"] == [
        {"text": "first", "author": {"name": "Alice"}},
        {"text": "second", "author": {"name": "Bob"}},
    ]
    assert missing["data"]["comments"] == []


def test_user_relationships(client, db_session):
    alice = create_random_user(db_session, name="Alice")
    bob = create_random_user(db_session, name="Bob")
    own = create_random_event(db_session, alice.id, title="Own")
    other = create_random_event(db_session, bob.id, title="Other")
    alice_headers = get_user_authentication_headers(alice.id)
    execute(client, 'mutation($id: ID!) { joinEvent(eventId: $id) { id } }', {"id": other.id}, alice_headers)
    execute(
        client,
        ADD_COMMENT,
        {"input": {"eventId": own.id, "text": "note"}},
        alice_headers,
    )

    body = execute(
        client,
        """
        query {
          me {
            events { title }
            comments { text event { title comments { author { name } } } }
          }
        }
        """,
        headers=alice_headers,
    )

    me = body["data"]["me"]
    assert sorted(e["title"] for e in me["events"]) == ["Other", "Own"]
    assert me["comments"] == [
        {"text": "note", "event": {"title": "Own", "comments": [{"author": {"name": "Alice"}}]}}
    ]


def test_second_comment_in_same_document_sees_the_first(client, db_session):
    """
    Relationship fields resolved after a later mutation in the same request
    reflect that mutation's write.
    """
    user = create_random_user(db_session)
    event = create_random_event(db_session, user.id)

    body = execute(
        client,
        """
        mutation($id: ID!) {
          a: addComment(input: {eventId: $id, text: "one"}) {
            event { comments { text } }
            author { comments { text } }
          }
          b: addComment(input: {eventId: $id, text: "two"}) {
            event { comments { text } }
            author { comments { text } }
          }
        }
        """,
        {"id": event.id},
        get_user_authentication_headers(user.id),
    )

    assert "errors" not in body
    first, second = body["data"]["a"], body["data"]["b"]
    assert first["event"]["comments"] == [{"text": "one"}]
    assert second["event"]["comments"] == [{"text": "one"}, {"text": "two"}]
    assert second["author"]["comments"] == [{"text": "one"}, {"text": "two"}]
