import pytest
from pydantic import ValidationError as PydanticValidationError

from eventgraph import crud
from eventgraph.core.exceptions import ConflictError
from eventgraph.schemas.user import UserCreate


def make_user_in(email="alice@x.com", password="pw1234", confirm="pw1234", name="Alice"):
    return UserCreate(
        name=name, email=email, password=password, confirm_password=confirm
    )


def test_register_normalizes_email_and_hashes_password(db_session):
    user = crud.user.register(db_session, obj_in=make_user_in(email="  Alice@X.com "))

    assert user.id.startswith("usr_")
    assert user.email == "alice@x.com"
    assert user.password_hash != "pw1234"
    assert crud.user.verify_password(user, "pw1234")
    assert not crud.user.verify_password(user, "pw12345")


def test_register_duplicate_email_differing_in_case_conflicts(db_session):
    crud.user.register(db_session, obj_in=make_user_in(email="alice@x.com"))

    with pytest.raises(ConflictError):
        crud.user.register(db_session, obj_in=make_user_in(email="ALICE@x.com"))


def test_register_conflict_raised_by_unique_constraint(db_session, monkeypatch):
    """
    Simulates two registrations racing past the pre-check: the database
    constraint still rejects the second one.
    """
    crud.user.register(db_session, obj_in=make_user_in())
    monkeypatch.setattr(crud.user, "get_by_email", lambda db, email: None)

    with pytest.raises(ConflictError):
        crud.user.register(db_session, obj_in=make_user_in())


def test_get_by_email_is_case_insensitive(db_session):
    user = crud.user.register(db_session, obj_in=make_user_in())

    assert crud.user.get_by_email(db_session, email="ALICE@X.COM").id == user.id
    assert crud.user.get_by_email(db_session, email="bob@x.com") is None


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"name": ""}, "All fields are required"),
        ({"email": "   "}, "All fields are required"),
        ({"password": ""}, "All fields are required"),
        ({"confirm": "pw9999"}, "Passwords do not match"),
        ({"password": "x" * 73, "confirm": "x" * 73}, "at most 72 bytes"),
    ],
)
def test_user_create_validation(kwargs, message):
    with pytest.raises(PydanticValidationError) as exc_info:
        make_user_in(**kwargs)
    assert message in str(exc_info.value)


def test_get_multi_orders_by_registration(db_session):
    first = crud.user.register(db_session, obj_in=make_user_in(email="a@x.com"))
    second = crud.user.register(db_session, obj_in=make_user_in(email="b@x.com"))

    users = crud.user.get_multi(db_session, skip=0, limit=10)
    assert [u.id for u in users] == [first.id, second.id]
    assert crud.user.get_multi(db_session, skip=1, limit=10)[0].id == second.id


def test_users_list_in_registration_order(db_session):
    first = crud.user.register(db_session, obj_in=make_user_in(email="first@x.com"))
    second = crud.user.register(db_session, obj_in=make_user_in(email="second@x.com"))
    # Same-tick registrations can share a timestamp; order must not depend on it
    first.created_at = second.created_at
    db_session.commit()

    users = crud.user.get_multi(db_session, skip=0, limit=10)

    assert [u.id for u in users] == [first.id, second.id]
