import pytest
from pydantic import ValidationError as PydanticValidationError

from eventgraph.core.config import Settings


def make_settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite://", "JWT_SECRET": "local-secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_local_settings_accept_short_secret():
    settings = make_settings(JWT_SECRET="dev")

    assert settings.JWT_SECRET == "dev"
    assert settings.is_sqlite


@pytest.mark.parametrize("secret", ["", "   "])
def test_blank_secret_is_rejected_in_every_mode(secret):
    with pytest.raises(PydanticValidationError):
        make_settings(JWT_SECRET=secret)
    with pytest.raises(PydanticValidationError):
        make_settings(ENV="prod", JWT_SECRET=secret)


def test_prod_requires_long_secret():
    with pytest.raises(PydanticValidationError):
        make_settings(ENV="prod", JWT_SECRET="too-short")

    assert make_settings(ENV="prod", JWT_SECRET="x" * 32).ENV == "prod"


def test_blank_database_url_is_rejected():
    with pytest.raises(PydanticValidationError):
        make_settings(DATABASE_URL="")
