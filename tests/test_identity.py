import pytest
from pydantic import ValidationError

from synapse_docs.core.security import create_access_token, verify_token
from synapse_docs.domains.identity.schemas import UserCreate, UserLogin


def _user(email="writer@synapse.dev", password="Secret123"):
    return UserCreate(email=email, username="writer", password=password)


def test_register_and_authenticate(service):
    identity = service.identity
    user = identity.register_user(_user())

    assert user.id
    assert user.password_hash != "Secret123"
    assert identity.authenticate_user(UserLogin(email="writer@synapse.dev", password="Secret123")) == user
    assert identity.authenticate_user(UserLogin(email="writer@synapse.dev", password="Wrong1234")) is None


def test_duplicate_email_rejected(service):
    service.identity.register_user(_user())
    with pytest.raises(ValueError):
        service.identity.register_user(_user())


def test_password_rules():
    with pytest.raises(ValidationError):
        _user(password="alllowercase1")
    with pytest.raises(ValidationError):
        _user(password="Short1")


def test_ensure_admin_is_idempotent(service):
    first = service.identity.ensure_admin()
    second = service.identity.ensure_admin()

    assert first == second
    assert len(service.identity.list_users()) == 1


def test_login_token_resolves_user(service):
    service.identity.register_user(_user())
    token = service.identity.login_user(UserLogin(email="writer@synapse.dev", password="Secret123"))

    user = service.identity.get_current_user_from_token(token)
    assert user.email == "writer@synapse.dev"


def test_deactivated_user_cannot_log_in(service):
    user = service.identity.register_user(_user())

    assert service.identity.deactivate_user(user.id)
    assert service.identity.login_user(UserLogin(email="writer@synapse.dev", password="Secret123")) is None
    assert service.identity.deactivate_user("missing") is False


def test_token_signed_with_other_secret_is_rejected(settings):
    token = create_access_token({"sub": "x"}, settings)
    other = settings.model_copy(update={"jwt_secret": "different"})

    assert verify_token(token, settings)["sub"] == "x"
    assert verify_token(token, other) is None
    assert verify_token("garbage", settings) is None
