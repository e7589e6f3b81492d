# pawcare/api/auth/test_services.py
import asyncio

import pytest

from pawcare.api.auth.services import AuthService, is_valid_email
from pawcare.core.errors import AuthenticationError, DataValidationError
from pawcare.models.user import Language
from pawcare.store.seed import create_stores, load_sample_data, DEMO_USER_EMAIL, DEMO_USER_ID


@pytest.fixture
def service():
    stores = create_stores()
    load_sample_data(stores)
    return AuthService(stores.users)


@pytest.mark.parametrize("email,expected", [
    ("demo@example.com", True),
    ("first.last+tag@mail.co.kr", True),
    ("no-at-sign.com", False),
    ("user@domain", False),
    ("", False),
    (None, False),
])
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected

def test_demo_login_maps_to_seeded_user(service):
    user = asyncio.run(service.login_with_password("Demo@Example.com", "secret1"))
    assert user.user_id == DEMO_USER_ID

def test_login_with_new_email_creates_user(service):
    user = asyncio.run(service.login_with_password("new@example.com", "secret1"))
    assert service.find_user_by_email("new@example.com").user_id == user.user_id

def test_login_rejects_short_password_and_bad_email(service):
    with pytest.raises(DataValidationError):
        asyncio.run(service.login_with_password(DEMO_USER_EMAIL, "12345"))
    with pytest.raises(DataValidationError):
        asyncio.run(service.login_with_password("not-an-email", "secret1"))

def test_register(service):
    user = asyncio.run(service.register(" Jane Doe ", "jane@example.com", "secret1", "secret1"))
    assert user.full_name == "Jane Doe"

def test_register_rejects_mismatch_and_duplicates(service):
    with pytest.raises(DataValidationError):
        asyncio.run(service.register("Jane", "jane@example.com", "secret1", "secret2"))
    with pytest.raises(DataValidationError):
        asyncio.run(service.register("Jane", DEMO_USER_EMAIL, "secret1", "secret1"))
    with pytest.raises(DataValidationError):
        asyncio.run(service.register("  ", "jane@example.com", "secret1", "secret1"))
    assert service.find_user_by_email("jane@example.com") is None

@pytest.mark.parametrize("otp", ["12345", "1234567", "12a456", ""])
def test_otp_must_be_six_digits(service, otp):
    with pytest.raises(DataValidationError):
        asyncio.run(service.login_with_otp(DEMO_USER_EMAIL, otp))

def test_login_with_otp(service):
    assert asyncio.run(service.login_with_otp(DEMO_USER_EMAIL, "123456")).user_id == DEMO_USER_ID

def test_update_language(service):
    user = asyncio.run(service.update_language(DEMO_USER_ID, Language.TRADITIONAL_CHINESE))
    assert user.language == Language.TRADITIONAL_CHINESE
    with pytest.raises(AuthenticationError):
        asyncio.run(service.update_language("ghost", Language.ENGLISH))

def test_logout_revokes_both_tokens(service):
    service.logout_user("access-jti", "refresh-jti")
    assert service.is_token_revoked({"jti": "access-jti"})
    assert service.is_token_revoked({"jti": "refresh-jti"})
    assert not service.is_token_revoked({"jti": "other"})
