# pawcare/api/auth/services.py
"""
시뮬레이션 인증 서비스.
실제 자격 증명 검증이나 비밀번호 저장은 하지 않으며, 입력 형식만 검사한 뒤 사용자를 조회/생성합니다.
세션 토큰 발급은 라우트에서 flask-jwt-extended로 처리합니다.
"""

import re
import uuid
import logging
from typing import Optional, Set

from pawcare.api.base import BaseStoreService
from pawcare.core.errors import AuthenticationError, DataValidationError
from pawcare.models.user import Language, User
from pawcare.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}$")
OTP_PATTERN = re.compile(r"^[0-9]{6}$")
MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email.strip()) is not None


class AuthService(BaseStoreService):
    def __init__(self, user_store: EntityStore[User], latency: float = 0.0):
        super().__init__(latency)
        self.users = user_store
        self._revoked_jtis: Set[str] = set()

    # --- 사용자 조회/생성 ---
    def get_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise AuthenticationError("세션에 해당하는 사용자를 찾을 수 없습니다.")
        return user

    def find_user_by_email(self, email: str) -> Optional[User]:
        normalized = email.strip().lower()
        for user in self.users.all():
            if user.email.lower() == normalized:
                return user
        return None

    def _get_or_create_user(self, email: str, full_name: Optional[str] = None) -> User:
        user = self.find_user_by_email(email)
        if user:
            return user
        new_user = User(user_id=str(uuid.uuid4()), email=email.strip(), full_name=full_name)
        self.users.insert(new_user)
        logger.info(f"New user created: {new_user.user_id}")
        return new_user

    @staticmethod
    def _require_email(email: Optional[str]) -> str:
        if not is_valid_email(email):
            raise DataValidationError("이메일 형식이 올바르지 않습니다.")
        return email.strip()

    @staticmethod
    def _require_password(password: Optional[str]) -> None:
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise DataValidationError(f"비밀번호는 {MIN_PASSWORD_LENGTH}자 이상이어야 합니다.")

    # --- 인증 흐름 ---
    async def login_with_password(self, email: str, password: str) -> User:
        """이메일 형식과 비밀번호 길이만 확인하고 해당 이메일의 사용자를 반환(없으면 생성)합니다."""
        email = self._require_email(email)
        self._require_password(password)

        await self._simulate_latency()
        user = self._get_or_create_user(email)
        logger.info(f"User {user.user_id} logged in with password")
        return user

    async def register(self, full_name: str, email: str, password: str, confirm_password: str) -> User:
        full_name = self._require_text(full_name, "이름은 비워둘 수 없습니다.")
        email = self._require_email(email)
        self._require_password(password)
        if password != confirm_password:
            raise DataValidationError("비밀번호가 일치하지 않습니다.")
        if self.find_user_by_email(email):
            raise DataValidationError("이미 가입된 이메일입니다.")

        await self._simulate_latency()
        user = self._get_or_create_user(email, full_name=full_name)
        logger.info(f"User {user.user_id} registered")
        return user

    async def send_otp(self, email: str) -> None:
        """OTP 발송을 흉내냅니다. 실제로 메일을 보내지 않습니다."""
        email = self._require_email(email)
        await self._simulate_latency()
        logger.info(f"OTP requested for {email[:3]}***")

    async def login_with_otp(self, email: str, otp: str) -> User:
        """OTP는 정확히 6자리 숫자여야 합니다."""
        email = self._require_email(email)
        if not otp or OTP_PATTERN.match(otp) is None:
            raise DataValidationError("인증 코드는 6자리 숫자여야 합니다.")

        await self._simulate_latency()
        user = self._get_or_create_user(email)
        logger.info(f"User {user.user_id} logged in with OTP")
        return user

    async def reset_password(self, email: str) -> None:
        email = self._require_email(email)
        await self._simulate_latency()
        logger.info(f"Password reset requested for {email[:3]}***")

    async def update_language(self, user_id: str, language: Language) -> User:
        user = self.get_user(user_id)
        await self._simulate_latency()
        user.language = language
        self.users.replace(user)
        return user

    # --- Blocklist 관련 로직 ---
    def add_token_to_blocklist(self, jti: str) -> None:
        self._revoked_jtis.add(jti)

    def is_token_revoked(self, jwt_payload: dict) -> bool:
        """jti를 이용해 해당 토큰이 무효화 목록에 있는지 확인합니다."""
        return jwt_payload.get('jti') in self._revoked_jtis

    def logout_user(self, access_jti: str, refresh_jti: Optional[str] = None) -> None:
        """Access 토큰과 (있다면) Refresh 토큰을 모두 Blocklist에 추가합니다."""
        self.add_token_to_blocklist(access_jti)
        if refresh_jti:
            self.add_token_to_blocklist(refresh_jti)
        logger.info(f"User logged out. JTI: {access_jti[:8]}...")
