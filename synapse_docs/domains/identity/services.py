import logging
from typing import Optional, List

from synapse_docs.core.config import Settings
from synapse_docs.core.security import create_access_token, verify_token
from synapse_docs.core.store import RecordStore
from synapse_docs.db.repositories.user_repository import UserRepository
from synapse_docs.domains.identity.entities import User
from synapse_docs.domains.identity.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""

    def __init__(self, store: RecordStore, settings: Settings):
        self.settings = settings
        self.user_repository = UserRepository(store)

    def register_user(self, user_data: UserCreate) -> User:
        """Регистрация нового пользователя"""
        if self.user_repository.email_exists(user_data.email):
            raise ValueError("Email already registered")

        user = User.create_user(
            email=user_data.email,
            username=user_data.username,
            password=user_data.password
        )
        return self.user_repository.create(user)

    def ensure_admin(self) -> User:
        """Создание учетной записи администратора из настроек, если ее еще нет"""
        existing = self.user_repository.get_by_email(self.settings.admin_email)
        if existing:
            return existing

        admin = self.register_user(UserCreate(
            email=self.settings.admin_email,
            username="admin",
            password=self.settings.admin_password
        ))
        logger.info("Admin user %s created", admin.email)
        return admin

    def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = self.user_repository.get_by_email(login_data.email)

        if not user or not user.is_active:
            return None

        if not user.authenticate(login_data.password):
            return None

        return user

    def login_user(self, login_data: UserLogin) -> Optional[str]:
        """Вход пользователя и создание JWT токена"""
        user = self.authenticate_user(login_data)

        if not user:
            logger.warning("Failed login attempt for %s", login_data.email)
            return None

        token_data = {
            "sub": user.id,
            "username": user.username,
            "email": user.email
        }

        return create_access_token(data=token_data, settings=self.settings)

    def get_current_user_from_token(self, token: str) -> Optional[User]:
        """Получение текущего пользователя из JWT токена"""
        payload = verify_token(token, self.settings)
        if not payload or not payload.get("sub"):
            return None

        user = self.user_repository.get_by_id(payload["sub"])

        if user is None or not user.is_active:
            return None

        return user

    def deactivate_user(self, user_id: str) -> bool:
        """Деактивация пользователя"""
        user = self.user_repository.get_by_id(user_id)

        if not user:
            return False

        user.deactivate()
        return self.user_repository.update(user) is not None

    def list_users(self) -> List[User]:
        """Получение списка пользователей"""
        return self.user_repository.get_all()
