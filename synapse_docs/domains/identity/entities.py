from datetime import datetime
from typing import Optional, Dict, Any

from synapse_docs.core.security import get_password_hash, verify_password


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: Optional[str],
        email: str,
        username: str,
        password_hash: str,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.email = email
        self.username = username
        self.password_hash = password_hash
        self.is_active = is_active
        self.created_at = created_at
        self.updated_at = updated_at

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def deactivate(self) -> None:
        """Деактивация пользователя"""
        self.is_active = False

    def to_fields(self) -> Dict[str, Any]:
        """Поля записи для хранилища"""
        return {
            "email": self.email,
            "username": self.username,
            "password_hash": self.password_hash,
            "is_active": self.is_active,
        }

    @classmethod
    def create_user(cls, email: str, username: str, password: str) -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            id=None,
            email=email.lower(),
            username=username,
            password_hash=get_password_hash(password)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, username={self.username})"
