from typing import Optional, List

from synapse_docs.core.store import Record, RecordStore
from synapse_docs.domains.identity.entities import User

USERS_TABLE = "users"


class UserRepository:
    """Репозиторий для работы с пользователями"""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, user: User) -> User:
        """Создание нового пользователя"""
        if self.email_exists(user.email):
            raise ValueError("User with this email already exists")
        return self._to_domain(self.store.insert(USERS_TABLE, user.to_fields()))

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Получение пользователя по id"""
        record = self.store.find_by_id(USERS_TABLE, user_id)
        return self._to_domain(record) if record else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Получение пользователя по email"""
        records = self.store.find(USERS_TABLE, {"email": email.lower()})
        return self._to_domain(records[0]) if records else None

    def update(self, user: User) -> Optional[User]:
        """Обновление пользователя"""
        if not self.store.update(USERS_TABLE, user.id, user.to_fields()):
            return None
        return self.get_by_id(user.id)

    def get_all(self) -> List[User]:
        """Получение списка пользователей"""
        return [self._to_domain(record) for record in self.store.find(USERS_TABLE)]

    def email_exists(self, email: str) -> bool:
        """Проверка существования email"""
        return bool(self.store.find(USERS_TABLE, {"email": email.lower()}))

    def _to_domain(self, record: Record) -> User:
        """Преобразование записи хранилища в доменную сущность"""
        return User(
            id=record["id"],
            email=record["email"],
            username=record["username"],
            password_hash=record["password_hash"],
            is_active=record["is_active"],
            created_at=record["created_at"],
            updated_at=record["updated_at"]
        )
