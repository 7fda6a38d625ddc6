import copy
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _same(actual: Any, expected: Any) -> bool:
    # 1 и True не считаются равными
    return type(actual) is type(expected) and actual == expected


class RecordStore:
    """In-memory хранилище записей, сгруппированных по таблицам.

    Таблица - это упорядоченный по вставке словарь id -> запись. Схема не
    проверяется. Операции над отсутствующей таблицей или записью ничего не
    выбрасывают, а возвращают пустой результат, None или False.
    """

    def __init__(self):
        self._tables: Dict[str, Dict[str, Record]] = {}
        self._last_timestamp: Optional[datetime] = None
        self.connected = False

    async def connect(self) -> None:
        """Подключение хранилища (данные живут только в памяти процесса)"""
        self.connected = True
        logger.info("Record store connected (in-memory)")

    def create_table(self, name: str) -> None:
        """Создание таблицы; повторное создание очищает ее"""
        self._tables[name] = {}
        logger.debug("Table %s created", name)

    def insert(self, table: str, fields: Dict[str, Any]) -> Record:
        """Вставка записи с новым id и отметками времени"""
        if table not in self._tables:
            self.create_table(table)

        now = self._timestamp()
        record = {**fields, "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        self._tables[table][record["id"]] = record
        return copy.deepcopy(record)

    def find(self, table: str, conditions: Optional[Dict[str, Any]] = None) -> List[Record]:
        """Поиск записей по точному совпадению всех условий (с учетом типа значения)"""
        records = self._tables.get(table)
        if not records:
            return []

        if not conditions:
            return [copy.deepcopy(r) for r in records.values()]

        return [
            copy.deepcopy(record)
            for record in records.values()
            if all(key in record and _same(record[key], value) for key, value in conditions.items())
        ]

    def find_by_id(self, table: str, record_id: str) -> Optional[Record]:
        """Получение записи по id"""
        record = self._tables.get(table, {}).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def update(self, table: str, record_id: str, fields: Dict[str, Any]) -> bool:
        """Обновление полей записи"""
        records = self._tables.get(table)
        if records is None or record_id not in records:
            return False

        # id и created_at назначает только хранилище
        changes = {k: v for k, v in fields.items() if k not in ("id", "created_at")}
        records[record_id] = {**records[record_id], **changes, "updated_at": self._timestamp()}
        return True

    def delete(self, table: str, record_id: str) -> bool:
        """Удаление записи"""
        records = self._tables.get(table)
        if records is None:
            return False
        return records.pop(record_id, None) is not None

    def tables(self) -> List[str]:
        """Имена существующих таблиц"""
        return list(self._tables)

    def count(self, table: str) -> int:
        return len(self._tables.get(table, {}))

    def dump(self, table: str) -> List[Record]:
        """Все записи таблицы для внутреннего API и генератора статики"""
        return self.find(table)

    def _timestamp(self) -> datetime:
        # Отметки времени строго возрастают даже в пределах одного тика часов
        now = _utcnow()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now
