from typing import Optional, List

from synapse_docs.core.store import Record, RecordStore
from synapse_docs.domains.documentation.schemas import (
    PageCreate, ExampleCreate, TutorialCreate, PackageCreate
)

PAGES_TABLE = "documentation_pages"
EXAMPLES_TABLE = "documentation_examples"
TUTORIALS_TABLE = "documentation_tutorials"
PACKAGES_TABLE = "documentation_packages"


def _contains(value: str, query: str) -> bool:
    return query.lower() in (value or "").lower()


class PageRepository:
    """Репозиторий для работы со страницами документации"""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, page: PageCreate) -> Record:
        """Создание новой страницы"""
        return self.store.insert(PAGES_TABLE, page.model_dump())

    def get_published(self) -> List[Record]:
        """Опубликованные страницы в порядке order"""
        pages = self.store.find(PAGES_TABLE, {"is_published": True})
        return sorted(pages, key=lambda page: page["order"])

    def get_by_slug(self, slug: str) -> Optional[Record]:
        """Получение опубликованной страницы по slug"""
        pages = self.store.find(PAGES_TABLE, {"slug": slug, "is_published": True})
        return pages[0] if pages else None

    def increment_views(self, page: Record) -> Record:
        """Учет просмотра страницы"""
        page["views"] += 1
        self.store.update(PAGES_TABLE, page["id"], {"views": page["views"]})
        return page

    def increment_likes(self, page: Record) -> Record:
        """Учет отметки страницы"""
        page["likes"] += 1
        self.store.update(PAGES_TABLE, page["id"], {"likes": page["likes"]})
        return page

    def search(self, query: str) -> List[Record]:
        """Поиск по заголовку и содержимому опубликованных страниц"""
        return [
            page for page in self.store.find(PAGES_TABLE, {"is_published": True})
            if _contains(page["title"], query) or _contains(page["content"], query)
        ]


class ExampleRepository:
    """Репозиторий для работы с примерами кода"""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, example: ExampleCreate) -> Record:
        return self.store.insert(EXAMPLES_TABLE, example.model_dump())

    def get_all(self) -> List[Record]:
        return self.store.find(EXAMPLES_TABLE)

    def search(self, query: str) -> List[Record]:
        """Поиск по заголовку и описанию примеров"""
        return [
            example for example in self.store.find(EXAMPLES_TABLE)
            if _contains(example["title"], query) or _contains(example["description"], query)
        ]


class TutorialRepository:
    """Репозиторий для работы с учебниками"""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, tutorial: TutorialCreate) -> Record:
        return self.store.insert(TUTORIALS_TABLE, tutorial.model_dump())

    def get_published(self) -> List[Record]:
        return self.store.find(TUTORIALS_TABLE, {"is_published": True})


class PackageRepository:
    """Репозиторий для работы с описаниями пакетов"""

    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, package: PackageCreate) -> Record:
        """Создание описания пакета"""
        return self.store.insert(
            PACKAGES_TABLE, {**package.model_dump(), "short_name": package.short_name}
        )

    def get_all(self) -> List[Record]:
        return self.store.find(PACKAGES_TABLE)

    def get_by_category(self, category: str) -> List[Record]:
        return self.store.find(PACKAGES_TABLE, {"category": category})

    def get_by_short_name(self, short_name: str) -> Optional[Record]:
        """Получение пакета по имени без префикса @synapse/"""
        packages = self.store.find(PACKAGES_TABLE, {"short_name": short_name})
        return packages[0] if packages else None
