import enum
import logging
from typing import Optional, List, Dict, Any

import markdown

from synapse_docs.core.config import Settings
from synapse_docs.core.dispatcher import RouteDispatcher
from synapse_docs.core.store import Record, RecordStore
from synapse_docs.core.templating import TemplateRenderer
from synapse_docs.db.repositories.documentation_repository import (
    PageRepository, ExampleRepository, TutorialRepository, PackageRepository,
    PAGES_TABLE, EXAMPLES_TABLE, TUTORIALS_TABLE, PACKAGES_TABLE
)
from synapse_docs.db.repositories.user_repository import USERS_TABLE
from synapse_docs.domains.documentation import content
from synapse_docs.domains.documentation.entities import Wizard, WizardStep
from synapse_docs.domains.documentation.schemas import (
    PageCreate, ExampleCreate, TutorialCreate, PackageCreate, WizardStepResponse
)
from synapse_docs.domains.documentation.templates import TEMPLATES
from synapse_docs.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)

PACKAGE_CATEGORIES = ("core", "enterprise", "nextgen", "futuristic")
SUMMARY_LENGTH = 150


class ServiceState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    SERVING = "serving"


class DocumentationService:
    """Сервис сайта документации.

    Владеет хранилищем записей, рендерером шаблонов и диспетчером маршрутов.
    initialize() подключает хранилище, создает таблицы, наполняет их
    содержимым и регистрирует маршруты; start() запускает HTTP-сервер.
    Методы чтения и render_* - публичный интерфейс для обработчиков
    маршрутов, генератора статики и внутреннего API.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.store = RecordStore()
        self.renderer = TemplateRenderer()
        self.dispatcher = RouteDispatcher(host=settings.host, port=settings.port)
        self.page_repository = PageRepository(self.store)
        self.example_repository = ExampleRepository(self.store)
        self.tutorial_repository = TutorialRepository(self.store)
        self.package_repository = PackageRepository(self.store)
        self.identity = IdentityService(self.store, settings)
        self.wizard: Optional[Wizard] = None
        self.state = ServiceState.UNINITIALIZED

    async def initialize(self) -> None:
        """Подготовка хранилища, содержимого и маршрутов"""
        if self.state is not ServiceState.UNINITIALIZED:
            raise RuntimeError("Documentation service is already initialized")

        await self.store.connect()
        self._setup_store()
        self._seed_content()
        self._register_templates()
        self.wizard = self._build_wizard()
        self.identity.ensure_admin()
        self._setup_routes()

        self.state = ServiceState.INITIALIZED
        logger.info("Documentation service initialized")

    async def start(self, app=None) -> None:
        """Запуск сервера; app - ASGI-приложение, оборачивающее диспетчер"""
        if self.state is ServiceState.UNINITIALIZED:
            await self.initialize()
        await self.dispatcher.start(app)
        self.state = ServiceState.SERVING

    async def stop(self) -> None:
        """Остановка сервера"""
        await self.dispatcher.stop()
        if self.state is ServiceState.SERVING:
            self.state = ServiceState.INITIALIZED

    def _setup_store(self) -> None:
        for table in (PAGES_TABLE, EXAMPLES_TABLE, TUTORIALS_TABLE, PACKAGES_TABLE, USERS_TABLE):
            self.store.create_table(table)

    def _seed_content(self) -> None:
        for page_data in content.PAGES:
            self.page_repository.create(PageCreate(**page_data))
        for example_data in content.EXAMPLES:
            self.example_repository.create(ExampleCreate(**example_data))
        for tutorial_data in content.TUTORIALS:
            self.tutorial_repository.create(TutorialCreate(**tutorial_data))
        for package_data in content.PACKAGES:
            self.package_repository.create(PackageCreate(**package_data))

        logger.info(
            "Seeded %d pages, %d examples, %d tutorials, %d packages",
            self.store.count(PAGES_TABLE), self.store.count(EXAMPLES_TABLE),
            self.store.count(TUTORIALS_TABLE), self.store.count(PACKAGES_TABLE)
        )

    def _register_templates(self) -> None:
        for name, template in TEMPLATES.items():
            self.renderer.register(name, template)

    def _build_wizard(self) -> Wizard:
        data = content.WIZARD
        return Wizard(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            steps=[WizardStep(**step) for step in data["steps"]],
            user_preferences=dict(data["user_preferences"])
        )

    def _setup_routes(self) -> None:
        from synapse_docs.api.http.middleware import log_requests
        from synapse_docs.api.http.pages import register_page_routes

        self.dispatcher.use(log_requests)
        register_page_routes(self.dispatcher, self)
        logger.info("Registered %d routes", len(self.dispatcher.routes()))

    # Чтение данных

    def published_pages(self) -> List[Record]:
        return self.page_repository.get_published()

    def get_page(self, slug: str) -> Optional[Record]:
        return self.page_repository.get_by_slug(slug)

    def record_view(self, page: Record) -> Record:
        """Учет просмотра страницы"""
        return self.page_repository.increment_views(page)

    def like_page(self, slug: str) -> Optional[int]:
        """Отметка страницы; None если страницы нет"""
        page = self.page_repository.get_by_slug(slug)
        if not page:
            return None
        return self.page_repository.increment_likes(page)["likes"]

    def packages(self) -> List[Record]:
        return self.package_repository.get_all()

    def get_package(self, short_name: str) -> Optional[Record]:
        return self.package_repository.get_by_short_name(short_name)

    def examples(self) -> List[Record]:
        return self.example_repository.get_all()

    def tutorials(self) -> List[Record]:
        return self.tutorial_repository.get_published()

    def design_patterns(self) -> List[Dict[str, Any]]:
        """Паттерны проектирования, собранные из описаний пакетов"""
        patterns: Dict[str, List[str]] = {}
        for package in self.packages():
            for pattern in package["design_patterns"]:
                patterns.setdefault(pattern, []).append(package["name"])

        return [
            {"name": name, "packages": names, "package_list": ", ".join(names)}
            for name, names in sorted(patterns.items())
        ]

    def search(self, query: str) -> List[Record]:
        """Поиск по страницам и примерам без учета регистра"""
        return self.page_repository.search(query) + self.example_repository.search(query)

    def wizard_state(self) -> WizardStepResponse:
        wizard = self.wizard
        return WizardStepResponse(
            current_step=wizard.current_step,
            total_steps=len(wizard.steps),
            step_id=wizard.current.id,
            title=wizard.current.title,
            step_type=wizard.current.type,
            is_required=wizard.current.is_required,
            is_first=wizard.is_first,
            is_last=wizard.is_last,
            user_preferences=wizard.user_preferences
        )

    # Рендеринг страниц

    def render_home(self) -> str:
        context = {
            "title": self.settings.site_title,
            "description": self.settings.site_description,
            "pages": [
                {**page, "summary": _summary(page["content"])} for page in self.published_pages()
            ],
        }
        for category in PACKAGE_CATEGORIES:
            context[f"{category}_packages"] = self.package_repository.get_by_category(category)
        return self.renderer.render_named("home", context)

    def render_page(self, page: Record) -> str:
        return self.renderer.render_named("page", {
            **page,
            "content_html": markdown.markdown(page["content"], extensions=["fenced_code", "tables"]),
            "tags": [{"name": tag} for tag in page["tags"]],
        })

    def render_package(self, package: Record) -> str:
        return self.renderer.render_named("package", {
            **package,
            "title": f"{package['name']} - Synapse Framework",
            "classes": [
                {**cls, "method_list": ", ".join(cls["methods"])} for cls in package["classes"]
            ],
            "patterns": [{"name": pattern} for pattern in package["design_patterns"]],
        })

    def render_examples(self) -> str:
        return self.renderer.render_named("examples", {
            "examples": self.examples(),
            "title": "Code Examples",
            "description": "Practical examples for using Synapse framework",
        })

    def render_tutorials(self) -> str:
        tutorials = []
        for tutorial in self.tutorials():
            steps_html = "".join(
                self.renderer.render_named("tutorial_step", step) for step in tutorial["steps"]
            )
            tutorials.append({
                **tutorial,
                "steps_html": steps_html,
                "prerequisite_list": ", ".join(tutorial["prerequisites"]) or "nothing",
            })

        return self.renderer.render_named("tutorials", {
            "tutorials": tutorials,
            "title": "Tutorials",
            "description": "Step-by-step guides for building with Synapse",
        })

    def render_patterns(self) -> str:
        return self.renderer.render_named("patterns", {
            "patterns": self.design_patterns(),
            "title": "Design Patterns - Synapse Framework",
            "description": "Design patterns used throughout the Synapse framework",
        })

    def render_api(self) -> str:
        packages = [
            {**package, "class_list": ", ".join(cls["name"] for cls in package["classes"])}
            for package in self.packages()
        ]
        return self.renderer.render_named("api", {
            "packages": packages,
            "title": "API Reference - Synapse Framework",
            "description": "Complete API documentation for all Synapse packages",
        })

    def render_wizard(self) -> str:
        wizard = self.wizard
        step = wizard.current
        steps = []
        for index, item in enumerate(wizard.steps):
            if index < wizard.current_step:
                state = "done"
            elif index == wizard.current_step:
                state = "current"
            else:
                state = "todo"
            steps.append({"title": item.title, "state": state})

        return self.renderer.render_named("wizard", {
            "title": "Getting Started Wizard - Synapse Framework",
            "wizard_title": wizard.title,
            "wizard_description": wizard.description,
            "progress": wizard.progress_percent,
            "step_number": wizard.current_step + 1,
            "total_steps": len(wizard.steps),
            "steps": steps,
            "step_title": step.title,
            "step_description": step.description,
            "step_content": step.content,
            "step_type": step.type,
            "is_optional": not step.is_required,
            "preferences": [
                {"name": name, "value": value} for name, value in sorted(wizard.user_preferences.items())
            ],
            "code_example": step.code_example,
            "has_previous": not wizard.is_first,
            "has_next": not wizard.is_last,
            "is_last": wizard.is_last,
        })

    def render_not_found(self, path: str) -> str:
        return self.renderer.render_named("not_found", {"path": path})


def _summary(text: str) -> str:
    """Начало текста страницы без разметки заголовков"""
    lines = [line.lstrip("#").strip() for line in text.splitlines() if line.strip()]
    plain = " ".join(lines)
    if len(plain) <= SUMMARY_LENGTH:
        return plain
    return plain[:SUMMARY_LENGTH].rstrip() + "..."
