import logging
from pathlib import Path
from typing import List

from synapse_docs.domains.documentation.services import DocumentationService

logger = logging.getLogger(__name__)


class StaticSiteGenerator:
    """Генерация статической копии сайта документации.

    Использует только публичные методы render_* сервиса, поэтому файлы
    совпадают с тем, что отдает сервер.
    """

    def __init__(self, service: DocumentationService, output_dir: Path):
        self.service = service
        self.output_dir = Path(output_dir)

    def generate(self) -> List[Path]:
        """Запись всех страниц сайта; возвращает пути созданных файлов"""
        service = self.service
        written = [
            self._write("index.html", service.render_home()),
            self._write("examples.html", service.render_examples()),
            self._write("tutorials.html", service.render_tutorials()),
            self._write("patterns.html", service.render_patterns()),
            self._write("api.html", service.render_api()),
            self._write("getting-started.html", service.render_wizard()),
        ]

        for page in service.published_pages():
            written.append(self._write(f"{page['slug']}.html", service.render_page(page)))

        for package in service.packages():
            written.append(
                self._write(f"packages/{package['short_name']}.html", service.render_package(package))
            )

        logger.info("Generated %d files in %s", len(written), self.output_dir)
        return written

    def _write(self, relative_path: str, html: str) -> Path:
        path = self.output_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        logger.debug("Generated %s", path)
        return path
