"""Template renderer with variable, conditional and loop substitution.

Rendering is three independent regex passes over the whole template, always in
the same order:

1. ``{{name}}`` is replaced by ``context["name"]`` (empty string when absent).
2. ``{% if name %}...{% endif %}`` keeps its body when ``context["name"]`` is
   truthy and drops it otherwise.
3. ``{% for item in items %}...{% endfor %}`` repeats its body for every element
   of ``context["items"]``, replacing ``{{item.field}}`` with that element's field.

Values are HTML-escaped unless the token carries the ``|raw`` filter, e.g.
``{{content|raw}}``. Blocks do not nest and there is no ``else`` branch.
"""
import html
import re
from collections.abc import Mapping
from typing import Any, Dict, List

VARIABLE_RE = re.compile(r"\{\{(\w+)(\|raw)?\}\}")
CONDITIONAL_RE = re.compile(r"\{%\s*if\s+(\w+)\s*%\}(.*?)\{%\s*endif\s*%\}", re.DOTALL)
LOOP_RE = re.compile(
    r"\{%\s*for\s+(\w+)\s+in\s+(\w+)\s*%\}(.*?)\{%\s*endfor\s*%\}", re.DOTALL
)


def _to_text(value: Any, raw: bool) -> str:
    if value is None:
        return ""
    text = str(value)
    return text if raw else html.escape(text)


def _item_field(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


class TemplateRenderer:
    """Рендеринг шаблонов и реестр именованных шаблонов"""

    def __init__(self):
        self._templates: Dict[str, str] = {}

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Подстановка переменных, условий и циклов"""
        result = VARIABLE_RE.sub(
            lambda m: _to_text(context.get(m.group(1)), bool(m.group(2))), template
        )
        result = CONDITIONAL_RE.sub(
            lambda m: m.group(2) if context.get(m.group(1)) else "", result
        )
        return LOOP_RE.sub(lambda m: self._render_loop(m, context), result)

    def _render_loop(self, match: re.Match, context: Dict[str, Any]) -> str:
        item_var, list_var, body = match.groups()
        items = context.get(list_var) or []
        field_re = re.compile(r"\{\{" + re.escape(item_var) + r"\.(\w+)(\|raw)?\}\}")

        parts: List[str] = []
        for item in items:
            parts.append(
                field_re.sub(
                    lambda m: _to_text(_item_field(item, m.group(1)), bool(m.group(2))), body
                )
            )
        return "".join(parts)

    def register(self, name: str, template: str) -> None:
        """Регистрация шаблона под именем; повторная регистрация заменяет его"""
        self._templates[name] = template

    def get(self, name: str) -> str:
        """Текст зарегистрированного шаблона, KeyError если его нет"""
        return self._templates[name]

    def names(self) -> List[str]:
        return sorted(self._templates)

    def render_named(self, name: str, context: Dict[str, Any]) -> str:
        return self.render(self.get(name), context)
