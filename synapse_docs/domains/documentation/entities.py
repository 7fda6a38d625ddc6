from typing import Optional, List, Dict, Any


class WizardStep:
    """Шаг мастера первых шагов"""

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        content: str,
        type: str = "example",
        code_example: Optional[str] = None,
        is_required: bool = True
    ):
        self.id = id
        self.title = title
        self.description = description
        self.content = content
        self.type = type
        self.code_example = code_example
        self.is_required = is_required

    def __repr__(self) -> str:
        return f"WizardStep(id={self.id}, title={self.title})"


class Wizard:
    """Мастер первых шагов: упорядоченные шаги и индекс текущего шага.

    Живет столько же, сколько сервис документации, и в хранилище не
    сохраняется. Навигация за пределы списка шагов упирается в его края.
    """

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        steps: List[WizardStep],
        user_preferences: Optional[Dict[str, Any]] = None
    ):
        if not steps:
            raise ValueError("Wizard needs at least one step")
        self.id = id
        self.title = title
        self.description = description
        self.steps = steps
        self.current_step = 0
        self.user_preferences = user_preferences or {}

    @property
    def current(self) -> WizardStep:
        """Текущий шаг"""
        return self.steps[self.current_step]

    @property
    def is_first(self) -> bool:
        return self.current_step == 0

    @property
    def is_last(self) -> bool:
        return self.current_step == len(self.steps) - 1

    @property
    def progress_percent(self) -> int:
        """Доля пройденных шагов в процентах"""
        return round((self.current_step + 1) / len(self.steps) * 100)

    def next_step(self) -> WizardStep:
        """Переход к следующему шагу"""
        if not self.is_last:
            self.current_step += 1
        return self.current

    def previous_step(self) -> WizardStep:
        """Возврат к предыдущему шагу"""
        if not self.is_first:
            self.current_step -= 1
        return self.current

    def go_to(self, step_id: str) -> Optional[WizardStep]:
        """Переход к шагу по id"""
        for index, step in enumerate(self.steps):
            if step.id == step_id:
                self.current_step = index
                return step
        return None

    def reset(self) -> WizardStep:
        self.current_step = 0
        return self.current

    def __repr__(self) -> str:
        return f"Wizard(id={self.id}, current_step={self.current_step}, steps={len(self.steps)})"
