from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal, Dict, Any

PageCategory = Literal[
    "getting-started", "core", "enterprise", "nextgen", "futuristic", "api", "examples"
]
ExampleLanguage = Literal["typescript", "javascript", "html", "css", "json", "bash"]
Difficulty = Literal["beginner", "intermediate", "advanced"]


class PageCreate(BaseModel):
    """Схема для создания страницы документации"""
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    content: str = ""
    category: PageCategory = "core"
    order: int = 0
    is_published: bool = True
    tags: List[str] = []
    author: str = "Synapse Team"
    views: int = 0
    likes: int = 0

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class ExampleCreate(BaseModel):
    """Схема для создания примера кода"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    code: str
    language: ExampleLanguage = "typescript"
    category: str = ""
    package: str = ""
    is_interactive: bool = False
    is_runnable: bool = False
    dependencies: List[str] = []


class TutorialStep(BaseModel):
    """Шаг учебника"""
    title: str
    content: str
    code: Optional[str] = None
    language: Optional[ExampleLanguage] = None
    is_optional: bool = False


class TutorialCreate(BaseModel):
    """Схема для создания учебника"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    steps: List[TutorialStep] = []
    difficulty: Difficulty = "beginner"
    estimated_time: int = Field(0, ge=0)
    prerequisites: List[str] = []
    category: str = ""
    is_published: bool = True


class PackageClass(BaseModel):
    """Класс, документируемый в справочнике пакета"""
    name: str
    description: str = ""
    methods: List[str] = []


class PackageCreate(BaseModel):
    """Схема для создания описания пакета"""
    name: str = Field(..., pattern=r"^@synapse/[a-z0-9-]+$")
    version: str = "1.0.0"
    description: str
    category: PageCategory
    classes: List[PackageClass] = []
    design_patterns: List[str] = []

    @property
    def short_name(self) -> str:
        return self.name.split("/", 1)[1]


class SearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    results: List[Dict[str, Any]]
    query: str


class LikeResponse(BaseModel):
    """Схема для ответа на отметку страницы"""
    slug: str
    likes: int


class WizardStepResponse(BaseModel):
    """Схема состояния мастера первых шагов"""
    current_step: int
    total_steps: int
    step_id: str
    title: str
    step_type: str
    is_required: bool
    is_first: bool
    is_last: bool
    user_preferences: Dict[str, Any] = {}
