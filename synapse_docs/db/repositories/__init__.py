from synapse_docs.db.repositories.user_repository import UserRepository
from synapse_docs.db.repositories.documentation_repository import (
    PageRepository, ExampleRepository, TutorialRepository, PackageRepository
)

__all__ = [
    "UserRepository",
    "PageRepository",
    "ExampleRepository",
    "TutorialRepository",
    "PackageRepository"
]
