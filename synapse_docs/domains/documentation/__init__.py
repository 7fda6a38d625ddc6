from synapse_docs.domains.documentation.entities import Wizard, WizardStep
from synapse_docs.domains.documentation.schemas import (
    PageCreate, ExampleCreate, TutorialCreate, TutorialStep, PackageCreate,
    PackageClass, SearchResponse, LikeResponse, WizardStepResponse
)

__all__ = [
    "Wizard", "WizardStep",
    "PageCreate", "ExampleCreate", "TutorialCreate", "TutorialStep", "PackageCreate",
    "PackageClass", "SearchResponse", "LikeResponse", "WizardStepResponse"
]
