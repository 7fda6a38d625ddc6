from typing import Dict, List, Any

from fastapi import APIRouter, Depends, HTTPException, status

from synapse_docs.api.http.deps import get_current_user, get_docs_service
from synapse_docs.db.repositories.user_repository import USERS_TABLE
from synapse_docs.domains.documentation.schemas import WizardStepResponse
from synapse_docs.domains.documentation.services import DocumentationService
from synapse_docs.domains.identity.entities import User
from synapse_docs.domains.identity.schemas import Token, UserLogin, UserResponse

router = APIRouter(prefix="/_admin", tags=["admin"])

# Поля, которые не выдаются во внутреннем API
HIDDEN_FIELDS = {USERS_TABLE: {"password_hash"}}


@router.post("/login", response_model=Token)
async def login(
    login_data: UserLogin,
    service: DocumentationService = Depends(get_docs_service)
):
    """Вход администратора"""
    token = service.identity.login_user(login_data)

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Token(access_token=token)


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    """Информация о текущем пользователе"""
    return current_user


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
):
    return service.identity.list_users()


@router.get("/tables")
async def list_tables(
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
) -> Dict[str, int]:
    """Таблицы хранилища и количество записей"""
    return {name: service.store.count(name) for name in service.store.tables()}


@router.get("/tables/{name}")
async def dump_table(
    name: str,
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
) -> Dict[str, Any]:
    """Содержимое таблицы хранилища"""
    if name not in service.store.tables():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Table not found"
        )

    hidden = HIDDEN_FIELDS.get(name, set())
    records = [
        {key: value for key, value in record.items() if key not in hidden}
        for record in service.store.dump(name)
    ]
    return {"table": name, "records": records}


@router.get("/templates")
async def list_templates(
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
) -> List[str]:
    return service.renderer.names()


@router.get("/templates/{name}")
async def get_template(
    name: str,
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
) -> Dict[str, str]:
    """Текст зарегистрированного шаблона"""
    try:
        template = service.renderer.get(name)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found"
        )
    return {"name": name, "template": template}


@router.get("/wizard", response_model=WizardStepResponse)
async def wizard_state(
    current_user: User = Depends(get_current_user),
    service: DocumentationService = Depends(get_docs_service)
):
    """Состояние мастера первых шагов"""
    return service.wizard_state()
