from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from synapse_docs.domains.documentation.services import DocumentationService
from synapse_docs.domains.identity.entities import User

security = HTTPBearer()


def get_docs_service(request: Request) -> DocumentationService:
    """Зависимость для получения сервиса документации приложения"""
    return request.app.state.docs_service


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    service: DocumentationService = Depends(get_docs_service)
) -> User:
    """Зависимость для получения текущего пользователя"""
    user = service.identity.get_current_user_from_token(credentials.credentials)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
