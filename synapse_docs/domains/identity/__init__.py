from synapse_docs.domains.identity.entities import User
from synapse_docs.domains.identity.schemas import (
    UserBase, UserCreate, UserLogin, UserResponse, Token
)

__all__ = [
    "User",
    "UserBase", "UserCreate", "UserLogin", "UserResponse", "Token"
]
