# catalog_core/schemas/actor.py
from enum import Enum
from uuid import UUID
from pydantic import BaseModel, Field

from catalog_core.core.config import settings


class Role(str, Enum):
    ADMIN = "ADMIN"
    VENDOR = "VENDOR"
    USER = "USER"


class Actor(BaseModel):
    """Identity of the user performing a mutation, passed explicitly into guards"""

    id: UUID = Field(..., description="Authenticated user ID")
    role: Role = Field(Role.USER, description="Role granted to the user")

    @property
    def is_elevated(self) -> bool:
        return self.role.value in settings.elevated_roles
