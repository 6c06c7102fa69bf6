"""
Authentication schemas for request/response validation
"""

from pydantic import BaseModel, BeforeValidator, ConfigDict
from typing import Annotated, Any

def _as_text(value: Any) -> str:
    return "" if value is None else str(value)

LooseText = Annotated[str, BeforeValidator(_as_text)]

class Credentials(BaseModel):
    """Email and password; checked by the service so errors carry exact messages"""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"email": "customer@example.com", "password": "secret1"}},
    )

    email: LooseText = ""
    password: LooseText = ""

class RegisterRequest(Credentials):
    name: LooseText = ""

class LoginRequest(Credentials):
    pass

class SessionUser(BaseModel):
    id: int
    email: str
    role: str
