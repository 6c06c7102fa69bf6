"""Shared request field types with validation"""

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Any, Literal, Optional
from decimal import Decimal
import math

from zelvix.cart.pricing import MAX_MONEY, round_money
from zelvix.utils.validators import normalize_slug, normalize_text, sanitize_plain_text, validate_email_address

def _required_text(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, (dict, list)):
        return value
    return normalize_text(value)

def _not_empty(value: str) -> str:
    if not value:
        raise ValueError("cannot be empty")
    return value

def _optional_text(value: Any) -> Any:
    if value is None or isinstance(value, (dict, list)):
        return value
    text = normalize_text(value)
    return text or None

def _upper(value: Optional[str]) -> Optional[str]:
    return value.upper() if value else value

def _lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value

def _truncate(value: Any) -> Any:
    """Whole units; fractional input is cut toward zero"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (float, Decimal)):
        return math.trunc(value) if math.isfinite(float(value)) else value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return value
        return math.trunc(number) if math.isfinite(number) else value
    return value

RequiredText = Annotated[str, BeforeValidator(_required_text), AfterValidator(_not_empty)]
OptionalText = Annotated[Optional[str], BeforeValidator(_optional_text)]
UpperText = Annotated[Optional[str], BeforeValidator(_optional_text), AfterValidator(_upper)]
PositiveId = Annotated[int, Field(gt=0)]
Amount = Annotated[Decimal, Field(ge=0, le=MAX_MONEY), AfterValidator(round_money)]
Count = Annotated[int, BeforeValidator(_truncate), Field(ge=0)]
Status = Annotated[Literal["active", "inactive"], BeforeValidator(_lower)]
Email = Annotated[str, BeforeValidator(_required_text), AfterValidator(validate_email_address)]
Slug = Annotated[str, BeforeValidator(_required_text), AfterValidator(normalize_slug), AfterValidator(_not_empty)]
CleanText = Annotated[str, BeforeValidator(_required_text), AfterValidator(sanitize_plain_text), AfterValidator(_not_empty)]
OptionalCleanText = Annotated[Optional[str], BeforeValidator(_optional_text), AfterValidator(sanitize_plain_text)]

class RequestSchema(BaseModel):
    """Base for create/update payloads; unknown keys are ignored"""

    model_config = ConfigDict(extra="ignore")

    def present_fields(self) -> dict:
        """Fields the client actually sent"""
        return self.model_dump(include=self.model_fields_set, mode="python")
