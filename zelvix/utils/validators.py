"""Custom validators and sanitizers"""

import math
import os
import re
from decimal import Decimal
from typing import Any, Optional

import bleach
from email_validator import validate_email, EmailNotValidError
from slugify import slugify

STATUS_VALUES = ("active", "inactive")

def normalize_text(value: Any) -> str:
    """Trimmed string form of a request or spreadsheet value"""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            # Spreadsheet cells store 560001 as 560001.0
            return str(int(value))
    return str(value).strip()

def parse_positive_int(value: Any) -> Optional[int]:
    """Integer greater than zero, or None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(float(value)) or int(value) != value:
            return None
        number = int(value)
        return number if number > 0 else None

    text = normalize_text(value)
    if not re.fullmatch(r"\d+(\.0+)?", text):
        return None
    number = int(text.split(".")[0])
    return number if number > 0 else None

def parse_bool(value: Any) -> Optional[bool]:
    """Lenient boolean for query strings"""
    if isinstance(value, bool):
        return value
    text = normalize_text(value).lower()
    if text in ("true", "1", "yes"):
        return True
    if text in ("false", "0", "no"):
        return False
    return None

def parse_status(value: Any, default: Optional[str] = None) -> Optional[str]:
    status = normalize_text(value).lower()
    return status if status in STATUS_VALUES else default

def normalize_header(value: Any) -> str:
    """Column header key: lowercase with spaces, dashes and underscores unified"""
    return re.sub(r"[\s_\-]+", "_", normalize_text(value).lower())

def validate_email_address(email: str) -> str:
    """Validate and normalize email"""
    email = email.strip().lower()

    try:
        validation = validate_email(email, check_deliverability=False)
        return validation.normalized
    except EmailNotValidError as e:
        raise ValueError(str(e))

def sanitize_plain_text(text: Optional[str], max_length: int = 5000) -> Optional[str]:
    """Strip every HTML tag from user supplied text"""
    if text is None:
        return None
    cleaned = bleach.clean(text.replace("\x00", ""), tags=[], strip=True)
    return cleaned.strip()[:max_length]

def normalize_slug(value: str) -> str:
    return slugify(value or "")

def sanitize_filename(filename: str, fallback: str = "file") -> str:
    """
    Storage-safe file name: slugified base with the lowercased extension

    'My Photo (1).PNG' -> 'my-photo-1.png'
    """
    filename = os.path.basename((filename or "").replace("\\", "/"))
    base, ext = os.path.splitext(filename)
    base = slugify(base)[:100] or fallback
    ext = re.sub(r"[^a-z0-9.]", "", ext.lower())
    return f"{base}{ext}"
