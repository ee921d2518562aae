# product_api/core.py
import math
import re
import secrets
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import ValidationError
from .models import ProductIn

# ---------------------------
# Validation gate
# ---------------------------
# A field passes only when its value is present, truthy and of the expected
# type. Falsy values count as missing, so price 0 and inStock false fail.


def _is_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        # NaN and the infinities count as missing
        return False
    return bool(value)


def _is_true_bool(value: Any) -> bool:
    return value is True


VALIDATION_RULES: List[Tuple[str, Callable[[Any], bool]]] = [
    ("name", _is_str),
    ("description", _is_str),
    ("price", _is_number),
    ("category", _is_str),
    ("inStock", _is_true_bool),
]


@dataclass
class ValidationOutcome:
    product: Optional[ProductIn] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.field is None

    @property
    def message(self) -> Optional[str]:
        if self.field is None:
            return None
        return f"Invalid or missing Product {self.field}"


def validate_product(payload: Any) -> ValidationOutcome:
    if not isinstance(payload, dict):
        payload = {}
    for field, check in VALIDATION_RULES:
        if not check(payload.get(field)):
            return ValidationOutcome(field=field)
    product = ProductIn(
        name=payload["name"],
        description=payload["description"],
        price=payload["price"],
        category=payload["category"],
        in_stock=payload["inStock"],
    )
    return ValidationOutcome(product=product)


# ---------------------------
# Access guard
# ---------------------------
def authenticate(presented_key: Optional[str], configured_key: Optional[str]) -> bool:
    if not presented_key or not configured_key:
        return False
    return secrets.compare_digest(presented_key.encode("utf-8"), configured_key.encode("utf-8"))


# ---------------------------
# Query helpers
# ---------------------------
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_param(name: str, raw: Any, default: int) -> int:
    """Coerce a query parameter by its leading integer, so "2abc" reads as 2."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        raise ValidationError(f"Query parameter '{name}' must be an integer")
    try:
        return int(match.group(1))
    except ValueError as e:
        # longer than the interpreter will convert
        raise ValidationError(f"Query parameter '{name}' is out of range") from e


def paginate(items: List[Any], page: int, limit: int) -> List[Any]:
    if page < 1 or limit < 1:
        return []
    start = (page - 1) * limit
    return items[start:start + limit]


def count_by_category(categories: List[str]) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for category in categories:
        key = category.lower()
        stats[key] = stats.get(key, 0) + 1
    return stats
