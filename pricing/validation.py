import logging
import math
import numbers
from decimal import Decimal
from typing import Dict, Tuple

from .errors import ValidationError

logger = logging.getLogger(__name__)

RULE_TYPES: Tuple[str, ...] = ("discount", "reducedPrice", "both")

# имя поля в RuleDefinition -> имя во внешней конфигурации
EXTERNAL_NAMES: Dict[str, str] = {
    "quantity": "quantity",
    "discounted_quantity": "discountedQuantity",
    "bulk_price": "bulkPrice",
}

REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "discount": ("quantity", "discounted_quantity"),
    "reducedPrice": ("quantity", "bulk_price"),
    "both": ("quantity", "discounted_quantity", "bulk_price"),
}

RULE_LABELS: Dict[str, str] = {
    "discount": "discount",
    "reducedPrice": "reduced price",
    "both": "combined",
}


def is_number(value) -> bool:
    """bool — подкласс int, но числом в конфигурации не считается"""
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _is_finite(value) -> bool:
    # NaN и бесконечность не сравниваются безопасно (Decimal("NaN") >= 0 бросает)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def _is_whole(value) -> bool:
    # без float(): большие int и Decimal сравниваются точно
    return value == math.floor(value)


def _quoted(names: Tuple[str, ...]) -> str:
    return ", ".join(f'"{EXTERNAL_NAMES[n]}"' for n in names)


def _fail(message: str, sku_id: str, rule_type: str, fields: Tuple[str, ...]):
    required = REQUIRED_FIELDS[rule_type] if rule_type in RULE_TYPES else ()
    expected = tuple(EXTERNAL_NAMES[n] for n in required)
    logger.warning("Rejected pricing rule for SKU %s: %s", sku_id, message)
    raise ValidationError(
        message,
        sku_id=sku_id,
        rule_type=rule_type,
        expected=expected,
        fields=tuple(EXTERNAL_NAMES[n] for n in fields),
    )


def _range_errors(rule_type: str, definition) -> Tuple[Tuple[str, str], ...]:
    """
    Проверка диапазонов для уже числовых полей.
    Размер группы (quantity) для discount/both — целое >= 1,
    иначе apply делил бы на ноль.
    """
    problems = []
    quantity = definition.quantity

    if rule_type in ("discount", "both"):
        if not (_is_finite(quantity) and quantity >= 1 and _is_whole(quantity)):
            problems.append(("quantity", "an integer >= 1"))
    elif not (_is_finite(quantity) and quantity >= 0):
        problems.append(("quantity", "a number >= 0"))

    if "discounted_quantity" in REQUIRED_FIELDS[rule_type]:
        dq = definition.discounted_quantity
        if not (_is_finite(dq) and dq >= 0 and _is_whole(dq)):
            problems.append(("discounted_quantity", "an integer >= 0"))

    if "bulk_price" in REQUIRED_FIELDS[rule_type]:
        bulk_price = definition.bulk_price
        if not (_is_finite(bulk_price) and bulk_price >= 0):
            problems.append(("bulk_price", "a number >= 0"))

    return tuple(problems)


def validate_definition(sku_id: str, rule_type: str, definition) -> None:
    """
    Проверяет определение правила для заданного типа.
    Ничего не возвращает; при ошибке бросает ValidationError
    с SKU, типом правила и списком ожидаемых полей.
    """
    if rule_type not in RULE_TYPES:
        _fail(
            f"Unknown rule type {rule_type!r} for SKU {sku_id}. "
            f"Expected one of: {', '.join(RULE_TYPES)}.",
            sku_id,
            str(rule_type),
            (),
        )

    required = REQUIRED_FIELDS[rule_type]
    label = RULE_LABELS[rule_type]

    invalid = tuple(n for n in required if not is_number(getattr(definition, n)))
    if invalid:
        _fail(
            f"Invalid definition for {label} rule on SKU {sku_id}. "
            f"Expected {_quoted(required)} to be numbers.",
            sku_id,
            rule_type,
            invalid,
        )

    out_of_range = _range_errors(rule_type, definition)
    if out_of_range:
        details = "; ".join(
            f'"{EXTERNAL_NAMES[name]}" must be {what}' for name, what in out_of_range
        )
        _fail(
            f"Invalid definition for {label} rule on SKU {sku_id}: {details}. "
            f"Expected {_quoted(required)}.",
            sku_id,
            rule_type,
            tuple(name for name, _ in out_of_range),
        )
