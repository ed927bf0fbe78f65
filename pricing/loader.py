import json
import logging
import os
from functools import reduce
from typing import Dict, Iterable, Optional, Tuple

from .domain import PricingRule
from .errors import ValidationError
from .ftypes import Either

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "PRICING_RULES_PATH"
DEFAULT_RULES_PATH = "data/rules.json"


def rules_path() -> str:
    """Путь к файлу правил: переменная окружения или значение по умолчанию"""
    return os.getenv(RULES_PATH_ENV) or DEFAULT_RULES_PATH


def _field(raw: dict, *names):
    return next((raw[n] for n in names if n in raw), None)


def _sku_id(raw: dict) -> str:
    sku_id = _field(raw, "skuId", "sku_id")
    if sku_id is None or sku_id == "":
        rule_type = _field(raw, "type", "rule_type")
        message = f'Pricing rule of type {rule_type!r} is missing "skuId".'
        logger.warning("Rejected pricing rule: %s", message)
        raise ValidationError(message, sku_id="", rule_type=str(rule_type))
    return str(sku_id)


def parse_rule(raw: dict) -> PricingRule:
    """Одна запись конфигурации -> PricingRule (или ValidationError)"""
    return PricingRule(
        sku_id=_sku_id(raw),
        rule_type=_field(raw, "type", "rule_type"),
        definition=raw.get("definition") or {},
    )


def _try_parse(raw: dict) -> Either[dict, PricingRule]:
    try:
        return Either.right(parse_rule(raw))
    except ValidationError as e:
        return Either.left(e.to_dict())


def _raw_rules(data) -> Tuple[dict, ...]:
    if isinstance(data, dict):
        data = data.get("rules", [])
    return tuple(data)


def load_rules(path: Optional[str] = None) -> Tuple[PricingRule, ...]:
    """
    Загружает правила из JSON ({"rules": [...]} или просто список).
    Любое невалидное правило прерывает загрузку целиком.
    """
    path = path or rules_path()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    rules = tuple(map(parse_rule, _raw_rules(data)))
    logger.info("Loaded %d pricing rules from %s", len(rules), path)
    return rules


def check_rules(
    raw_rules: Iterable[dict],
) -> Tuple[Tuple[PricingRule, ...], Tuple[dict, ...]]:
    """
    Проверяет набор записей, не прерываясь на первой ошибке.
    Возвращает (валидные правила, ошибки в виде dict).
    """
    results = tuple(map(_try_parse, raw_rules))
    valid = tuple(r.value for r in results if r.is_right)
    errors = tuple(r.value for r in results if r.is_left)
    return valid, errors


def rules_by_sku(rules: Iterable[PricingRule]) -> Dict[str, PricingRule]:
    """Индекс SKU -> правило; у одного SKU может быть только одна политика"""

    def add(acc: dict, rule: PricingRule) -> dict:
        if rule.sku_id in acc:
            raise ValidationError(
                f"Duplicate pricing rule for SKU {rule.sku_id}.",
                sku_id=rule.sku_id,
                rule_type=rule.rule_type,
            )
        return {**acc, rule.sku_id: rule}

    return reduce(add, rules, {})
