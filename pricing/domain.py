import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Union

from .algorithms import (
    billed_units,
    combined_total,
    discount_total,
    reduced_price_total,
)
from .errors import ValidationError
from .ftypes import Either
from .validation import EXTERNAL_NAMES, validate_definition

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class RuleDefinition:
    quantity: Optional[Number] = None  # размер группы / порог
    discounted_quantity: Optional[Number] = None  # сколько штук оплачивается в группе
    bulk_price: Optional[Number] = None  # цена за штуку выше порога

    @staticmethod
    def from_dict(data: Optional[Mapping]) -> "RuleDefinition":
        """
        Собирает определение из словаря конфигурации.
        Понимает и quantity/discountedQuantity/bulkPrice, и snake_case;
        посторонние ключи игнорируются.
        """
        if not isinstance(data, Mapping):
            data = {}

        def pick(name: str):
            external = EXTERNAL_NAMES[name]
            return data[external] if external in data else data.get(name)

        return RuleDefinition(
            quantity=pick("quantity"),
            discounted_quantity=pick("discounted_quantity"),
            bulk_price=pick("bulk_price"),
        )


# тип правила -> (определение, count, price) -> total
_ALGORITHMS: Dict[str, Callable] = {
    "discount": lambda d, count, price: discount_total(
        count, price, d.quantity, d.discounted_quantity
    ),
    "reducedPrice": lambda d, count, price: reduced_price_total(
        count, price, d.quantity, d.bulk_price
    ),
    "both": lambda d, count, price: combined_total(
        count, price, d.quantity, d.discounted_quantity, d.bulk_price
    ),
}


@dataclass(frozen=True)
class PricingRule:
    """
    Правило ценообразования для одного SKU.
    Валидируется один раз при создании и дальше не меняется;
    невалидный экземпляр создать нельзя.
    """

    sku_id: str
    rule_type: str  # "discount" | "reducedPrice" | "both"
    definition: RuleDefinition

    def __post_init__(self):
        if not isinstance(self.definition, RuleDefinition):
            object.__setattr__(
                self, "definition", RuleDefinition.from_dict(self.definition)
            )
        validate_definition(self.sku_id, self.rule_type, self.definition)
        logger.debug(
            "Pricing rule created: sku=%s type=%s %s",
            self.sku_id,
            self.rule_type,
            self.definition,
        )

    @staticmethod
    def create(
        sku_id: str, rule_type: str, definition
    ) -> Either[dict, "PricingRule"]:
        """Создание без исключений: Right(rule) или Left({"error": ...})"""
        try:
            return Either.right(PricingRule(sku_id, rule_type, definition))
        except ValidationError as e:
            return Either.left(e.to_dict())

    def apply(self, count: int, price):
        """Итоговая сумма за count штук при обычной цене price"""
        return _ALGORITHMS[self.rule_type](self.definition, count, price)

    def billed_units(self, count: int) -> int:
        if self.rule_type == "reducedPrice":
            return count
        return billed_units(
            count, self.definition.quantity, self.definition.discounted_quantity
        )
