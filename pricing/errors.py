from typing import Tuple


class ValidationError(ValueError):
    """
    Ошибка конфигурации правила ценообразования.
    Бросается только при создании правила: неизвестный тип
    или отсутствующие / нечисловые / некорректные поля.
    """

    def __init__(
        self,
        message: str,
        sku_id: str,
        rule_type: str,
        expected: Tuple[str, ...] = (),
        fields: Tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.sku_id = sku_id
        self.rule_type = rule_type
        self.expected = tuple(expected)
        self.fields = tuple(fields)

    def to_dict(self) -> dict:
        """Представление ошибки для Either.left / отчётов"""
        return {
            "error": str(self),
            "sku_id": self.sku_id,
            "rule_type": self.rule_type,
            "expected": list(self.expected),
        }
