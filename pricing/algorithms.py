# Чистая арифметика правил ценообразования.
# Функции ничего не проверяют: параметры уже провалидированы при создании правила.


def billed_units(count: int, quantity: int, discounted_quantity: int) -> int:
    """
    Количество оплачиваемых единиц после мультибай-скидки.
    Каждая полная группа из quantity штук оплачивается как discounted_quantity,
    остаток вне группы — полностью.

    Пример (3 за 2): count=7 -> 2 группы * 2 + 1 = 5
    """
    groups, leftover = divmod(count, quantity)
    return int(groups * discounted_quantity + leftover)


def discount_total(count: int, price, quantity: int, discounted_quantity: int):
    """Мультибай: billed_units * price"""
    return billed_units(count, quantity, discounted_quantity) * price


def reduced_price_total(count: int, price, quantity, bulk_price):
    """
    Оптовая цена применяется ко ВСЕМ единицам, если count строго больше порога.
    count == quantity -> обычная цена.
    """
    if count > quantity:
        return count * bulk_price
    return count * price


def combined_total(
    count: int, price, quantity: int, discounted_quantity: int, bulk_price
):
    """
    Сначала мультибай, затем порог оптовой цены.
    Порог сравнивается с оплачиваемыми (billed) единицами, а не с исходным count.
    """
    billed = billed_units(count, quantity, discounted_quantity)
    if billed > quantity:
        return billed * bulk_price
    return billed * price
