import sys
import os
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pricing.domain import PricingRule
from pricing.loader import load_rules, rules_path
from pricing.logger import setup_logging
from pricing.validation import RULE_TYPES, REQUIRED_FIELDS, RULE_LABELS

setup_logging()


# ============ Кэширование данных ============
@st.cache_data
def get_rules():
    return load_rules(rules_path())


# ============ Инициализация ============
st.set_page_config(
    page_title="Pricing Rules",
    page_icon="🏷️",
    layout="wide",
    initial_sidebar_state="expanded",
)


def format_price(value) -> str:
    return f"{value:.2f}"


def totals_table(rule: PricingRule, price: float, max_count: int) -> list:
    """Таблица итогов для count = 0..max_count"""
    return [
        {
            "count": count,
            "billed units": rule.billed_units(count),
            "regular total": format_price(count * price),
            "rule total": format_price(rule.apply(count, price)),
        }
        for count in range(max_count + 1)
    ]


st.title("🏷️ Правила ценообразования SKU")

with st.sidebar:
    st.header("📂 Навигация")
    page = st.radio(
        "Выберите раздел:",
        ["🧮 Калькулятор", "📋 Правила из файла"],
        label_visibility="collapsed",
    )


# ============ PAGE: КАЛЬКУЛЯТОР ============
if page == "🧮 Калькулятор":
    st.header("🧮 Проверка правила")

    col1, col2 = st.columns(2)
    with col1:
        sku_id = st.text_input("SKU", "sku-1", key="calc_sku")
        rule_type = st.selectbox(
            "Тип правила",
            RULE_TYPES,
            format_func=lambda t: RULE_LABELS[t],
            key="calc_type",
        )
        price = st.number_input(
            "Обычная цена", min_value=0.0, value=10.0, key="calc_price"
        )
        max_count = st.slider("Количество до", 1, 50, 12, key="calc_count")

    with col2:
        required = REQUIRED_FIELDS[rule_type]
        definition = {}
        if "quantity" in required:
            definition["quantity"] = st.number_input(
                "quantity", min_value=0, value=3, step=1, key="calc_q"
            )
        if "discounted_quantity" in required:
            definition["discountedQuantity"] = st.number_input(
                "discountedQuantity", min_value=0, value=2, step=1, key="calc_dq"
            )
        if "bulk_price" in required:
            definition["bulkPrice"] = st.number_input(
                "bulkPrice", min_value=0.0, value=5.0, key="calc_bulk"
            )

    st.divider()

    result = PricingRule.create(sku_id, rule_type, definition)
    if result.is_left:
        st.error(f"❌ {result.value['error']}")
    else:
        rule = result.value
        st.success(f"✅ Правило для {rule.sku_id} валидно")
        st.dataframe(totals_table(rule, price, max_count), use_container_width=True)


# ============ PAGE: ПРАВИЛА ИЗ ФАЙЛА ============
elif page == "📋 Правила из файла":
    st.header("📋 Загруженные правила")
    st.caption(f"Файл: `{rules_path()}`")

    rules = get_rules()
    st.metric("Правил", len(rules))

    count = st.number_input("Количество", min_value=0, value=5, key="file_count")
    price = st.number_input("Обычная цена", min_value=0.0, value=10.0, key="file_price")

    for rule in rules:
        cols = st.columns([2, 2, 4, 2])
        with cols[0]:
            st.write(f"**{rule.sku_id}**")
        with cols[1]:
            st.write(RULE_LABELS[rule.rule_type])
        with cols[2]:
            st.caption(str(rule.definition))
        with cols[3]:
            st.write(format_price(rule.apply(count, price)))
