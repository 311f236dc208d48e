"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов checkout API:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (exclusiveMinimum/enum/additionalProperties)
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from src.checkout import CheckoutService
from src.core.contracts import (
    CheckoutQuoteValidator,
    OrderRequestValidator,
    SchemaLoader,
    get_schema_loader,
    validate_checkout_quote,
    validate_order_request,
)
from src.core.domain import OrderContext, PaymentMethod


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_order_request():
    """Валидный order_request для тестирования."""
    return {"amount": 100.0, "is_first_order": True, "method": "credit_card"}


@pytest.fixture
def valid_checkout_quote():
    """Валидный checkout_quote для тестирования."""
    return {
        "base_amount": 30.0,
        "is_first_order": False,
        "method": "cash",
        "discount_multiplier": 1.0,
        "discounted_amount": 30.0,
        "tax_amount": 4.5,
        "final_amount": 34.5,
        "delivery_fee": 5.0,
        "total": 39.5,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    @pytest.mark.parametrize("schema_name", ["order_request", "checkout_quote"])
    def test_schema_loads(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)

        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["type"] == "object"

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()

        assert loader.load_schema("order_request") is loader.load_schema("order_request")

    def test_shared_loader(self) -> None:
        assert get_schema_loader() is get_schema_loader()

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_payment_method_enum_matches_schema(self) -> None:
        """Enum в схемах совпадает с PaymentMethod"""
        loader = SchemaLoader()
        expected = sorted(m.value for m in PaymentMethod)

        for schema_name in ("order_request", "checkout_quote"):
            schema = loader.load_schema(schema_name)
            assert sorted(schema["properties"]["method"]["enum"]) == expected


# =============================================================================
# ORDER REQUEST
# =============================================================================


class TestOrderRequestContract:
    """Тесты для order_request контракта"""

    def test_valid(self, valid_order_request) -> None:
        validate_order_request(valid_order_request)
        assert OrderRequestValidator().is_valid(valid_order_request)

    def test_is_first_order_optional(self, valid_order_request) -> None:
        del valid_order_request["is_first_order"]
        validate_order_request(valid_order_request)

    @pytest.mark.parametrize("field", ["amount", "method"])
    def test_required_fields(self, valid_order_request, field: str) -> None:
        del valid_order_request[field]

        with pytest.raises(ValidationError, match=f"'{field}' is a required property"):
            validate_order_request(valid_order_request)

    @pytest.mark.parametrize("amount", [0, -0.01])
    def test_amount_must_be_positive(self, valid_order_request, amount: float) -> None:
        valid_order_request["amount"] = amount

        with pytest.raises(ValidationError):
            validate_order_request(valid_order_request)

    @pytest.mark.parametrize("amount", ["100", None, True])
    def test_amount_type(self, valid_order_request, amount) -> None:
        valid_order_request["amount"] = amount

        with pytest.raises(ValidationError):
            validate_order_request(valid_order_request)

    def test_unknown_method(self, valid_order_request) -> None:
        valid_order_request["method"] = "CREDIT_CARD"

        with pytest.raises(ValidationError):
            validate_order_request(valid_order_request)

    def test_additional_properties(self, valid_order_request) -> None:
        valid_order_request["currency"] = "USD"

        with pytest.raises(ValidationError):
            validate_order_request(valid_order_request)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(OrderRequestValidator().iter_errors({"amount": -1, "method": "gold"}))

        assert len(errors) == 2

    def test_order_context_dump_matches_contract(self) -> None:
        order = OrderContext(base_amount=55.0, is_first_order=True, method=PaymentMethod.CASH)
        payload = order.model_dump(mode="json")

        validate_order_request(
            {"amount": payload["base_amount"], "is_first_order": payload["is_first_order"], "method": payload["method"]}
        )


# =============================================================================
# CHECKOUT QUOTE
# =============================================================================


class TestCheckoutQuoteContract:
    """Тесты для checkout_quote контракта"""

    def test_valid(self, valid_checkout_quote) -> None:
        validate_checkout_quote(valid_checkout_quote)
        assert CheckoutQuoteValidator().is_valid(valid_checkout_quote)

    def test_required_total(self, valid_checkout_quote) -> None:
        del valid_checkout_quote["total"]

        with pytest.raises(ValidationError, match="'total' is a required property"):
            validate_checkout_quote(valid_checkout_quote)

    def test_negative_fee(self, valid_checkout_quote) -> None:
        valid_checkout_quote["delivery_fee"] = -5.0

        with pytest.raises(ValidationError):
            validate_checkout_quote(valid_checkout_quote)

    def test_multiplier_above_one(self, valid_checkout_quote) -> None:
        valid_checkout_quote["discount_multiplier"] = 1.1

        with pytest.raises(ValidationError):
            validate_checkout_quote(valid_checkout_quote)

    @pytest.mark.parametrize(
        "amount, is_first_order, method",
        [
            (0.01, False, PaymentMethod.CASH),
            (46.0, True, PaymentMethod.CASH),
            (999999.99, True, PaymentMethod.CREDIT_CARD),
            (60.0, False, PaymentMethod.PAYPAL),
        ],
    )
    def test_service_quotes_match_contract(self, amount, is_first_order, method) -> None:
        quote = CheckoutService().quote(amount, is_first_order, method)

        validate_checkout_quote(quote.model_dump(mode="json"))
