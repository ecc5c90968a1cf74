"""Tests for loading discount overrides from JSON and wiring them up."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.config.json_discount_rates import load_discount_rates


class TestLoadDiscountRates:

    def test_reads_string_and_number_rates(self, tmp_path):
        path = tmp_path / "rates.json"
        path.write_text('{"Electronics": "0.20", "Toys": 0.3}', encoding="utf-8")
        assert load_discount_rates(path) == {
            "Electronics": Decimal("0.20"),
            "Toys": Decimal("0.3"),
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="not found"):
            load_discount_rates(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rates.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            load_discount_rates(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "rates.json"
        path.write_bytes(b'{"Books": "0.\xff"}')
        with pytest.raises(ValidationError, match="cannot be read"):
            load_discount_rates(path)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ValidationError, match="cannot be read"):
            load_discount_rates(tmp_path)

    def test_must_be_object(self, tmp_path):
        path = tmp_path / "rates.json"
        path.write_text('["Books", 0.1]', encoding="utf-8")
        with pytest.raises(ValidationError, match="JSON object"):
            load_discount_rates(path)

    def test_out_of_range_rate(self, tmp_path):
        path = tmp_path / "rates.json"
        path.write_text('{"Books": "1.5"}', encoding="utf-8")
        with pytest.raises(ValidationError, match="Discount rate"):
            load_discount_rates(path)


class TestBootstrapDiscountService:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(bootstrap.RATES_FILE_ENV, raising=False)
        assert bootstrap.discount_service().rate_for("Electronics") == Decimal("0.10")

    def test_file_then_overrides(self, tmp_path, monkeypatch):
        monkeypatch.delenv(bootstrap.RATES_FILE_ENV, raising=False)
        path = tmp_path / "rates.json"
        path.write_text('{"Electronics": "0.20", "Books": "0.25"}', encoding="utf-8")

        service = bootstrap.discount_service(rates_file=path, overrides={"books": "0.40"})

        assert service.rate_for("Electronics") == Decimal("0.20")
        assert service.rate_for("Books") == Decimal("0.40")
        assert service.rate_for("Clothing") == Decimal("0.15")

    def test_env_var_rates_file(self, tmp_path, monkeypatch):
        path = tmp_path / "rates.json"
        path.write_text('{"Food": "0.05"}', encoding="utf-8")
        monkeypatch.setenv(bootstrap.RATES_FILE_ENV, str(path))

        assert bootstrap.discount_service().rate_for("Food") == Decimal("0.05")
