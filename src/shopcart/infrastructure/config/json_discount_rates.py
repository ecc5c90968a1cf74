"""JSON-file-backed discount rate overrides.

The file is a single object mapping category to rate, with rates written
as strings so they load as exact Decimals::

    {"Electronics": "0.20", "Toys": "0.30"}
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import DiscountRate


def load_discount_rates(file_path: Path) -> dict[str, Decimal]:
    """Read and validate a rates file; every rate must lie in [0, 1]."""
    if not file_path.exists():
        raise ValidationError(f"Rates file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Rates file {file_path} cannot be read: {exc}") from exc

    try:
        raw = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Rates file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"Rates file {file_path} must contain a JSON object")

    return {
        str(category): DiscountRate.of(rate).value
        for category, rate in raw.items()
    }
