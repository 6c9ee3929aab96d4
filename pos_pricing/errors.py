from __future__ import annotations

from typing import Optional


class PricingError(Exception):
    pass


class UnknownItem(PricingError, KeyError):
    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class UnsupportedSpecialType(PricingError, TypeError):
    def __init__(self, special_type: str):
        self.special_type = special_type
        super().__init__(f"Special type [{special_type}] not currently supported")


class InvalidSpecialParameters(PricingError, ValueError):
    def __init__(self, message: str, item_id: Optional[str] = None):
        self.item_id = item_id
        super().__init__(message if item_id is None else f"{message} (item={item_id})")
