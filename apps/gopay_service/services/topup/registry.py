from __future__ import annotations

from typing import Iterable

from libs.common.constants import REGISTERED_PHONE_NUMBERS


class AllowListRegistry:
    """Read-only set of phone numbers registered with GoPay."""

    __slots__ = ("_numbers",)

    def __init__(self, numbers: Iterable[str]) -> None:
        self._numbers = frozenset(numbers)

    def is_registered(self, phone_number: str | None) -> bool:
        if not phone_number:
            return False
        return phone_number in self._numbers

    def __contains__(self, phone_number: object) -> bool:
        return isinstance(phone_number, str) and self.is_registered(phone_number)

    def __len__(self) -> int:
        return len(self._numbers)


def build_default_registry() -> AllowListRegistry:
    return AllowListRegistry(REGISTERED_PHONE_NUMBERS)
