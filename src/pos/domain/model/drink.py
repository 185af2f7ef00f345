"""Drink-pairing value objects: what was picked and what may be picked."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrinkSelection:
    """A drink chosen to accompany a liquor, with its unit count."""

    drink_name: str
    quantity: int = 1


@dataclass(frozen=True)
class DrinkOptions:
    """Allow-listed drinks and count limits for one liquor type."""

    available_options: tuple[str, ...]
    max_count: int
    min_count: int = 1
    allow_multiple: bool = False

    @staticmethod
    def none() -> DrinkOptions:
        return DrinkOptions((), max_count=0, min_count=0)

    @property
    def has_options(self) -> bool:
        return bool(self.available_options)

    def is_valid_option(self, drink_name: str) -> bool:
        return drink_name in self.available_options
