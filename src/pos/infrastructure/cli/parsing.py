"""Option parsing shared by the CLI command modules."""

from __future__ import annotations

import click

from pos.domain.model.drink import DrinkSelection


def parse_drinks(raw: tuple[str, ...]) -> tuple[DrinkSelection, ...]:
    """Parse repeated ``--drink 'Coca Cola:2'`` values; the count defaults to 1."""
    selections: list[DrinkSelection] = []
    for entry in raw:
        entry = entry.strip()
        if ":" not in entry:
            selections.append(DrinkSelection(entry, 1))
            continue
        name, qty_str = entry.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for drink '{name}'."
            )
        selections.append(DrinkSelection(name.strip(), qty))
    return tuple(selections)
