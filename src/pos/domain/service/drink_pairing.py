"""Domain service: Drink Pairing.

Decides which drinks, and how many, may accompany a liquor.  The rules are
a fixed table keyed by liquor type.  A selection passes through the checks
in order (required-ness, liquor-specific rules, count limits, allow-list,
cross-drink compatibility) and the first failing check decides the result.

Business violations are never raised: every check returns a
ValidationResult so the caller decides how to present a rejection.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import structlog

from pos.domain.exceptions import RuleViolationError
from pos.domain.model.drink import DrinkOptions, DrinkSelection
from pos.domain.model.order_item import Customization, CustomizationKind, drink_selection_from
from pos.domain.model.product import Product
from pos.domain.model.validation import ValidationResult
from pos.domain.service import product_classifier as classifier

logger = structlog.get_logger(__name__)

RULE_NO_DRINKS = "no_drinks"
RULE_NO_CITRUS = "no_citrus"

BOTTLE_RULE_KEY = "BOTELLA"
DEFAULT_RULE_KEY = classifier.LIQUOR_TYPE_DEFAULT

CITRUS_MARKERS = ("NARANJA", "LIMON", "LIMA")
JUICE_MARKERS = ("JUGO",)
SODA_MARKERS = ("COCA", "SPRITE", "REFRESCO")


@dataclass(frozen=True)
class DrinkRule:
    allowed_drinks: tuple[str, ...]
    max_drinks: int
    min_drinks: int = 1
    allow_multiple: bool = False
    special_rules: tuple[str, ...] = field(default_factory=tuple)

    def to_options(self) -> DrinkOptions:
        return DrinkOptions(
            available_options=self.allowed_drinks,
            max_count=self.max_drinks,
            min_count=self.min_drinks,
            allow_multiple=self.allow_multiple,
        )


_MIXERS = ("Coca Cola", "Sprite", "Agua Mineral", "Hielos")

DRINK_RULES: dict[str, DrinkRule] = {
    "RON": DrinkRule(_MIXERS, max_drinks=2, special_rules=(RULE_NO_CITRUS,)),
    "TEQUILA": DrinkRule(
        ("Coca Cola", "Sprite", "Agua Mineral", "Jugo de Naranja", "Hielos"),
        max_drinks=2,
    ),
    "VODKA": DrinkRule(
        (
            "Coca Cola",
            "Sprite",
            "Jugo de Naranja",
            "Jugo de Arándano",
            "Agua Mineral",
            "Hielos",
        ),
        max_drinks=2,
    ),
    "WHISKY": DrinkRule(_MIXERS, max_drinks=2),
    "JAGERMEISTER": DrinkRule(
        (), max_drinks=0, min_drinks=0, special_rules=(RULE_NO_DRINKS,)
    ),
    BOTTLE_RULE_KEY: DrinkRule(
        ("Coca Cola", "Sprite", "Agua Mineral", "Jugo de Naranja", "Hielos"),
        max_drinks=4,
        min_drinks=2,
        allow_multiple=True,
    ),
    DEFAULT_RULE_KEY: DrinkRule(_MIXERS, max_drinks=2),
}


def _contains_any(name: str, markers: Iterable[str]) -> bool:
    folded = classifier.fold(name)
    return any(marker in folded for marker in markers)


class DrinkPairingEngine:

    def __init__(self, rules: dict[str, DrinkRule] | None = None) -> None:
        self._rules = dict(rules) if rules is not None else dict(DRINK_RULES)

    # --- Lookups --------------------------------------------------------------

    def rule_key_for(self, product: Product) -> str:
        """Table key governing *product*: its liquor type, or DEFAULT."""
        kind = classifier.liquor_type(product)
        return kind if kind in self._rules else DEFAULT_RULE_KEY

    def _rule_for(self, product: Product) -> DrinkRule:
        return self._rules[self.rule_key_for(product)]

    def get_rules_for_liquor_type(self, liquor_type: str) -> DrinkOptions:
        rule = self._rules.get(liquor_type.upper(), self._rules[DEFAULT_RULE_KEY])
        return rule.to_options()

    def get_available_options(self, product: Product) -> DrinkOptions:
        if not classifier.requires_drink_selection(product):
            return DrinkOptions.none()
        return self._rule_for(product).to_options()

    def requires_drink_selection(self, product: Product) -> bool:
        return classifier.requires_drink_selection(product)

    def get_max_drink_limit(self, product: Product) -> int:
        if not classifier.requires_drink_selection(product):
            return 0
        return self._rule_for(product).max_drinks

    def get_min_drink_limit(self, product: Product) -> int:
        if not classifier.requires_drink_selection(product):
            return 0
        return self._rule_for(product).min_drinks

    def allows_multiple_drinks(self, product: Product) -> bool:
        if not classifier.requires_drink_selection(product):
            return False
        return self._rule_for(product).allow_multiple

    # --- Validation -----------------------------------------------------------

    def validate_drink_selection(
        self, product: Product, selections: Sequence[DrinkSelection]
    ) -> ValidationResult:
        log = logger.bind(product=product.name, drinks=len(selections))

        # 1. Only pairing liquors accept drinks at all
        if not classifier.requires_drink_selection(product):
            if selections:
                return self._reject(log, "This product does not allow drink selection")
            return ValidationResult.success()

        rule = self._rule_for(product)
        warnings: list[str] = []
        if self.rule_key_for(product) == DEFAULT_RULE_KEY:
            warnings.append(
                f"{product.name} has no specific pairing rules; default rules apply"
            )

        # 2. Liquor-specific prohibitions
        special = self._check_special_rules(rule, selections)
        if not special.is_valid:
            return self._reject(log, special.error_message, warnings)

        # 3. Count limits
        total = sum(selection.quantity for selection in selections)
        if total < rule.min_drinks:
            return self._reject(
                log, f"You must select at least {rule.min_drinks} drink(s)", warnings
            )
        if total > rule.max_drinks:
            return self._reject(
                log, f"You cannot select more than {rule.max_drinks} drink(s)", warnings
            )

        # 4. Allow-list and per-drink quantity
        for selection in selections:
            if selection.drink_name not in rule.allowed_drinks:
                return self._reject(
                    log, f"Drink not available: {selection.drink_name}", warnings
                )
            if selection.quantity <= 0:
                return self._reject(
                    log,
                    f"Quantity must be greater than zero for: {selection.drink_name}",
                    warnings,
                )

        if not rule.allow_multiple:
            units: Counter[str] = Counter()
            for selection in selections:
                units[selection.drink_name] += selection.quantity
            warnings.extend(
                f"{name} selected more than once; this liquor is usually "
                "paired with different drinks"
                for name, count in units.items()
                if count > 1
            )

        # 5. Cross-drink compatibility
        compatibility = self._check_compatibility(selections)
        if not compatibility.is_valid:
            return self._reject(log, compatibility.error_message, warnings)

        return ValidationResult.success().with_warnings(*warnings)

    def validate_drink_compatibility(
        self, product: Product, drink_name: str
    ) -> ValidationResult:
        """Check one drink against a product, for incremental selection."""
        # Special rules are checked before the allow-list, as in the full gate.
        if not classifier.requires_drink_selection(product):
            return ValidationResult.failure("This product does not allow drink selection")
        special = self._check_special_rules(
            self._rule_for(product), [DrinkSelection(drink_name, 1)]
        )
        if not special.is_valid:
            return special
        if drink_name not in self._rule_for(product).allowed_drinks:
            return ValidationResult.failure(
                f"Drink not compatible with this product: {drink_name}"
            )
        return ValidationResult.success()

    def validate_customizations(
        self, product: Product, customizations: Iterable[Customization]
    ) -> ValidationResult:
        """Run the full selection gate over an item's drink customizations."""
        try:
            selections = [
                drink_selection_from(c)
                for c in customizations
                if c.kind is CustomizationKind.DRINK
            ]
        except RuleViolationError as exc:
            return exc.result
        return self.validate_drink_selection(product, selections)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_special_rules(
        rule: DrinkRule, selections: Sequence[DrinkSelection]
    ) -> ValidationResult:
        for tag in rule.special_rules:
            if tag == RULE_NO_DRINKS and selections:
                return ValidationResult.failure(
                    "Jägermeister is served alone, without accompanying drinks"
                )
            if tag == RULE_NO_CITRUS and any(
                _contains_any(s.drink_name, CITRUS_MARKERS) for s in selections
            ):
                return ValidationResult.failure("Rum cannot be mixed with citrus juices")
        return ValidationResult.success()

    @staticmethod
    def _check_compatibility(selections: Sequence[DrinkSelection]) -> ValidationResult:
        has_juice = any(_contains_any(s.drink_name, JUICE_MARKERS) for s in selections)
        has_soda = any(_contains_any(s.drink_name, SODA_MARKERS) for s in selections)
        if has_juice and has_soda:
            return ValidationResult.failure("Juices cannot be mixed with sodas")
        return ValidationResult.success()

    @staticmethod
    def _reject(
        log: structlog.stdlib.BoundLogger,
        message: str | None,
        warnings: list[str] | None = None,
    ) -> ValidationResult:
        log.info("drink_pairing.rejected", reason=message)
        return ValidationResult.failure(message or "Invalid drink selection").with_warnings(
            *(warnings or [])
        )
