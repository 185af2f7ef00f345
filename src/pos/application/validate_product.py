"""Application service: Validate Product use case (query).

Checks a prospective selection without touching the order, collecting
every error and warning instead of stopping at the first one.  Used to
give the register immediate feedback while a product is being configured.
"""

from __future__ import annotations

from pos.application.dto import ProductInfoDTO, ProductValidationDTO
from pos.domain.model.drink import DrinkOptions, DrinkSelection
from pos.domain.model.product import Product
from pos.domain.model.validation import ValidationResult
from pos.domain.repository.product_catalog import ProductCatalog
from pos.domain.service.drink_pairing import DrinkPairingEngine

HIGH_QUANTITY_THRESHOLD = 50

COOKING_TERMS = (
    "crudo",
    "poco cocido",
    "término medio",
    "bien cocido",
    "muy cocido",
)


class ValidateProductHandler:

    def __init__(
        self,
        product_catalog: ProductCatalog,
        drink_engine: DrinkPairingEngine,
    ) -> None:
        self._product_catalog = product_catalog
        self._drink_engine = drink_engine

    def handle(
        self,
        product_name: str,
        drinks: list[DrinkSelection] | None = None,
        cooking_term: str | None = None,
        quantity: int | None = None,
    ) -> ProductValidationDTO:
        errors: list[str] = []
        warnings: list[str] = []
        drinks = drinks or []

        if not product_name or not product_name.strip():
            return ProductValidationDTO(False, ["Product name is required"], [])

        product = self._product_catalog.find_by_name(product_name)
        if product is None:
            return ProductValidationDTO(False, [f"Product not found: {product_name}"], [])

        options = self._drink_engine.get_available_options(product)

        if quantity is not None:
            self._collect(self._validate_quantity(quantity), errors, warnings)

        if self._drink_engine.requires_drink_selection(product):
            result = self._drink_engine.validate_drink_selection(product, drinks)
            self._collect(result, errors, warnings)
        elif drinks:
            warnings.append("This product does not take a drink selection")

        if cooking_term:
            self._collect(self._validate_cooking_term(product, cooking_term), errors, warnings)

        return ProductValidationDTO(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            product_name=product.name,
            drink_options=list(options.available_options),
        )

    def drink_options(self, product_name: str) -> DrinkOptions | None:
        product = self._product_catalog.find_by_name(product_name)
        if product is None:
            return None
        return self._drink_engine.get_available_options(product)

    def product_exists(self, product_name: str) -> bool:
        return self._product_catalog.find_by_name(product_name) is not None

    def product_info(self, product_name: str) -> ProductInfoDTO:
        product = self._product_catalog.find_by_name(product_name)
        if product is None:
            return ProductInfoDTO(
                name=None,
                category=None,
                price=None,
                requires_drinks=False,
                min_drinks=0,
                max_drinks=0,
            )
        return ProductInfoDTO(
            name=product.name,
            category=product.category.value,
            price=str(product.price),
            requires_drinks=self._drink_engine.requires_drink_selection(product),
            min_drinks=self._drink_engine.get_min_drink_limit(product),
            max_drinks=self._drink_engine.get_max_drink_limit(product),
            drink_options=list(
                self._drink_engine.get_available_options(product).available_options
            ),
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _collect(result: ValidationResult, errors: list[str], warnings: list[str]) -> None:
        if not result.is_valid and result.error_message:
            errors.append(result.error_message)
        warnings.extend(result.warnings)

    @staticmethod
    def _validate_quantity(quantity: int) -> ValidationResult:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return ValidationResult.failure("Quantity must be a whole number")
        if quantity <= 0:
            return ValidationResult.failure("Quantity must be greater than zero")
        if quantity > HIGH_QUANTITY_THRESHOLD:
            return ValidationResult.warning("Unusually high quantity, please double-check")
        return ValidationResult.success()

    @staticmethod
    def _validate_cooking_term(product: Product, cooking_term: str) -> ValidationResult:
        if not product.category.is_food:
            return ValidationResult.failure("Only food can have a cooking term")
        if cooking_term.strip().lower() not in COOKING_TERMS:
            return ValidationResult.failure(
                f"Invalid cooking term. Options: {', '.join(COOKING_TERMS)}"
            )
        return ValidationResult.success()
