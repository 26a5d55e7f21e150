"""Product aggregate and packaging-derived pricing.

Products live independently of orders. The stored ``base_price`` is
the price of one dispenser box; the catalog also shows the price of a
single item and of a full carton, both derived from the packaging
ratios kept in the product's specifications.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from portal.domain.exceptions import ValidationError
from portal.domain.model.value_objects import Money

DEFAULT_UNIT = "db"

# Reserved specification keys that describe packaging, not the glove.
UNIT_KEY = "unit"
ITEMS_PER_DISPENSER_KEY = "items_per_dispenser"
DISPENSERS_PER_CARTON_KEY = "dispensers_per_carton"
PACKAGING_KEYS = (UNIT_KEY, ITEMS_PER_DISPENSER_KEY, DISPENSERS_PER_CARTON_KEY)


def parse_count(raw: object) -> int:
    """Read a packaging count, falling back to 1.

    Missing, zero, negative and non-numeric values all become 1 so a
    badly filled product sheet can never cause a division by zero.
    """
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return 1
    if not value.is_finite() or value != value.to_integral_value() or value <= 0:
        return 1
    return int(value)


@dataclass(frozen=True)
class Packaging:
    unit: str = DEFAULT_UNIT
    items_per_dispenser: int = 1
    dispensers_per_carton: int = 1

    @staticmethod
    def from_raw(raw: dict[str, object]) -> Packaging:
        unit = str(raw.get(UNIT_KEY) or "").strip() or DEFAULT_UNIT
        return Packaging(
            unit=unit,
            items_per_dispenser=parse_count(raw.get(ITEMS_PER_DISPENSER_KEY)),
            dispensers_per_carton=parse_count(raw.get(DISPENSERS_PER_CARTON_KEY)),
        )


@dataclass
class Specifications:
    """Free-form product attributes plus the typed packaging block."""

    attributes: dict[str, str] = field(default_factory=dict)
    packaging: Packaging = field(default_factory=Packaging)

    @staticmethod
    def from_mapping(raw: dict[str, object] | None) -> Specifications:
        """Split a flat key/value mapping into attributes and packaging."""
        raw = dict(raw or {})
        packaging = Packaging.from_raw(raw)
        attributes = {
            str(key): str(value)
            for key, value in raw.items()
            if key not in PACKAGING_KEYS and value is not None
        }
        return Specifications(attributes=attributes, packaging=packaging)

    def to_mapping(self) -> dict[str, str]:
        flat = dict(self.attributes)
        flat[UNIT_KEY] = self.packaging.unit
        flat[ITEMS_PER_DISPENSER_KEY] = str(self.packaging.items_per_dispenser)
        flat[DISPENSERS_PER_CARTON_KEY] = str(self.packaging.dispensers_per_carton)
        return flat


@dataclass
class Product:
    """A glove product in the catalog.

    ``base_price`` is per dispenser box. Price changes never reach
    existing orders or carts because both snapshot the price.
    """

    id: str
    name: str
    base_price: Money
    sku: str = ""
    category: str = ""
    image_url: str = ""
    specifications: Specifications = field(default_factory=Specifications)
    variants: list[str] = field(default_factory=list)

    @property
    def packaging(self) -> Packaging:
        return self.specifications.packaging

    @property
    def unit_price(self) -> Money:
        """Price of a single item, rounded to a whole unit."""
        return self.base_price.divided_by(self.packaging.items_per_dispenser)

    @property
    def carton_price(self) -> Money:
        """Price of one carton of dispenser boxes."""
        return self.base_price * self.packaging.dispensers_per_carton

    @property
    def items_per_carton(self) -> int:
        return self.packaging.items_per_dispenser * self.packaging.dispensers_per_carton

    def update_price(self, new_price: Money) -> None:
        """Change the dispenser-box price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.base_price = new_price

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()
