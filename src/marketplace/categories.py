"""
Category rule table for product listings.

Every listing category carries its own measurement units, placeholder values
and numeric bounds. The table is read-only; unknown category names resolve to
the fallback rule (the last entry) rather than raising.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class CategoryRule:
    category: str
    has_weight: bool
    has_quantity: bool
    weight_unit: Optional[str] = None
    quantity_unit: Optional[str] = None
    weight_placeholder: Optional[str] = None
    quantity_placeholder: Optional[str] = None
    weight_min: Optional[float] = None
    weight_max: Optional[float] = None
    weight_step: Optional[float] = None
    quantity_min: Optional[int] = None
    quantity_max: Optional[int] = None
    quantity_step: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _rule(
    category: str,
    quantity_unit: str,
    weight_placeholder: str,
    quantity_placeholder: str,
    weight_range: tuple,
    weight_step: float,
    quantity_range: tuple,
) -> CategoryRule:
    return CategoryRule(
        category=category,
        has_weight=True,
        has_quantity=True,
        weight_unit="g",
        quantity_unit=quantity_unit,
        weight_placeholder=weight_placeholder,
        quantity_placeholder=quantity_placeholder,
        weight_min=weight_range[0],
        weight_max=weight_range[1],
        weight_step=weight_step,
        quantity_min=quantity_range[0],
        quantity_max=quantity_range[1],
        quantity_step=1,
    )


_RULES: List[CategoryRule] = [
    _rule("Puja Items & Accessories", "pieces", "100", "1", (5, 2000), 5, (1, 50)),
    _rule("Idols & Murtis", "pieces", "500", "1", (50, 10000), 10, (1, 10)),
    _rule("Incense & Dhoop", "sticks", "50", "20", (10, 1000), 5, (1, 500)),
    _rule("Sacred Books & Scriptures", "books", "300", "1", (50, 2000), 10, (1, 20)),
    _rule("Rudraksha & Malas", "beads", "25", "108", (5, 500), 1, (1, 1008)),
    _rule("Yantras & Sacred Geometry", "pieces", "200", "1", (20, 5000), 5, (1, 25)),
    _rule("Temple Decorations", "pieces", "150", "1", (10, 3000), 5, (1, 100)),
    _rule("Spiritual Jewelry", "pieces", "15", "1", (1, 200), 1, (1, 50)),
    _rule("Ayurvedic Products", "bottles", "100", "1", (10, 1000), 5, (1, 50)),
    _rule("Festival Items", "pieces", "200", "1", (20, 5000), 10, (1, 100)),
]

CATEGORY_RULES: Mapping[str, CategoryRule] = MappingProxyType({r.category: r for r in _RULES})

# Unmatched (or empty) category names use the last rule in the table.
FALLBACK_RULE: CategoryRule = _RULES[-1]


def get_category_rule(category: Optional[str]) -> CategoryRule:
    return CATEGORY_RULES.get(category or "", FALLBACK_RULE)


def list_categories() -> List[str]:
    """Category names in table order."""
    return [r.category for r in _RULES]


def is_known_category(category: Optional[str]) -> bool:
    return (category or "") in CATEGORY_RULES
