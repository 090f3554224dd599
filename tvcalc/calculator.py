"""
Subscription cost calculator.

Adds the selected add-on packages to the base plan and applies sales tax.
Amounts are kept in Decimal and rounded to cents only for the final figures.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Tuple

from .config import (
    ADDON_PACKAGES, BASE_PLAN_NAME, BASE_PLAN_PRICE, BILLING_CYCLES, TAX_LABEL, TAX_RATE
)

CENTS = Decimal("0.01")


class UnknownAddOnError(ValueError):
    """Raised when an add-on id is not in the package list."""

    def __init__(self, addon_id: str):
        self.addon_id = addon_id
        known = ", ".join(pkg["id"] for pkg in ADDON_PACKAGES)
        super().__init__(f"Unknown add-on {addon_id!r} (available: {known})")


@dataclass
class AddOnPackage:
    """An optional package on top of the base plan."""

    id: str
    name: str
    price: float
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AddOnPackage":
        return cls(
            id=data["id"],
            name=data["name"],
            price=data["price"],
            description=data.get("description", ""),
        )


@dataclass
class Quote:
    """Cost breakdown for one plan selection."""

    billing_cycle: str
    lines: List[Tuple[str, Decimal]] = field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    tax: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")

    def format(self) -> str:
        """Render the breakdown as plain text, one line per item."""
        rows = [(name, amount) for name, amount in self.lines]
        rows.append(("Subtotal", self.subtotal))
        rows.append((f"Tax ({TAX_RATE * 100:.2f}%)", self.tax))
        rows.append(("Total", self.total))

        width = max(len(name) for name, _ in rows)
        text = "\n".join(f"{name.ljust(width)}  ${amount:>8}" for name, amount in rows)
        return f"{text}\nper {'year' if self.billing_cycle == 'yearly' else 'month'} ({TAX_LABEL})"


def get_addon_packages() -> Dict[str, AddOnPackage]:
    """Return the add-on packages keyed by id, in display order."""
    return {pkg["id"]: AddOnPackage.from_dict(pkg) for pkg in ADDON_PACKAGES}


def _money(value) -> Decimal:
    return Decimal(str(value))


def calculate_quote(addon_ids: Iterable[str] = (), billing_cycle: str = "monthly") -> Quote:
    """
    Price the base plan plus the given add-ons.

    Selecting the same add-on twice counts it once. Raises UnknownAddOnError
    for ids that are not offered and ValueError for an unknown billing cycle.
    """
    if billing_cycle not in BILLING_CYCLES:
        raise ValueError(f"Invalid billing cycle: {billing_cycle!r}")
    months = BILLING_CYCLES[billing_cycle]

    packages = get_addon_packages()
    selected: List[AddOnPackage] = []
    for addon_id in addon_ids:
        if addon_id not in packages:
            raise UnknownAddOnError(addon_id)
        if packages[addon_id] not in selected:
            selected.append(packages[addon_id])

    lines = [(BASE_PLAN_NAME, _money(BASE_PLAN_PRICE) * months)]
    lines.extend((pkg.name, _money(pkg.price) * months) for pkg in selected)

    subtotal = sum((amount for _, amount in lines), Decimal("0"))
    tax = subtotal * _money(TAX_RATE)

    return Quote(
        billing_cycle=billing_cycle,
        lines=[(name, amount.quantize(CENTS, ROUND_HALF_UP)) for name, amount in lines],
        subtotal=subtotal.quantize(CENTS, ROUND_HALF_UP),
        tax=tax.quantize(CENTS, ROUND_HALF_UP),
        total=(subtotal + tax).quantize(CENTS, ROUND_HALF_UP),
    )
