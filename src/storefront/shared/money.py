"""Money value object and exact decimal arithmetic over float prices.

Prices are persisted as ``Float`` fields. Every calculation converts through
``str`` first so that ``1500.0`` becomes ``Decimal("1500.0")`` rather than the
binary approximation of the float.
"""

from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.domain import storefront

CENT = Decimal("0.01")
ZERO = Decimal("0")

VALID_CURRENCIES = frozenset({"USD", "EUR", "GBP"})


def to_decimal(amount) -> Decimal:
    """Exact decimal value of a stored price."""
    if amount is None:
        return ZERO
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def line_total(unit_price, quantity) -> Decimal:
    return to_decimal(unit_price) * quantity


def sum_lines(lines) -> Decimal:
    """Sum ``unit_price * quantity`` over objects carrying both attributes."""
    return sum((line_total(line.unit_price, line.quantity) for line in lines), ZERO)


def format_amount(amount) -> str:
    """Render an amount with a dollar sign and two decimals, e.g. ``$1500.00``."""
    return f"${to_decimal(amount).quantize(CENT)}"


@storefront.value_object
class Money:
    """A non-negative monetary amount with its currency."""

    amount: Float(required=True, min_value=0.0)
    currency: String(max_length=3, default="USD")

    @invariant.post
    def currency_must_be_supported(self):
        if self.currency not in VALID_CURRENCIES:
            raise ValidationError({"currency": [f"Unsupported currency: {self.currency}"]})

    def to_decimal(self) -> Decimal:
        return to_decimal(self.amount)

    def __str__(self):
        return format_amount(self.amount)
