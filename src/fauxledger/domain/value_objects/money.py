"""Monetary amount with currency."""

from dataclasses import dataclass
from decimal import Decimal

MAX_INTEGER_DIGITS = 15
MAX_DECIMAL_PLACES = 6


@dataclass(frozen=True)
class Money:
    """Decimal amount in major units plus ISO 4217 currency code.

    Amounts are bounded to MAX_INTEGER_DIGITS integer digits and
    MAX_DECIMAL_PLACES significant decimal places.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")
        if not self.amount.is_zero():
            if self.amount.adjusted() >= MAX_INTEGER_DIGITS:
                raise ValueError(
                    f"Money amount must have at most {MAX_INTEGER_DIGITS} integer digits"
                )
            if self.amount.normalize().as_tuple().exponent < -MAX_DECIMAL_PLACES:
                raise ValueError(
                    f"Money amount must have at most {MAX_DECIMAL_PLACES} decimal places"
                )
        if (
            not isinstance(self.currency, str)
            or len(self.currency) != 3
            or not self.currency.isalpha()
            or not self.currency.isupper()
        ):
            raise ValueError(f"Currency must be a 3-letter upper-case code: {self.currency!r}")

    def times(self, quantity: int) -> "Money":
        return Money(self.amount * quantity, self.currency)

    @classmethod
    def zero(cls, currency: str) -> "Money":
        return cls(Decimal(0), currency)
