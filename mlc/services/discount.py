"""Discount tiers of a card, by the total amount spent with it"""

# (minimal balance, percent), highest first. A balance equal to a threshold
# already gets that threshold's percent.
DISCOUNT_TIERS: tuple[tuple[int, int], ...] = (
    (65000, 25),
    (45000, 20),
    (35000, 15),
    (25000, 10),
)
BASE_DISCOUNT_PERCENT = 5


def discount_percent(balance: int) -> int:
    for threshold, percent in DISCOUNT_TIERS:
        if balance >= threshold:
            return percent
    return BASE_DISCOUNT_PERCENT


def compute_discount(amount: int, balance: int) -> int:
    """Discount of a purchase: whole hundreds of the amount times the tier percent."""
    return (amount // 100) * discount_percent(balance)
