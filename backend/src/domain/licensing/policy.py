"""Licensing policy thresholds.

Each tier boundary is defined exactly once here and shared by the budget,
ownership and approval checks. All amounts are in cents.
"""

# Unverified brands may never commit more than $10,000 in total license fees
UNVERIFIED_BRAND_LIMIT_CENTS = 1_000_000

# Verified brands get a warning above $100,000 for a single license
VERIFIED_HIGH_AMOUNT_CENTS = 10_000_000

# Licenses at or above $10,000 need admin sign-off
HIGH_VALUE_APPROVAL_CENTS = 1_000_000

# Licenses at or above $5,000 should have documented ownership
OWNERSHIP_DOCUMENTATION_CENTS = 500_000

FULL_OWNERSHIP_BPS = 10_000
MAX_REV_SHARE_BPS = 10_000

LONG_DURATION_DAYS = 365

VALID_ASPECT_RATIOS = ("16:9", "1:1", "9:16", "4:5", "2:3", "4:3", "21:9")


def format_cents(cents: int) -> str:
    """Format an amount in cents as dollars, e.g. 1050000 -> "$10,500.00"."""
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:,.2f}"
