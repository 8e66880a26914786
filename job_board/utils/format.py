"""Display formatting for salary amounts."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

NEGOTIABLE_LABEL = "Negotiable"


def format_money(value: Any) -> str:
    """
    Format an amount with a "." every three digits: 15000000 -> "15.000.000".
    None -> "". Non-numeric input is returned stringified. Fractions are truncated.
    A minus sign is kept as a prefix and never grouped: -1234 -> "-1.234".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        truncated = value
    else:
        # Decimal, not float: digits beyond 2**53 must survive
        try:
            num = Decimal(str(value).strip())
        except InvalidOperation:
            return str(value)
        if not num.is_finite():
            return str(value)
        truncated = int(num)

    digits = str(abs(truncated))
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    sign = "-" if truncated < 0 else ""
    return sign + ".".join(groups)


def format_salary(
    salary_min: Optional[int],
    salary_max: Optional[int],
    currency: Optional[str] = None,
) -> str:
    """Render a salary range such as "15.000.000 - 30.000.000 VND"; zero/absent bounds are skipped."""
    if not salary_min and not salary_max:
        return NEGOTIABLE_LABEL
    low = format_money(salary_min) if salary_min else ""
    high = format_money(salary_max) if salary_max else ""
    sep = " - " if low and high else ""
    return f"{low}{sep}{high} {currency or ''}".strip()
