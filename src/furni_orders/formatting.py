"""
Display helpers shared by the list view and the production sheet.
None of these raise on missing or malformed input.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from furni_orders.models import OrderItem

# CBM precision per view
LIST_CBM_DECIMALS = 4
SHEET_CBM_DECIMALS = 2

CM3_PER_M3 = 1_000_000


def format_date_ddmmyyyy(value: Union[str, date, None]) -> str:
    """
    Format a date as DD-MM-YYYY.

    Empty input gives "-"; input that does not parse as an ISO date is
    returned unchanged.
    """
    if not value:
        return "-"
    if isinstance(value, (date, datetime)):
        return value.strftime("%d-%m-%Y")
    text = str(value).strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return parsed.strftime("%d-%m-%Y")


def compute_cbm(item: OrderItem, decimals: int) -> Optional[float]:
    """
    Volume of one item in cubic metres.

    With ``cbm_auto`` the volume is derived from the cm dimensions and
    rounded; otherwise the stored ``cbm`` is returned as is.
    """
    if item.cbm_auto:
        volume = (item.height_cm or 0) * (item.depth_cm or 0) * (item.width_cm or 0) / CM3_PER_M3
        # round half up on the decimal value
        step = Decimal(1).scaleb(-decimals)
        return float(Decimal(str(volume)).quantize(step, rounding=ROUND_HALF_UP))
    return item.cbm


def format_cbm(item: OrderItem, decimals: int) -> str:
    """CBM as shown on screen: fixed decimals when derived, verbatim otherwise."""
    value = compute_cbm(item, decimals)
    if value is None:
        return "-"
    if item.cbm_auto:
        return f"{value:.{decimals}f}"
    return format_number(value)


def format_number(value: Union[int, float, None]) -> str:
    """Render 45.0 as "45" and keep real fractions."""
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def or_placeholder(value: Optional[str], placeholder: str = "-") -> str:
    return value if value else placeholder
