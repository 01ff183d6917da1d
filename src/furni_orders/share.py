"""
WhatsApp sharing: plain-text order summary plus a link to the server-side
PDF export, wrapped in a wa.me deep link. Nothing is sent from here.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from furni_orders import config
from furni_orders.models import Order

# Characters left as-is, matching browser encodeURIComponent
URI_COMPONENT_SAFE = "!~*'()"


def build_share_message(order: Order, pdf_url: str, brand_name: Optional[str] = None) -> str:
    brand = brand_name or config.BRAND_NAME
    items = order.items

    message = f"*{brand} Production Sheet*\n\n"
    message += f"📋 *Order:* {order.sales_order_ref or 'N/A'}\n"
    message += f"👤 *Buyer:* {order.buyer_name or 'N/A'}\n"
    message += f"📅 *Date:* {order.entry_date or 'N/A'}\n"
    message += f"📦 *Items:* {len(items)}\n\n"

    if items:
        message += "*Items:*\n"
        for idx, item in enumerate(items, start=1):
            message += (f"{idx}. {item.product_code or '-'} - {item.description or 'No desc'} "
                        f"(Qty: {item.quantity})\n")
        message += "\n"

    message += f"📥 *Download PDF:*\n{pdf_url}"
    return message


def build_whatsapp_url(message: str, base_url: Optional[str] = None) -> str:
    """wa.me link that opens a chat picker with ``message`` prefilled."""
    base = base_url or config.WHATSAPP_BASE_URL
    return f"{base}?text={quote(message, safe=URI_COMPONENT_SAFE)}"
