"""
Order Detail Presenter
======================

Drives the order detail view:
1. Load: fetch the order and the product catalog in parallel, fill missing
   item images from the catalog, keep the result as view state.
2. Summary: order header and item rows for the on-screen list.
3. Actions: printable production sheet, WhatsApp share link, and navigation
   to the edit / preview pages.

Toasts and navigation belong to the host UI; the presenter only calls the
``notifier`` and ``navigate`` it is given.
"""
from __future__ import annotations

import webbrowser
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional

from furni_orders import config
from furni_orders.api_client import OrdersApiClient
from furni_orders.enrichment import enrich_with_count
from furni_orders.formatting import (
    LIST_CBM_DECIMALS,
    format_cbm,
    format_date_ddmmyyyy,
    format_number,
    or_placeholder,
)
from furni_orders.models import Order, OrderStatus
from furni_orders.share import build_share_message, build_whatsapp_url
from furni_orders.sheet.printer import open_for_print
from furni_orders.sheet.sizing import DEFAULT_POLICY, SizingPolicy
from furni_orders.utils.logger import get_logger

STATUS_BADGE_CLASSES = {
    OrderStatus.draft: "bg-yellow-100 text-yellow-800",
    OrderStatus.submitted: "bg-blue-100 text-blue-800",
    OrderStatus.in_production: "bg-purple-100 text-purple-800",
    OrderStatus.done: "bg-green-100 text-green-800",
}
DEFAULT_BADGE_CLASS = "bg-gray-100"

LOAD_FAILED_MESSAGE = "Failed to load preview"
PRINT_OPENED_MESSAGE = 'PDF preview opened - Select "Save as PDF" in print dialog'
EXPORT_FAILED_MESSAGE = "Failed to export PDF"
SHARE_OPENED_MESSAGE = "Opening WhatsApp..."
SHARE_FAILED_MESSAGE = "Failed to share"
NO_ORDER_MESSAGE = "No order loaded"


class LogNotifier:
    """Notifier that writes toasts to the log; hosts pass their own."""

    def __init__(self):
        self.logger = get_logger()

    def success(self, message: str) -> None:
        self.logger.info(message, component="Toast")

    def error(self, message: str) -> None:
        self.logger.warning(message, component="Toast")


@dataclass
class ItemRow:
    """One row of the on-screen items table."""
    product_code: str
    description: str
    category: str
    height: str
    depth: str
    width: str
    cbm: str
    quantity: int
    images: str


@dataclass
class OrderSummary:
    """Header and information card of the order detail view."""
    title: str
    status: str
    badge_class: str
    subtitle: str
    entry_date: str
    factory: str
    total_items: int
    created: str


class OrderPresenter:
    """View controller for a single order."""

    def __init__(
        self,
        api: Optional[OrdersApiClient] = None,
        notifier=None,
        navigate: Optional[Callable[[str], None]] = None,
        opener: Callable[[str], object] = webbrowser.open,
        output_dir: Optional[str] = None,
        policy: SizingPolicy = DEFAULT_POLICY,
    ):
        self.api = api or OrdersApiClient()
        self.notifier = notifier or LogNotifier()
        self.navigate = navigate or (lambda path: None)
        self.opener = opener
        self.output_dir = output_dir
        self.policy = policy
        self.logger = get_logger()

        self.order_id: Optional[str] = None
        self.order: Optional[Order] = None
        self.loading = True
        self.sharing = False

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self, order_id: str) -> Optional[Order]:
        """
        Fetch order + catalog, enrich, and store as view state.

        On failure the user is notified and sent back to the order list;
        the view then stays in its not-found state.
        """
        order_id = str(order_id)
        self.order_id = order_id
        self.loading = True
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                order_future = pool.submit(self.api.get_order, order_id)
                products_future = pool.submit(self.api.get_products)
                order = order_future.result()
                catalog = products_future.result()

            if self.order_id != order_id:
                self.logger.debug(f"Discarding stale load for order {order_id}", component="Presenter")
                return None

            self.order, filled = enrich_with_count(order, catalog)
            self.logger.log_order_loaded(order_id, len(self.order.items), filled)
            return self.order
        except Exception as e:
            if self.order_id != order_id:
                return None
            self.logger.error(f"Error loading order {order_id}: {e}", component="Presenter",
                              exc_info=True)
            self.order = None
            self.notifier.error(LOAD_FAILED_MESSAGE)
            self.navigate(self.orders_path)
            return None
        finally:
            if self.order_id == order_id:
                self.loading = False

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    @property
    def not_found(self) -> bool:
        return not self.loading and self.order is None

    @property
    def has_items(self) -> bool:
        return bool(self.order and self.order.items)

    def summary(self) -> Optional[OrderSummary]:
        order = self.order
        if order is None:
            return None
        status = order.status_enum
        return OrderSummary(
            title=order.sales_order_ref or "Untitled Order",
            status=order.status or "",
            badge_class=STATUS_BADGE_CLASSES.get(status, DEFAULT_BADGE_CLASS),
            subtitle=(f"Buyer: {or_placeholder(order.buyer_name, 'N/A')} | "
                      f"PO: {or_placeholder(order.buyer_po_ref, 'N/A')}"),
            entry_date=format_date_ddmmyyyy(order.entry_date),
            factory=or_placeholder(order.factory, "N/A"),
            total_items=len(order.items),
            created=format_date_ddmmyyyy(order.created_at),
        )

    def item_rows(self) -> List[ItemRow]:
        if self.order is None:
            return []
        rows = []
        for item in self.order.items:
            rows.append(ItemRow(
                product_code=or_placeholder(item.product_code),
                description=or_placeholder(item.description),
                category=or_placeholder(item.category),
                height=format_number(item.height_cm),
                depth=format_number(item.depth_cm),
                width=format_number(item.width_cm),
                cbm=format_cbm(item, LIST_CBM_DECIMALS),
                quantity=item.quantity or 1,
                images=f"{len(item.images)} image(s)" if item.images else "-",
            ))
        return rows

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def export_pdf(self) -> Optional[str]:
        """Open the production sheet in the browser for printing."""
        if self.order is None:
            self.notifier.error(NO_ORDER_MESSAGE)
            return None
        try:
            path = open_for_print(self.order, output_dir=self.output_dir, policy=self.policy,
                                  opener=self.opener)
        except Exception as e:
            self.logger.error(f"Error exporting order {self.order_id}: {e}", component="Sheet",
                              exc_info=True)
            self.notifier.error(EXPORT_FAILED_MESSAGE)
            return None
        self.logger.log_sheet_generated(self.order.sales_order_ref or self.order_id,
                                        len(self.order.items), path)
        self.notifier.success(PRINT_OPENED_MESSAGE)
        return path

    def share_whatsapp(self) -> Optional[str]:
        """Open a WhatsApp chat prefilled with the order summary."""
        if self.order is None:
            self.notifier.error(NO_ORDER_MESSAGE)
            return None
        self.sharing = True
        try:
            pdf_url = self.api.export_pdf_url(self.order_id)
            message = build_share_message(self.order, pdf_url)
            url = build_whatsapp_url(message)
            self.opener(url)
            self.logger.log_share_link(self.order.sales_order_ref or self.order_id,
                                       len(self.order.items))
            self.notifier.success(SHARE_OPENED_MESSAGE)
            return url
        except Exception as e:
            self.logger.error(f"Error sharing order {self.order_id}: {e}", component="Share",
                              exc_info=True)
            self.notifier.error(SHARE_FAILED_MESSAGE)
            return None
        finally:
            self.sharing = False

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def orders_path(self) -> str:
        return config.ORDERS_ROUTE

    @property
    def edit_path(self) -> str:
        return f"{config.ORDERS_ROUTE}/{self.order_id}/edit"

    @property
    def preview_path(self) -> str:
        return f"{config.ORDERS_ROUTE}/{self.order_id}/preview"

    def go_back(self) -> None:
        self.navigate(self.orders_path)

    def go_edit(self) -> None:
        self.navigate(self.edit_path)

    def go_preview(self) -> None:
        self.navigate(self.preview_path)
