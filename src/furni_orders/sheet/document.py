"""
Production Sheet – Document Tree
================================

Binds an order and its items to a tree of ``Element`` nodes, one A4 page per
item:

  header (logo + order metadata) | images + material swatches | notes |
  item details table | footer (buyer/PO, page index)

The tree says *what* goes on each page; ``html_renderer`` decides how it is
written out. Plain ``str`` children are text and get escaped on render,
``markupsafe.Markup`` children are passed through untouched (item notes may carry
their own formatting).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from markupsafe import Markup

from furni_orders import config
from furni_orders.formatting import (
    SHEET_CBM_DECIMALS,
    format_cbm,
    format_date_ddmmyyyy,
    format_number,
    or_placeholder,
)
from furni_orders.models import Order, OrderItem
from furni_orders.sheet.sizing import DEFAULT_POLICY, LayoutSizes, SizingPolicy, compute_layout

BRAND_DARK = "#3d2c1e"
BRAND_MID = "#5a4a3a"
BRAND_LIGHT = "#f5f0eb"
BORDER_LIGHT = "#ddd"

LEATHER_PLACEHOLDER = "linear-gradient(135deg, #8B4513, #A0522D)"
FINISH_PLACEHOLDER = "linear-gradient(135deg, #D4A574, #C4956A)"

NO_IMAGE_TEXT = "No Image Available"
NO_NOTES_TEXT = "No notes added"


@dataclass
class Element:
    tag: str
    style: str = ""
    attrs: dict = field(default_factory=dict)
    children: List[Union["Element", str]] = field(default_factory=list)
    role: str = ""

    def walk(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def find_all(self, role: str) -> List["Element"]:
        return [el for el in self.walk() if el.role == role]

    def find(self, role: str) -> Optional["Element"]:
        found = self.find_all(role)
        return found[0] if found else None

    def text(self) -> str:
        parts = []
        for child in self.children:
            parts.append(child.text() if isinstance(child, Element) else str(child))
        return "".join(parts)


@dataclass
class ProductionSheet:
    title: str
    pages: List[Element]
    print_delay_ms: int = 500


def el(tag: str, *children, style: str = "", role: str = "", **attrs) -> Element:
    return Element(tag=tag, style=style, attrs=attrs, children=list(children), role=role)


# ── Header ──────────────────────────────────────────────────────

def _meta_row(label: str, value: str, last: bool = False, mono: bool = False) -> Element:
    label_style = (f"padding: 3px 8px; background: {BRAND_LIGHT}; font-weight: bold; "
                   f"border-right: 1px solid {BRAND_DARK};")
    value_style = "padding: 3px 8px;" + (" font-family: monospace;" if mono else "")
    row_style = "" if last else f"border-bottom: 1px solid {BRAND_DARK};"
    return el(
        "tr",
        el("td", label, style=label_style),
        el("td", value, style=value_style, role="meta-value"),
        style=row_style,
        role="meta-row",
    )


def build_header(order: Order, logo_url: str, brand_name: str) -> Element:
    meta = el(
        "table",
        _meta_row("ENTRY DATE", format_date_ddmmyyyy(order.entry_date)),
        _meta_row("INFORMED TO FACTORY",
                  format_date_ddmmyyyy(order.factory_inform_date or order.entry_date)),
        _meta_row("FACTORY", or_placeholder(order.factory)),
        _meta_row("SALES ORDER REF", or_placeholder(order.sales_order_ref), mono=True),
        _meta_row("BUYER PO", or_placeholder(order.buyer_po_ref), last=True, mono=True),
        style=f"border: 1px solid {BRAND_DARK}; border-collapse: collapse; font-size: 10px;",
        role="order-meta",
    )
    return el(
        "div",
        el("img", src=logo_url, alt=brand_name, style="height: 60px; object-fit: contain;",
           role="logo"),
        meta,
        style=("display: flex; justify-content: space-between; align-items: flex-start; "
               f"padding-bottom: 10px; border-bottom: 2px solid {BRAND_DARK};"),
        role="header",
    )


# ── Images ──────────────────────────────────────────────────────

def build_image_block(item: OrderItem, sizes: LayoutSizes, policy: SizingPolicy) -> Element:
    main_image = item.display_image
    if main_image:
        primary = el(
            "div",
            el("img", src=main_image, alt="Product",
               style=f"max-width: 100%; max-height: {sizes.primary_image_max}px; object-fit: contain;"),
            style=(f"border: 1px solid {BORDER_LIGHT}; border-radius: 4px; padding: 6px; "
                   "background: white; display: flex; align-items: center; "
                   f"justify-content: center; height: {sizes.primary}px;"),
            role="primary-image",
        )
    else:
        primary = el(
            "div",
            NO_IMAGE_TEXT,
            style=(f"width: 100%; height: {sizes.primary}px; display: flex; align-items: center; "
                   f"justify-content: center; background: #f8f8f8; border: 1px solid {BORDER_LIGHT}; "
                   "border-radius: 4px; color: #888;"),
            role="primary-placeholder",
        )

    block = el("div", primary, style="width: 75%;", role="image-block")

    secondary = item.secondary_images
    if secondary:
        size = sizes.thumbnail
        thumbs = [
            el("img", src=img, alt="Additional",
               style=(f"width: {size}px; height: {size}px; object-fit: cover; "
                      f"border: 1px solid {BORDER_LIGHT}; border-radius: 4px; flex-shrink: 0;"),
               role="thumbnail")
            for img in secondary[:policy.max_thumbnails]
        ]
        overflow = len(secondary) - policy.max_thumbnails
        if overflow > 0:
            thumbs.append(el(
                "div",
                f"+{overflow} more",
                style=(f"width: {size}px; height: {size}px; border: 1px solid {BORDER_LIGHT}; "
                       "border-radius: 4px; display: flex; align-items: center; "
                       "justify-content: center; font-size: 12px; color: #666;"),
                role="more-images",
            ))
        block.children.append(el(
            "div", *thumbs,
            style="display: flex; gap: 8px; margin-top: 8px; flex-wrap: wrap;",
            role="thumbnails",
        ))
    return block


# ── Swatches ────────────────────────────────────────────────────

def _swatch(label: str, code: Optional[str], image: Optional[str],
            placeholder: str, height: int) -> Element:
    if image:
        visual = el("img", src=image, alt=label,
                    style=(f"width: 100%; height: {height}px; object-fit: cover; "
                           "border-radius: 4px; margin-bottom: 4px;"),
                    role="swatch-image")
    else:
        visual = el("div",
                    style=(f"width: 100%; height: {height}px; background: {placeholder}; "
                           "border-radius: 4px; margin-bottom: 4px;"),
                    role="swatch-placeholder")
    return el(
        "div",
        visual,
        el("p", label,
           style="font-size: 9px; color: #666; text-align: center; text-transform: uppercase; margin: 0;"),
        el("p", or_placeholder(code),
           style="font-size: 10px; font-weight: 600; text-align: center; margin: 0;",
           role="swatch-code"),
        style=f"border: 1px solid {BORDER_LIGHT}; border-radius: 4px; padding: 6px; background: #fafafa;",
        role=f"swatch-{label.lower()}",
    )


def build_swatch_panel(item: OrderItem, sizes: LayoutSizes) -> Element:
    panel = el("div", style="width: 25%; display: flex; flex-direction: column; gap: 6px;",
               role="swatches")
    if item.has_leather:
        panel.children.append(_swatch("Leather", item.leather_code, item.leather_image,
                                      LEATHER_PLACEHOLDER, sizes.swatch))
    if item.has_finish:
        panel.children.append(_swatch("Finish", item.finish_code, item.finish_image,
                                      FINISH_PLACEHOLDER, sizes.swatch))
    return panel


# ── Notes ───────────────────────────────────────────────────────

def note_bullets(item: OrderItem) -> List[str]:
    """Fallback note lines built from the item's structured fields."""
    fields = (
        ("Category", item.category),
        ("Leather", item.leather_code),
        ("Finish", item.finish_code),
        ("Color Notes", item.color_notes),
        ("Wood Finish", item.wood_finish),
    )
    return [f"• {label}: {value}" for label, value in fields if value]


def build_notes(item: OrderItem) -> Element:
    if item.notes:
        body = el("div", Markup(item.notes), role="notes-text")
    else:
        bullets = note_bullets(item)
        if bullets:
            lines = [el("p", line, style="margin: 2px 0;", role="note-bullet") for line in bullets]
        else:
            lines = [el("p", NO_NOTES_TEXT, style="font-style: italic;", role="no-notes")]
        body = el("div", *lines, style="color: #888;", role="notes-fallback")

    return el(
        "div",
        el("div", "Notes:",
           style=f"background: {BRAND_DARK}; color: white; padding: 6px 10px; font-weight: 600; font-size: 12px;"),
        el("div", body, style="padding: 8px 10px; font-size: 15px; line-height: 1.4;"),
        style=f"border: 1px solid {BRAND_DARK}; border-radius: 4px; margin-bottom: 6px; width: 100%;",
        role="notes",
    )


# ── Details table ───────────────────────────────────────────────

def build_details_table(item: OrderItem) -> Element:
    head_cell = f"padding: 6px; border-right: 1px solid {BRAND_MID};"
    sub_cell = "padding: 4px; border-right: 1px solid #6a5a4a;"
    cell = f"padding: 6px; border-right: 1px solid {BORDER_LIGHT};"
    center = cell + " text-align: center;"

    description = el("td", or_placeholder(item.description), style=cell, role="item-description")
    if item.color_notes:
        description.children.append(" ")
        description.children.append(el("span", f"({item.color_notes})", style="color: #666;"))

    head = el(
        "thead",
        el("tr",
           el("th", "ITEM CODE", style=head_cell + " text-align: left;", rowspan="2"),
           el("th", "DESCRIPTION", style=head_cell + " text-align: left;", rowspan="2"),
           el("th", "SIZE (cm)", style=head_cell + " text-align: center;", colspan="3"),
           el("th", "CBM", style=head_cell + " text-align: center;", rowspan="2"),
           el("th", "Qty", style="padding: 6px; text-align: center;", rowspan="2"),
           style=f"background: {BRAND_DARK}; color: white;"),
        el("tr",
           el("th", "H", style=sub_cell),
           el("th", "D", style=sub_cell),
           el("th", "W", style=sub_cell),
           style=f"background: {BRAND_MID}; color: white; font-size: 9px;"),
    )
    body = el(
        "tbody",
        el("tr",
           el("td", or_placeholder(item.product_code),
              style=cell + " font-family: monospace; font-weight: bold;", role="item-code"),
           description,
           el("td", format_number(item.height_cm), style=center, role="item-height"),
           el("td", format_number(item.depth_cm), style=center, role="item-depth"),
           el("td", format_number(item.width_cm), style=center, role="item-width"),
           el("td", format_cbm(item, SHEET_CBM_DECIMALS),
              style=center + " font-family: monospace;", role="item-cbm"),
           el("td", f"{item.quantity or 1} Pcs",
              style="padding: 6px; text-align: center; font-weight: bold;", role="item-qty"),
           style=f"border-top: 1px solid {BRAND_DARK};"),
    )
    return el("table", head, body,
              style=f"width: 100%; border-collapse: collapse; font-size: 11px; border: 2px solid {BRAND_DARK};",
              role="details")


# ── Footer ──────────────────────────────────────────────────────

def build_footer(order: Order, index: int, total: int) -> Element:
    return el(
        "div",
        el("span", f"Buyer: {or_placeholder(order.buyer_name)} • PO: {or_placeholder(order.buyer_po_ref)}",
           role="footer-buyer"),
        el("span", f"Page {index + 1} of {total}", role="page-index"),
        style=("display: flex; justify-content: space-between; margin-top: 8px; padding-top: 6px; "
               f"border-top: 1px solid {BORDER_LIGHT}; font-size: 9px; color: #888;"),
        role="footer",
    )


# ── Pages ───────────────────────────────────────────────────────

def build_page(
    order: Order,
    item: OrderItem,
    index: int,
    total: int,
    policy: SizingPolicy = DEFAULT_POLICY,
    logo_url: Optional[str] = None,
    brand_name: Optional[str] = None,
) -> Element:
    sizes = compute_layout(
        secondary_count=len(item.secondary_images),
        notes_length=len(item.notes or ""),
        has_leather=item.has_leather,
        has_finish=item.has_finish,
        policy=policy,
    )
    images_row = el(
        "div",
        build_image_block(item, sizes, policy),
        build_swatch_panel(item, sizes),
        style="display: flex; gap: 10px; padding: 6px 0;",
        role="images-row",
    )
    return el(
        "div",
        build_header(order, logo_url or config.BRAND_LOGO_URL, brand_name or config.BRAND_NAME),
        images_row,
        build_notes(item),
        build_details_table(item),
        build_footer(order, index, total),
        style="page-break-after: always; padding: 8mm; box-sizing: border-box; height: 277mm; overflow: hidden;",
        role="page",
        **{"class": "page"},
    )


def build_production_sheet(
    order: Order,
    policy: SizingPolicy = DEFAULT_POLICY,
    logo_url: Optional[str] = None,
    brand_name: Optional[str] = None,
    print_delay_ms: Optional[int] = None,
) -> ProductionSheet:
    """
    Build the production sheet for every item of an order.

    Args:
        order: Order (already enriched with catalog images).
        policy: Sizing tables for the per-page layout.
        logo_url: Header logo; defaults to config.BRAND_LOGO_URL.
        brand_name: Logo alt text; defaults to config.BRAND_NAME.
        print_delay_ms: Delay before the print dialog opens.

    Returns:
        ProductionSheet with one page per item, in item order.
    """
    total = len(order.items)
    pages = [
        build_page(order, item, index, total, policy, logo_url, brand_name)
        for index, item in enumerate(order.items)
    ]
    return ProductionSheet(
        title=f"Production Sheet - {order.sales_order_ref or 'Order'}",
        pages=pages,
        print_delay_ms=config.PRINT_DELAY_MS if print_delay_ms is None else print_delay_ms,
    )
