"""
Production Sheet – Print Hand-off
=================================

Writes the rendered sheet to the output folder and opens it in a new browser
context. The page calls ``window.print()`` itself once loaded; saving as PDF
is left to the browser's print dialog.

Output files are never cleaned up here; the caller owns the folder.
"""
from __future__ import annotations

import os
import re
import webbrowser
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from furni_orders import config
from furni_orders.models import Order
from furni_orders.sheet.document import build_production_sheet
from furni_orders.sheet.html_renderer import render_html
from furni_orders.sheet.sizing import DEFAULT_POLICY, SizingPolicy


def _safe_name(text: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "_", text).strip("_") or "order"


def write_sheet(
    order: Order,
    output_dir: Optional[str] = None,
    policy: SizingPolicy = DEFAULT_POLICY,
) -> str:
    """
    Render the production sheet for ``order`` and write it as HTML.

    Returns:
        Absolute path of the written file.
    """
    out_dir = output_dir or config.SHEET_OUTPUT_FOLDER
    os.makedirs(out_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    stem = f"production_sheet_{_safe_name(order.sales_order_ref or 'order')}_{timestamp}"
    path = os.path.join(out_dir, f"{stem}.html")
    counter = 1
    while os.path.exists(path):
        path = os.path.join(out_dir, f"{stem}_{counter}.html")
        counter += 1

    html = render_html(build_production_sheet(order, policy=policy))
    with open(path, "x", encoding="utf-8") as fh:
        fh.write(html)
    return os.path.abspath(path)


def open_for_print(
    order: Order,
    output_dir: Optional[str] = None,
    policy: SizingPolicy = DEFAULT_POLICY,
    opener: Callable[[str], object] = webbrowser.open,
) -> str:
    """Write the sheet and open it in the browser; returns the file path."""
    path = write_sheet(order, output_dir=output_dir, policy=policy)
    opener(Path(path).as_uri())
    return path
