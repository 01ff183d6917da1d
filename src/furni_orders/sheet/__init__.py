"""
Production sheet generation: sizing rules, document tree, HTML output
and the hand-off to the browser's print dialog.
"""
from .sizing import SizingPolicy, LayoutSizes, compute_layout, DEFAULT_POLICY
from .document import ProductionSheet, Element, Markup, build_production_sheet
from .html_renderer import render_html
from .printer import write_sheet, open_for_print

__all__ = [
    'SizingPolicy',
    'LayoutSizes',
    'compute_layout',
    'DEFAULT_POLICY',
    'ProductionSheet',
    'Element',
    'Markup',
    'build_production_sheet',
    'render_html',
    'write_sheet',
    'open_for_print',
]
