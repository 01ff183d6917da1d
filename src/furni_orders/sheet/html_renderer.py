"""
Production Sheet – HTML Renderer
Writes a ProductionSheet tree out as a standalone, print-ready HTML page
through Jinja2 templates (autoescaping on; notes arrive as ``Markup``).
"""
from __future__ import annotations

from typing import Union

from jinja2 import DictLoader, Environment
from markupsafe import Markup

from furni_orders.sheet.document import Element, ProductionSheet

VOID_TAGS = {"img", "br", "hr", "meta", "link", "input"}

PAGE_CSS = """
  @page { size: A4; margin: 0; }
  body { margin: 0; padding: 0; font-family: 'Segoe UI', Arial, sans-serif; }
  .page:last-child { page-break-after: auto; }
  img { max-width: 100%; }
  /* formatting inside item notes */
  ul { margin: 0; padding-left: 20px; }
  li { margin: 4px 0; }
  p { margin: 4px 0; }
  strong { font-weight: 700; }
"""

# Opens the print dialog so the user can pick "Save as PDF"
PRINT_SCRIPT = """
  window.onload = function() {
    setTimeout(function() {
      window.print();
    }, %d);
  };
"""

# One element, recursively. Text children are escaped by autoescape.
NODE_TEMPLATE = (
    "{% macro render_node(node) -%}\n"
    "{%- if node.children is defined -%}\n"
    "<{{ node.tag }}"
    "{% for name, value in node.attrs.items() %} {{ name }}=\"{{ value }}\"{% endfor %}"
    "{% if node.style %} style=\"{{ node.style }}\"{% endif %}"
    "{% if node.tag in void_tags %} />{% else %}>"
    "{% for child in node.children %}{{ render_node(child) }}{% endfor %}"
    "</{{ node.tag }}>{% endif %}\n"
    "{%- else -%}{{ node }}{%- endif -%}\n"
    "{%- endmacro %}\n"
)

SHEET_TEMPLATE = """{% from "node.html" import render_node %}<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8" />
<title>{{ sheet.title }}</title>
<style>{{ css }}</style>
</head>
<body>
{% for page in sheet.pages %}{{ render_node(page) }}
{% endfor %}<script>{{ script }}</script>
</body>
</html>
"""

env = Environment(
    loader=DictLoader({"node.html": NODE_TEMPLATE, "sheet.html": SHEET_TEMPLATE}),
    autoescape=True,
)
env.globals["void_tags"] = VOID_TAGS


def render_node(node: Union[Element, str]) -> str:
    return str(env.get_template("node.html").module.render_node(node))


def render_html(sheet: ProductionSheet) -> str:
    """Render the whole sheet as an HTML document that prints itself on load."""
    return env.get_template("sheet.html").render(
        sheet=sheet,
        css=Markup(PAGE_CSS),
        script=Markup(PRINT_SCRIPT) % int(sheet.print_delay_ms),
    ) + "\n"
