"""
Furni Orders - production sheet and sharing tools for furniture orders.
Loads orders and the product catalog from the REST backend, fills missing
item images from the catalog, and renders printable production sheets.
"""

__version__ = "0.1.0"
