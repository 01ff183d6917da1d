"""
Pydantic models for orders, order items and catalog products
as returned by the orders REST backend.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class OrderStatus(str, Enum):
    draft = "Draft"
    submitted = "Submitted"
    in_production = "In Production"
    done = "Done"


_TEXT_FIELDS = (
    "product_code", "description", "category", "notes", "product_image",
    "leather_code", "leather_image", "finish_code", "finish_image",
    "color_notes", "wood_finish",
)


class OrderItem(BaseModel):
    """A single line item of an order."""
    id: Optional[str] = None
    product_code: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    height_cm: float = 0
    depth_cm: float = 0
    width_cm: float = 0
    quantity: int = 1
    cbm: Optional[float] = None
    cbm_auto: bool = False
    notes: Optional[str] = None
    product_image: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    leather_code: Optional[str] = None
    leather_image: Optional[str] = None
    finish_code: Optional[str] = None
    finish_image: Optional[str] = None
    color_notes: Optional[str] = None
    wood_finish: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return None if v is None else str(v)

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        if v is None:
            return None
        v = str(v)
        return v if v.strip() else None

    @field_validator("height_cm", "depth_cm", "width_cm", mode="before")
    @classmethod
    def _dimension_default(cls, v):
        return 0 if v in (None, "") else v

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_default(cls, v):
        return 1 if v in (None, "", 0) else v

    @field_validator("cbm", mode="before")
    @classmethod
    def _cbm_blank(cls, v):
        return None if v == "" else v

    @field_validator("cbm_auto", mode="before")
    @classmethod
    def _cbm_auto_default(cls, v):
        return bool(v)

    @field_validator("images", mode="before")
    @classmethod
    def _images_default(cls, v):
        if not v:
            return []
        if isinstance(v, str):
            v = [v]
        return [img for img in v if img]

    @property
    def display_image(self) -> Optional[str]:
        """Primary image: product_image, else the first of images."""
        if self.product_image:
            return self.product_image
        return self.images[0] if self.images else None

    @property
    def secondary_images(self) -> List[str]:
        """Images shown beside the primary one."""
        if self.product_image:
            return list(self.images)
        return list(self.images[1:])

    @property
    def has_leather(self) -> bool:
        return bool(self.leather_image or self.leather_code)

    @property
    def has_finish(self) -> bool:
        return bool(self.finish_image or self.finish_code)


class Order(BaseModel):
    """Order header with its ordered line items."""
    id: Optional[str] = None
    sales_order_ref: Optional[str] = None
    buyer_name: Optional[str] = None
    buyer_po_ref: Optional[str] = None
    factory: Optional[str] = None
    factory_inform_date: Optional[str] = None
    entry_date: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    items: List[OrderItem] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return None if v is None else str(v)

    @field_validator(
        "sales_order_ref", "buyer_name", "buyer_po_ref", "factory",
        "factory_inform_date", "entry_date", "status", "created_at",
        mode="before",
    )
    @classmethod
    def _blank_as_missing(cls, v):
        if v is None:
            return None
        v = str(v)
        return v if v.strip() else None

    @field_validator("items", mode="before")
    @classmethod
    def _items_default(cls, v):
        return v or []

    @property
    def status_enum(self) -> Optional[OrderStatus]:
        """Known status, or None when the backend sent something else."""
        try:
            return OrderStatus(self.status)
        except ValueError:
            return None


class CatalogProduct(BaseModel):
    """Catalog entry; only the join key and image are used here."""
    product_code: Optional[str] = None
    image: Optional[str] = None

    @field_validator("product_code", "image", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        if v is None:
            return None
        v = str(v)
        return v if v.strip() else None
