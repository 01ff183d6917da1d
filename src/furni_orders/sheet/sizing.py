"""
Production Sheet – Layout Sizing
================================

Every item must fit on one fixed-height A4 page (~750px usable once header,
notes, table and footer are placed). The more secondary images and note text
an item carries, the smaller its pictures are drawn.

The rules are plain lookup tables on ``SizingPolicy`` so a caller can swap in
different constants without touching the decision logic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# (minimum secondary image count, primary px, thumbnail px), checked top-down
SECONDARY_IMAGE_STEPS: Tuple[Tuple[int, int, int], ...] = (
    (3, 280, 160),
    (2, 300, 180),
    (1, 320, 200),
    (0, 340, 216),
)

# (notes length greater than, primary delta, thumbnail delta)
NOTES_STEPS_WITH_SECONDARY: Tuple[Tuple[int, int, int], ...] = (
    (300, -40, -30),
    (150, -20, -15),
)

# (notes length greater than, primary px) when there are no secondary images
NOTES_STEPS_PRIMARY_ONLY: Tuple[Tuple[int, int], ...] = (
    (300, 300),
    (150, 320),
)


@dataclass(frozen=True)
class LayoutSizes:
    primary: int
    thumbnail: int
    swatch: int

    @property
    def primary_image_max(self) -> int:
        """Max image height inside the padded primary frame."""
        return self.primary - 12


@dataclass(frozen=True)
class SizingPolicy:
    """Lookup tables driving :func:`compute_layout`."""
    secondary_steps: Tuple[Tuple[int, int, int], ...] = SECONDARY_IMAGE_STEPS
    notes_steps_with_secondary: Tuple[Tuple[int, int, int], ...] = NOTES_STEPS_WITH_SECONDARY
    notes_steps_primary_only: Tuple[Tuple[int, int], ...] = NOTES_STEPS_PRIMARY_ONLY
    max_thumbnails: int = 4
    swatch_height: int = 100
    swatch_height_crowded: int = 80


DEFAULT_POLICY = SizingPolicy()


def compute_layout(
    secondary_count: int,
    notes_length: int,
    has_leather: bool,
    has_finish: bool,
    policy: SizingPolicy = DEFAULT_POLICY,
) -> LayoutSizes:
    """
    Pick primary, thumbnail and swatch sizes for one page.

    Args:
        secondary_count: Number of secondary images (before the thumbnail cap).
        notes_length: Length of the item's note text.
        has_leather: Whether a leather swatch is shown.
        has_finish: Whether a finish swatch is shown.
        policy: Sizing tables to use.
    """
    shown = min(secondary_count, policy.max_thumbnails)

    primary, thumbnail = next(
        (p, t) for minimum, p, t in policy.secondary_steps if shown >= minimum
    )

    if shown > 0:
        for threshold, d_primary, d_thumb in policy.notes_steps_with_secondary:
            if notes_length > threshold:
                primary += d_primary
                thumbnail += d_thumb
                break
    else:
        for threshold, p in policy.notes_steps_primary_only:
            if notes_length > threshold:
                primary = p
                break

    crowded = has_leather and has_finish and shown > 0
    swatch = policy.swatch_height_crowded if crowded else policy.swatch_height

    return LayoutSizes(primary=primary, thumbnail=thumbnail, swatch=swatch)
