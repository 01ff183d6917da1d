"""
Layout Sizing Tests
===================

The sizing rules are a pure function; every branch of the lookup tables is
checked here.
"""
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from furni_orders.sheet.sizing import LayoutSizes, SizingPolicy, compute_layout


def _layout(secondary=0, notes=0, leather=False, finish=False, **kwargs):
    return compute_layout(secondary, notes, leather, finish, **kwargs)


class TestSecondaryImageSteps(unittest.TestCase):
    def test_no_secondary_images(self):
        self.assertEqual(_layout(0), LayoutSizes(primary=340, thumbnail=216, swatch=100))

    def test_one_secondary_image(self):
        self.assertEqual(_layout(1), LayoutSizes(primary=320, thumbnail=200, swatch=100))

    def test_two_secondary_images(self):
        self.assertEqual(_layout(2), LayoutSizes(primary=300, thumbnail=180, swatch=100))

    def test_three_or_more_secondary_images(self):
        for count in (3, 4, 9):
            self.assertEqual(_layout(count), LayoutSizes(primary=280, thumbnail=160, swatch=100))


class TestNotesSteps(unittest.TestCase):
    def test_long_notes_with_secondary(self):
        sizes = _layout(2, notes=301)
        self.assertEqual((sizes.primary, sizes.thumbnail), (260, 150))

    def test_medium_notes_with_secondary(self):
        sizes = _layout(3, notes=151)
        self.assertEqual((sizes.primary, sizes.thumbnail), (260, 145))

    def test_threshold_is_exclusive(self):
        self.assertEqual(_layout(1, notes=150).primary, 320)
        self.assertEqual(_layout(1, notes=300).primary, 300)

    def test_long_notes_primary_only(self):
        self.assertEqual(_layout(0, notes=500).primary, 300)

    def test_medium_notes_primary_only(self):
        self.assertEqual(_layout(0, notes=200).primary, 320)

    def test_short_notes_primary_only(self):
        self.assertEqual(_layout(0, notes=20).primary, 340)


class TestSwatchHeight(unittest.TestCase):
    def test_both_swatches_with_secondary_images(self):
        self.assertEqual(_layout(1, leather=True, finish=True).swatch, 80)

    def test_both_swatches_without_secondary_images(self):
        self.assertEqual(_layout(0, leather=True, finish=True).swatch, 100)

    def test_single_swatch_with_secondary_images(self):
        self.assertEqual(_layout(2, leather=True).swatch, 100)


class TestMonotonic(unittest.TestCase):
    def test_more_content_never_grows_images(self):
        previous = None
        for count in range(0, 6):
            for notes in (0, 151, 301):
                sizes = _layout(count, notes=notes)
                if previous is not None and count > 0:
                    self.assertLessEqual(sizes.primary, previous)
                previous = sizes.primary
            previous = _layout(count).primary


class TestCustomPolicy(unittest.TestCase):
    def test_custom_tables(self):
        policy = SizingPolicy(
            secondary_steps=((1, 200, 100), (0, 250, 120)),
            swatch_height=90,
            swatch_height_crowded=60,
        )
        self.assertEqual(_layout(0, policy=policy), LayoutSizes(250, 120, 90))
        self.assertEqual(_layout(2, leather=True, finish=True, policy=policy),
                         LayoutSizes(200, 100, 60))

    def test_primary_image_max(self):
        self.assertEqual(_layout(0).primary_image_max, 328)


if __name__ == "__main__":
    unittest.main()
