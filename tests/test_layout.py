import unittest

from retap.config import LayoutConfig
from retap.layout import compute_layout
from retap.types import FieldLayout, ViewportSize


class ComputeLayoutTests(unittest.TestCase):
    def test_document_takes_half_less_margin(self) -> None:
        layout = compute_layout(ViewportSize(80, 24))
        self.assertEqual(layout, FieldLayout(document_width=80, document_height=11, output_width=75, output_height=9))

    def test_odd_height_rounds_down(self) -> None:
        layout = compute_layout(ViewportSize(60, 25))
        self.assertEqual(layout.document_height, 11)
        self.assertEqual(layout.output_height, 10)

    def test_margins_are_tunable(self) -> None:
        config = LayoutConfig(margin=2, border=0, padding_left=0)
        layout = compute_layout(ViewportSize(80, 24), config)
        self.assertEqual(layout, FieldLayout(80, 10, 80, 12))

    def test_tiny_terminal_clamps_to_one(self) -> None:
        layout = compute_layout(ViewportSize(2, 2))
        self.assertEqual(layout, FieldLayout(2, 1, 1, 1))

    def test_frame_fills_terminal(self) -> None:
        # pattern line + document + error line + bordered output
        for height in (20, 24, 25, 50, 51):
            layout = compute_layout(ViewportSize(80, height))
            self.assertEqual(1 + layout.document_height + 1 + layout.output_height + 2, height)


if __name__ == "__main__":
    unittest.main()
