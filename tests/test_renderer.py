from __future__ import annotations

import unittest

from exygraph import (
    AxisRange,
    CategoryLabelError,
    Chart,
    ChartColors,
    Padding,
    Point,
    Series,
    record_chart,
    render_chart,
)
from exygraph.recording import (
    AddArc,
    DrawText,
    FillLinearGradient,
    FillPath,
    LineTo,
    MoveTo,
    RecordingSurface,
    RestoreState,
    SaveState,
    Scale,
    StrokePath,
    Translate,
)


RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _series(values: list[float], **style) -> Series:
    return Series(points=tuple(Point(category=i % 12, value=v) for i, v in enumerate(values)), **style)


def _chart(*series: Series, **overrides) -> Chart:
    params = dict(y_mid_reference=50.0, series=series, y_range=AxisRange(0.0, 100.0))
    params.update(overrides)
    return Chart(**params)


class RendererTests(unittest.TestCase):
    def _render(self, chart: Chart, width: float = 320, height: float = 200, **kwargs) -> RecordingSurface:
        surface = RecordingSurface()
        render_chart(surface, width, height, chart, **kwargs)
        return surface

    def test_pass_is_wrapped_in_balanced_state_scope(self) -> None:
        surface = self._render(_chart(_series([1.0, 2.0, 3.0])))
        self.assertIsInstance(surface.commands[0], SaveState)
        self.assertIsInstance(surface.commands[-1], RestoreState)
        self.assertEqual(surface.depth, 0)
        self.assertEqual(len(surface.of_type(SaveState)), len(surface.of_type(RestoreState)))

    def test_background_gradient_spans_full_bounds_first(self) -> None:
        colors = ChartColors(top=RED, bottom=BLUE)
        surface = self._render(_chart(colors=colors), width=320, height=200)
        painted = [c for c in surface.commands if isinstance(c, (FillLinearGradient, StrokePath, FillPath, DrawText))]
        self.assertEqual(painted[0], FillLinearGradient(start=(0.0, 0.0), end=(0.0, 200.0), start_color=RED, end_color=BLUE))

    def test_axes_are_crisp_and_midline_is_dashed(self) -> None:
        surface = self._render(_chart())
        strokes = surface.of_type(StrokePath)
        self.assertEqual(len(strokes), 2)
        axes, midline = strokes[0].style, strokes[1].style
        self.assertFalse(axes.antialias)
        self.assertIsNone(axes.dash)
        self.assertEqual(axes.width, 1.0)
        self.assertFalse(midline.antialias)
        self.assertEqual(midline.dash, (8.0, 4.0))
        self.assertEqual(midline.dash_phase, 0.0)

        moves = surface.of_type(MoveTo)
        lines = surface.of_type(LineTo)
        self.assertEqual(moves, [MoveTo(10.0, 10.0), MoveTo(10.0, 190.0), MoveTo(10.0, 100.0)])
        self.assertEqual(lines, [LineTo(310.0, 10.0), LineTo(310.0, 190.0), LineTo(310.0, 100.0)])

    def test_axis_width_does_not_reach_axis_or_midline_strokes(self) -> None:
        for axis_width in (5.0, -2.0):
            surface = self._render(_chart(axis_width=axis_width))
            self.assertEqual([s.style.width for s in surface.of_type(StrokePath)], [1.0, 1.0])

    def test_x_range_does_not_move_points(self) -> None:
        series = _series([0.0, 50.0, 100.0])
        base = self._render(_chart(series)).of_type(AddArc)
        shifted = self._render(_chart(series, x_range=AxisRange(-40.0, 7.0))).of_type(AddArc)
        self.assertEqual(base, shifted)

    def test_zero_value_range_puts_midline_and_points_at_centre(self) -> None:
        chart = _chart(_series([1.0, 99.0]), y_range=AxisRange(5.0, 5.0), y_mid_reference=0.0)
        surface = self._render(chart)
        self.assertEqual(surface.of_type(MoveTo)[2], MoveTo(10.0, 100.0))
        self.assertEqual([arc.cy for arc in surface.of_type(AddArc)], [100.0, 100.0])

    def test_series_drawn_with_markers_line_and_labels(self) -> None:
        series = _series([0.0, 50.0, 100.0], stroke_color=RED, stroke_width=3.0, point_radius=4.0)
        surface = self._render(_chart(series), width=320, height=220)
        arcs = surface.of_type(AddArc)
        self.assertEqual([(a.cx, a.cy, a.radius) for a in arcs], [(60.0, 210.0, 4.0), (160.0, 110.0, 4.0), (260.0, 10.0, 4.0)])
        self.assertEqual([f.color for f in surface.of_type(FillPath)], [RED, RED, RED])

        line_strokes = [s.style for s in surface.of_type(StrokePath) if s.style.width == 3.0]
        self.assertEqual(len(line_strokes), 1)
        self.assertTrue(line_strokes[0].antialias)
        self.assertEqual(surface.of_type(MoveTo)[-1], MoveTo(60.0, 210.0))
        self.assertEqual(surface.of_type(LineTo)[-2:], [LineTo(160.0, 110.0), LineTo(260.0, 10.0)])

    def test_empty_series_draws_nothing(self) -> None:
        surface = self._render(_chart(_series([])))
        self.assertEqual(surface.of_type(AddArc), [])
        self.assertEqual(surface.of_type(FillPath), [])
        self.assertEqual(len(surface.of_type(StrokePath)), 2)
        self.assertEqual(len(surface.of_type(DrawText)), 2)

    def test_single_point_series_draws_marker_without_line(self) -> None:
        surface = self._render(_chart(_series([42.0])))
        self.assertEqual(len(surface.of_type(AddArc)), 1)
        self.assertEqual(len(surface.of_type(MoveTo)), 3)
        self.assertEqual(len(surface.of_type(LineTo)), 3)

    def test_every_fourth_point_gets_a_category_label(self) -> None:
        seen: list[int] = []

        def label(category: int) -> str:
            seen.append(category)
            return f"c{category}"

        series = Series(points=tuple(Point(category=i, value=float(i)) for i in range(10)))
        surface = self._render(_chart(series), category_label=label)
        self.assertEqual(seen, [0, 4, 8])
        texts = [cmd.text for cmd in surface.of_type(DrawText)]
        self.assertEqual(texts[:3], ["c0", "c4", "c8"])

    def test_category_label_centred_under_point(self) -> None:
        series = Series(points=(Point(category=0, value=10.0),))
        surface = self._render(_chart(series, padding=Padding(top=10, bottom=40, left=10, right=10)), width=200, height=200)
        jan = surface.of_type(DrawText)[0]
        self.assertEqual(jan.text, "Jan")
        width = 3 * 17.0 * 0.6
        self.assertAlmostEqual(jan.x, 100.0 - width / 2.0)
        self.assertAlmostEqual(jan.y, 40.0 - 17.0)
        self.assertEqual(jan.font_size_px, 17.0)

    def test_scale_labels_right_aligned_at_rect_edges(self) -> None:
        surface = self._render(_chart(), width=320, height=200)
        upper, lower = surface.of_type(DrawText)
        self.assertEqual((upper.text, lower.text), ("100", "0"))
        self.assertAlmostEqual(upper.x, 310.0 - 3 * 11.0 * 0.6)
        self.assertAlmostEqual(upper.y, 200.0 - 10.0 - 11.0)
        self.assertAlmostEqual(lower.x, 310.0 - 11.0 * 0.6)
        self.assertAlmostEqual(lower.y, 10.0 + 5.5)

    def test_axis_title_centred_under_axis(self) -> None:
        surface = self._render(_chart(x_axis_title="Month"), width=320, height=200)
        title = surface.of_type(DrawText)[0]
        self.assertEqual(title.text, "Month")
        self.assertAlmostEqual(title.x, 10.0 + 150.0 - 5 * 17.0 * 0.6 / 2.0)
        self.assertEqual(title.y, 0.0)

    def test_every_label_is_drawn_in_flipped_space(self) -> None:
        series = _series([float(i) for i in range(9)])
        surface = self._render(_chart(series, x_axis_title="t"), width=320, height=200)
        stack: list[list[object]] = []
        active: list[object] = []
        text_count = 0
        for cmd in surface.commands:
            if isinstance(cmd, SaveState):
                stack.append(list(active))
            elif isinstance(cmd, RestoreState):
                active = stack.pop()
            elif isinstance(cmd, (Translate, Scale)):
                active.append(cmd)
            elif isinstance(cmd, DrawText):
                text_count += 1
                self.assertEqual(active, [Translate(0.0, 200.0), Scale(1.0, -1.0)])
        self.assertEqual(text_count, 3 + 1 + 2)

    def test_series_follow_list_order(self) -> None:
        chart = _chart(_series([1.0], stroke_color=RED), _series([2.0], stroke_color=BLUE))
        surface = self._render(chart)
        self.assertEqual([f.color for f in surface.of_type(FillPath)], [RED, BLUE])

    def test_negative_radius_and_width_are_clamped(self) -> None:
        surface = self._render(_chart(_series([1.0, 2.0], point_radius=-3.0, stroke_width=-2.0)))
        self.assertEqual([a.radius for a in surface.of_type(AddArc)], [0.0, 0.0])
        self.assertEqual(surface.of_type(StrokePath)[-1].style.width, 0.0)

    def test_zero_length_axis_skips_geometry(self) -> None:
        surface = self._render(_chart(_series([1.0, 2.0, 3.0])), width=15, height=200)
        self.assertEqual(surface.of_type(StrokePath), [])
        self.assertEqual(surface.of_type(AddArc), [])
        self.assertEqual(len(surface.of_type(FillLinearGradient)), 1)
        self.assertEqual(len(surface.of_type(DrawText)), 2)
        self.assertEqual(surface.depth, 0)

    def test_out_of_range_category_propagates_and_restores_state(self) -> None:
        series = Series(points=tuple(Point(category=i, value=1.0) for i in range(13)))
        surface = RecordingSurface()
        with self.assertRaises(CategoryLabelError):
            render_chart(surface, 320, 200, _chart(series))
        self.assertEqual(surface.depth, 0)

    def test_render_pass_is_deterministic(self) -> None:
        chart = _chart(_series([3.0, 1.0, 4.0, 1.0, 5.0, 9.0], stroke_color=RED), x_axis_title="Month")
        self.assertEqual(record_chart(chart, 320, 200), record_chart(chart, 320, 200))

    def test_render_does_not_mutate_chart(self) -> None:
        chart = _chart(_series([3.0, 1.0, 4.0]))
        before = (chart.series[0].points, chart.y_range, chart.padding)
        record_chart(chart, 320, 200)
        self.assertEqual((chart.series[0].points, chart.y_range, chart.padding), before)


if __name__ == "__main__":
    unittest.main()
