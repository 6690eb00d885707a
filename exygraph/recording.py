from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeAlias

from exygraph.chart import RGBA
from exygraph.surface import StrokeStyle


@dataclass(frozen=True)
class SaveState:
    pass


@dataclass(frozen=True)
class RestoreState:
    pass


@dataclass(frozen=True)
class Translate:
    tx: float
    ty: float


@dataclass(frozen=True)
class Scale:
    sx: float
    sy: float


@dataclass(frozen=True)
class BeginPath:
    pass


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class AddArc:
    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class StrokePath:
    style: StrokeStyle


@dataclass(frozen=True)
class FillPath:
    color: RGBA


@dataclass(frozen=True)
class FillLinearGradient:
    start: tuple[float, float]
    end: tuple[float, float]
    start_color: RGBA
    end_color: RGBA


@dataclass(frozen=True)
class DrawText:
    x: float
    y: float
    text: str
    color: RGBA
    font_size_px: float


DrawCommand: TypeAlias = (
    SaveState
    | RestoreState
    | Translate
    | Scale
    | BeginPath
    | MoveTo
    | LineTo
    | AddArc
    | StrokePath
    | FillPath
    | FillLinearGradient
    | DrawText
)

TextMeasure: TypeAlias = Callable[[str, float], tuple[float, float]]


def monospace_measure(text: str, font_size_px: float) -> tuple[float, float]:
    return (len(text) * font_size_px * 0.6, float(font_size_px))


@dataclass
class RecordingSurface:
    """Surface that records every drawing call instead of painting."""

    measure: TextMeasure = monospace_measure
    commands: list[DrawCommand] = field(default_factory=list)
    _depth: int = 0

    @property
    def depth(self) -> int:
        return self._depth

    def save_state(self) -> None:
        self._depth += 1
        self.commands.append(SaveState())

    def restore_state(self) -> None:
        if self._depth <= 0:
            raise RuntimeError("restore_state without matching save_state")
        self._depth -= 1
        self.commands.append(RestoreState())

    def translate(self, tx: float, ty: float) -> None:
        self.commands.append(Translate(float(tx), float(ty)))

    def scale(self, sx: float, sy: float) -> None:
        self.commands.append(Scale(float(sx), float(sy)))

    def begin_path(self) -> None:
        self.commands.append(BeginPath())

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(MoveTo(float(x), float(y)))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(LineTo(float(x), float(y)))

    def add_arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        self.commands.append(AddArc(float(cx), float(cy), float(radius), float(start_angle), float(end_angle)))

    def stroke_path(self, style: StrokeStyle) -> None:
        self.commands.append(StrokePath(style))

    def fill_path(self, color: RGBA) -> None:
        self.commands.append(FillPath(color))

    def fill_linear_gradient(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        start_color: RGBA,
        end_color: RGBA,
    ) -> None:
        self.commands.append(
            FillLinearGradient(
                start=(float(start[0]), float(start[1])),
                end=(float(end[0]), float(end[1])),
                start_color=start_color,
                end_color=end_color,
            )
        )

    def text_size(self, text: str, font_size_px: float) -> tuple[float, float]:
        return self.measure(text, font_size_px)

    def draw_text(self, x: float, y: float, text: str, color: RGBA, font_size_px: float) -> None:
        self.commands.append(DrawText(float(x), float(y), text, color, float(font_size_px)))

    def of_type(self, kind: type) -> list[DrawCommand]:
        return [cmd for cmd in self.commands if isinstance(cmd, kind)]
