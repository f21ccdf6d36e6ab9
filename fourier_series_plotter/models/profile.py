"""Plot profile -- bundles all presentation-relevant configuration.

A PlotProfile groups every parameter that affects how results are drawn
into one frozen dataclass.  It can be:

- Constructed with defaults matching the standard two-canvas layout
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict (and loaded from a JSON file)
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union


@dataclass(frozen=True)
class DrawingBox:
    """Fixed-size drawing surface with a uniform margin on all sides (pixels).

    The usable area is ``(width - 2*margin) x (height - 2*margin)``.
    """

    width: float
    height: float
    margin: float

    @property
    def inner_width(self) -> float:
        return float(self.width) - 2.0 * float(self.margin)

    @property
    def inner_height(self) -> float:
        return float(self.height) - 2.0 * float(self.margin)


@dataclass(frozen=True)
class PlotProfile:
    """Frozen configuration for the waveform and harmonics canvases.

    Canvas geometry
    ---------------
    graph_width, graph_height : int
        Waveform canvas size in pixels.
    harmonics_width, harmonics_height : int
        Harmonic bar-chart canvas size in pixels.
    margin : int
        Uniform margin (pixels) on both canvases.

    Grid
    ----
    grid_lines_x, grid_lines_y : int
        Number of grid intervals on the waveform canvas.
    harmonic_grid_lines_y : int
        Number of amplitude grid intervals on the harmonics canvas.

    Styling
    -------
    Colours are matplotlib-compatible strings.

    UI defaults
    -----------
    default_start, default_end, default_harmonics, default_samples
        Initial values of the input fields.
    max_harmonics_ui : int
        Largest harmonic count the notebook panel and the CLI accept.
    """

    graph_width: int = 800
    graph_height: int = 400
    harmonics_width: int = 800
    harmonics_height: int = 300
    margin: int = 40

    grid_lines_x: int = 10
    grid_lines_y: int = 10
    harmonic_grid_lines_y: int = 5

    grid_color: str = "#ddd"
    axis_color: str = "#000"
    signal_color: str = "#f00"
    approximation_color: str = "#00f"
    harmonics_color: str = "#0f0"
    line_width: float = 2.0
    font_size: float = 9.0

    default_start: float = 0.0
    default_end: float = 2.0 * math.pi
    default_harmonics: int = 5
    default_samples: int = 200
    max_harmonics_ui: int = 200

    # ------------------------------------------------------------------
    # Boxes
    # ------------------------------------------------------------------

    def graph_box(self) -> DrawingBox:
        return DrawingBox(width=self.graph_width, height=self.graph_height, margin=self.margin)

    def harmonics_box(self) -> DrawingBox:
        return DrawingBox(width=self.harmonics_width, height=self.harmonics_height, margin=self.margin)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> PlotProfile:
        """Reconstruct from a dict (e.g. loaded from JSON). Unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown PlotProfile keys: {unknown}")
        return cls(**dict(d))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> PlotProfile:
        p = Path(path)
        with p.open("r", encoding="utf-8") as fh:
            d = json.load(fh)
        if not isinstance(d, dict):
            raise ValueError(f"{p.name}: expected a JSON object, got {type(d).__name__}")
        return cls.from_dict(d)
