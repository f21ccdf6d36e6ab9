from .profile import DrawingBox, PlotProfile
from .results import ApproximationSet, CoefficientSet
from .signal import Interval, SampleSet

__all__ = [
    "DrawingBox",
    "PlotProfile",
    "ApproximationSet",
    "CoefficientSet",
    "Interval",
    "SampleSet",
]
