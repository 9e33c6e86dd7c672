"""Line framing: splitting raw increments and classifying lines."""

from .classifier import EventClassifier
from .splitter import FrameSplitter

__all__ = ["EventClassifier", "FrameSplitter"]
