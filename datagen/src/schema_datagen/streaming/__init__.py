"""Live feed producing time-stamped documents with moving geo points."""

from .live_feed import LiveFeed

__all__ = ["LiveFeed"]
