from .equal import equal, not_equal, prefix_match

__all__ = ("equal", "not_equal", "prefix_match")
