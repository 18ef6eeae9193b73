"""Tree traversal producers over level-order arrays."""

from .breadth_first import breadth_first_search
from .depth_first import TraversalOrder, depth_first_search

__all__ = ["breadth_first_search", "depth_first_search", "TraversalOrder"]
