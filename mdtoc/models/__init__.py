from .heading import HeadingNode, HeadingTree, NodeKind
from .configs import TocSettings

__all__ = ["HeadingNode", "HeadingTree", "NodeKind", "TocSettings"]
