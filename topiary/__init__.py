"""Topiary: hierarchical, resumable topics of conversation.

A conversation is modeled as a tree of topics, each delegating to at most
one active sub-topic. The tree is rebuilt from serialized state on every
turn, so only plain JSON data crosses a turn boundary.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
