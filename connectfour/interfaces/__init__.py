"""
connectfour.interfaces - User interfaces for Connect Four

This package contains front ends that drive the game engine, currently
a terminal CLI.
"""

# Don't import anything here to avoid circular imports
__all__ = []
