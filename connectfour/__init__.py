"""
connectfour - Connect Four game engine

This package provides a headless implementation of the Connect Four game:
a board representation, a turn-enforcing game engine with win and draw
detection, and thin terminal and Gymnasium front ends that drive it.
"""

# Version number
__version__ = '0.1.0'
