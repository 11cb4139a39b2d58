"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the command-line interface used to play matches and
exercise the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
