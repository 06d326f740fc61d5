"""
ataman - leader-key binding configuration compiler
"""

__version__ = "0.3.0"
