"""
courtslots - slot generation and availability classification for bookable courts.
"""

__version__ = "0.1.0"
