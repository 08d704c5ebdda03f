"""
Air Hockey: a two-player air hockey simulation
"""

__version__ = "0.1.0"
