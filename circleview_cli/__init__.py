"""
circleview CLI - Command-line interface for circular image rendering.

Usage:
    circleview render photo.jpg avatar.png --size 200 --border-width 4 --border-color "#ffffff"
    circleview geometry --source 200x100 --viewport 100x100
"""

__version__ = "1.0.0"
