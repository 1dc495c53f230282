"""
microgallery/
-------------
Static gallery builder for illustrated micro-fiction feeds.
"""

__version__ = "0.1.0"
