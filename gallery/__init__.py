"""
gallery/
--------
Page assembly for the gallery build.

Modules:
- assemble: pairs entries with index-aligned thumbnails and slides
- render: Jinja2 page rendering and output
"""
