"""
collection/
-----------
Feed acquisition for the gallery build.
"""
