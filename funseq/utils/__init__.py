"""
Utility functions module.

Argument guards shared by every operation and fixed-width integer
arithmetic helpers.
"""
