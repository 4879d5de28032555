"""Contains the calendar types and the conversion functions between calendar systems.

The numeric core accepts any integer triple and never raises. Validation of
user-supplied dates lives in :mod:`taqvim.text.parsing`.
"""
