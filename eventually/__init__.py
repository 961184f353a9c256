"""Filters, limits, and the eventually quantifier, with BDDs."""
try:
    from eventually._version import version as __version__
except ImportError:
    __version__ = None
