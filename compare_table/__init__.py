"""compare-table — colour a matrix of values against a baseline matrix."""

__version__ = '0.1.0'
