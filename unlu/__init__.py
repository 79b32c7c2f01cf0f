"""List, test and extract LU (.lbr) library archives."""

__version__ = "0.1.0"