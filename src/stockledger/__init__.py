"""Warehouse inventory ledger: product catalog, stock movements and kardex."""

__version__ = "1.0.0"
