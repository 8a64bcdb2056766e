# ABOUTME: dexsearch package root.
# ABOUTME: Multi-criteria Pokemon species search over an in-memory catalog.

__version__ = "0.1.0"
