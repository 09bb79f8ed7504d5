"""
Core domain models, crypto primitives, and contracts.

This module contains the foundational building blocks that are independent
of external systems (key vaults, HSMs, networks).
"""
