"""
Core mathematical primitives, domain models, and contracts.

This module contains the foundational building blocks of the precise
calculator; it has no knowledge of the chaining engine.
"""
