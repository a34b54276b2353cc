"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational 2-D geometry building blocks that the
shape modules are built on.
"""
