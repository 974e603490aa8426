"""
Core mathematical primitives.

This module contains the foundational building blocks shared by all
operator families: the Truth scalar and finiteness checks.
"""
