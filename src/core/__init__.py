"""
Core domain models, mathematical primitives, and invariants.

This module contains the Universal Time building blocks that are independent
of external systems (I/O, persistence, reflection).
"""
