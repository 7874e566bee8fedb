"""
Core array primitives and domain models.

This module contains stateless operations over integer sequences and
integer matrices, independent of any I/O or persistence.
"""
