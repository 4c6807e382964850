"""
Core arbitrary-precision integer arithmetic.

This module contains the digit-vector primitives and the BigInt value type
built on them. It has no dependencies on I/O or external systems.
"""
