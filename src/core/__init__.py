"""
Core exact arithmetic: integer primitives, value objects, and contracts.

This module contains the foundational building blocks that are independent
of any I/O: pure computation over arbitrary-precision integers.
"""
