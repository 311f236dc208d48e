"""
Core domain models, money primitives, and contracts.

This module contains the foundational building blocks that are independent
of the checkout policies built on top of them.
"""
