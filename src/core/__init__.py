"""
Core numeric primitives, value objects, and payload contracts.

This module contains the pure building blocks that are independent of the
node-execution engine (graph evaluation, scheduling, caching).
"""
