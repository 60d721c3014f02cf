"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the orthant
numbering library: the Point value type, pure combinatorial algorithms,
write-once memo caches and JSON contracts.
"""
