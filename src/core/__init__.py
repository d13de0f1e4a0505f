"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the liquid drop
model calculator: the element catalog, the Isotope value object and the
semi-empirical mass formula. It performs no I/O beyond the one-time load
of the bundled element table.
"""
