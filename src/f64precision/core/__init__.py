"""
Core numerical primitives, display handle, and data contracts.

Pure functions over immutable values: no shared state, no I/O beyond the
caller-supplied sink.
"""
