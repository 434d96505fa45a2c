"""
Core density model, mathematical primitives, result models and contracts.

This package is free of I/O: every public function is a pure function of
its scalar inputs and the compiled-in coefficient tables.
"""
