"""Infrastructure Layer: data source implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - The only layer allowed to perform IO
    - Failures raised as OnionError subclasses (core/errors.py), never swallowed
"""
