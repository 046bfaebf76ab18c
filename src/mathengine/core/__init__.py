"""
Core numeric engine: math primitives, engine limits, call contracts
and boundary models.

Everything here is pure and stateless; no component retains a reference
to caller data after a call returns.
"""
