"""
Core utilities shared across the person records API.

This package hosts configuration helpers (env vars, defaults) and
cross-cutting setup such as logging. Routers and services depend on these
primitives instead of reading os.environ or configuring handlers themselves.
"""
