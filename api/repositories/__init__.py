"""
Persistence adapters.

These modules encapsulate how person records are stored and retrieved.
Services depend on the repository rather than opening sessions themselves.
"""
