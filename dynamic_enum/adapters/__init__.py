"""Data source adapters.

Adapters implement protocols defined in core/protocols/.
Each adapter wraps one place records can come from (static list, file, HTTP).
"""
