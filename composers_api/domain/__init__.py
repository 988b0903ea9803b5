"""
Domain layer package.

Contains entities, field constraints, failure values and port
interfaces. No framework imports, no IO, no side effects.
"""
