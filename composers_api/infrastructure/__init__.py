"""
Infrastructure layer package.

Concrete implementations (adapters) of the ports defined in the
domain layer. The record store lives here.
"""
