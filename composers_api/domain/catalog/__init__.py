"""Catalog bounded context: composer records."""
