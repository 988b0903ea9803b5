"""HTTP surface for the catalog bounded context."""
