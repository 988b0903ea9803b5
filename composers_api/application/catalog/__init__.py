"""
Application layer for the catalog bounded context.

One use case per HTTP operation. Use cases coordinate domain
entities and the ComposerRepository port; they return StoreResult
values and never translate failures into HTTP themselves.
"""
