"""Service layer: use cases that combine several catalogs."""
