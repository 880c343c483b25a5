"""Unit tests.

Fast, deterministic checks of a single module. Fakes stand in for catalogs
and stores; no databases, files or clocks.
"""
