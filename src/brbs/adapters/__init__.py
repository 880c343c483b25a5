"""Adapters implementing the BRBS ports."""
