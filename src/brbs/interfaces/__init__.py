"""Ports (framework-free interfaces and read models) for BRBS."""
