"""Support namespace for cross-cutting, dependency-light helpers.

Scope:
- Small, stateless helpers with minimal dependencies (timestamp parsing,
  text matching).
- No business rules, no orchestration, no wiring.

Import direction:
- May be imported by any BRBS package.
- Must not import from application packages.

Nothing is re-exported at the package level. Import helpers from their
defining modules.
"""
