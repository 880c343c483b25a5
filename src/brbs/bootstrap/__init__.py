"""Bootstrap (composition root) for BRBS.

Wires concrete adapters (document store, catalogs, actor provider) into an
`AppContainer` for the entrypoints, reading configuration from `brbs.config`.

Import rules:
- Entry points import *this* package rather than reaching into adapters.
- Inner layers must not import `brbs.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_store

__all__ = ["AppContainer", "bootstrap", "build_store"]
