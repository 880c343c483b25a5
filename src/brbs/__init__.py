"""BRBS

Content core for the Blue Ridge Bonsai Society website. It provides the
gallery, learning, forum and event catalogs, a member directory, and a
site-wide search aggregator over a pluggable document store.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
