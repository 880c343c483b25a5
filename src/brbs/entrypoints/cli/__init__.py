"""The ``brbs`` command line."""
