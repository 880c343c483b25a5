"""Entry points for BRBS (currently the ``brbs`` command line)."""
