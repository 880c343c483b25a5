"""BRBS test suite.

Folder taxonomy
- unit/         : One module, class or function at a time, no real I/O.
- contract/     : Behaviour every DocumentStore backend and every catalog must
                  share, parametrized over the in-memory and SQLite stores.
- integration/  : Alembic migrations, bootstrap wiring and real SQLite files.
- e2e/          : The ``brbs`` command line through Click's CliRunner.
- fixtures/     : Shared pytest fixtures, loaded as plugins (no tests here).

Property-based tests use Hypothesis and carry @pytest.mark.property.
"""
