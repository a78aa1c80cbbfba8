"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, rate limiting, error translation
    ├── transform.py      # Provider records -> schemas.Species
    └── {feature}.py      # Query classes/functions (one per concept)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``inaturalist/`` for the reference layout.

2. Use the shared session and translate failures::

       from park_wildlife.services.http import session

       resp = session.get(API_URL, params={...})
       resp.raise_for_status()   # wrap requests errors in TransportError

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire it into ``repository.SpeciesRepository``.

5. Add tests in ``tests/test_{name}.py``.
"""
