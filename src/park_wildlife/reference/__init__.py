"""Static park reference data.

Data that doesn't change with API calls: the park envelope, named park
areas, and the curated local species list.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from park_wildlife.reference.geography import INAT_PLACE_ID as INAT_PLACE_ID
from park_wildlife.reference.geography import PARK_BOUNDS as PARK_BOUNDS
from park_wildlife.reference.geography import PARK_CENTER as PARK_CENTER
from park_wildlife.reference.geography import PARK_NAME as PARK_NAME
from park_wildlife.reference.geography import BoundingBox as BoundingBox
from park_wildlife.reference.geography import Point as Point
from park_wildlife.reference.local_species import LOCAL_SPECIES as LOCAL_SPECIES
from park_wildlife.reference.park_areas import PARK_AREAS as PARK_AREAS
from park_wildlife.reference.park_areas import ParkArea as ParkArea
