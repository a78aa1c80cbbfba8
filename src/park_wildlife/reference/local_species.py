"""Curated species bundled with the package.

Served on their own when the provider is disabled or unreachable, and merged
behind provider records otherwise. Ids carry no ``inat-`` prefix.
"""

from __future__ import annotations

from park_wildlife.schemas import (
    Availability,
    ImageSource,
    Location,
    PhotoAttribution,
    Seasonality,
    Species,
    SpeciesType,
)


def _local_image(path: str) -> PhotoAttribution:
    return PhotoAttribution(url=path, source=ImageSource.LOCAL)


LOCAL_SPECIES: tuple[Species, ...] = (
    Species(
        id="coyote-1",
        name="Coyote",
        scientific_name="Canis latrans",
        type=SpeciesType.ANIMAL,
        category="mammal",
        description=(
            "Coyotes have returned to Golden Gate Park and the Presidio since 2002. "
            "These adaptable predators are most active during dawn and dusk hours."
        ),
        image="/images/coyote.jpg",
        image_attribution=_local_image("/images/coyote.jpg"),
        location=Location(lat=37.7703, lng=-122.4751, area="Western sections near Beach Chalet"),
        seasonality=Seasonality(
            best_months=[1, 2, 3, 10, 11, 12],
            availability=Availability.YEAR_ROUND,
            peak_time="Dawn and dusk",
            behavior="More active in cooler months, often seen near dawn and dusk",
        ),
        habitat="Open grasslands, wooded areas, and park edges",
        conservation_status="Least Concern",
    ),
    Species(
        id="california-poppy-1",
        name="California Poppy",
        scientific_name="Eschscholzia californica",
        type=SpeciesType.PLANT,
        category="flower",
        description=(
            "California's state flower blooms in vibrant orange across "
            "Golden Gate Park's meadows and hillsides."
        ),
        image="/images/california-poppy.jpg",
        image_attribution=_local_image("/images/california-poppy.jpg"),
        location=Location(lat=37.7691, lng=-122.4583, area="Hippie Hill and surrounding meadows"),
        seasonality=Seasonality(
            best_months=[3, 4, 5, 6, 7],
            availability=Availability.SEASONAL,
            peak_time="Spring through early summer",
            behavior="Peak blooming in spring, flowers close at night and on cloudy days",
        ),
        habitat="Grasslands, meadows, and hillsides",
        conservation_status="Least Concern",
    ),
    Species(
        id="red-tailed-hawk-1",
        name="Red-tailed Hawk",
        scientific_name="Buteo jamaicensis",
        type=SpeciesType.ANIMAL,
        category="bird",
        description=(
            "Large raptors frequently seen soaring over Golden Gate Park, "
            "hunting for small mammals and birds."
        ),
        image="/images/red-tailed-hawk.jpg",
        image_attribution=_local_image("/images/red-tailed-hawk.jpg"),
        location=Location(lat=37.7715, lng=-122.4690, area="Eucalyptus groves and open areas"),
        seasonality=Seasonality(
            best_months=[1, 2, 3, 4, 9, 10, 11, 12],
            availability=Availability.YEAR_ROUND,
            peak_time="Morning and late afternoon",
            behavior="More visible during migration periods in fall and spring",
        ),
        habitat="Open woodlands, parks, and urban areas with tall perches",
        conservation_status="Least Concern",
    ),
    Species(
        id="coast-live-oak-1",
        name="Coast Live Oak",
        scientific_name="Quercus agrifolia",
        type=SpeciesType.PLANT,
        category="tree",
        description=(
            "Iconic California native oak trees that provide habitat for "
            "numerous wildlife species."
        ),
        image="/images/coast-live-oak.jpg",
        image_attribution=_local_image("/images/coast-live-oak.jpg"),
        location=Location(
            lat=37.7698,
            lng=-122.4612,
            area="Throughout the park, especially near Japanese Tea Garden",
        ),
        seasonality=Seasonality(
            availability=Availability.YEAR_ROUND,
            peak_time="Year-round presence",
            behavior="Acorn production peaks in fall, providing food for wildlife",
        ),
        habitat="Mixed woodlands and park areas",
        conservation_status="Least Concern",
    ),
    Species(
        id="california-scrub-jay-1",
        name="California Scrub Jay",
        scientific_name="Aphelocoma californica",
        type=SpeciesType.ANIMAL,
        category="bird",
        description=(
            "Intelligent blue birds known for their problem-solving abilities "
            "and acorn caching behavior."
        ),
        image="/images/scrub-jay.jpg",
        image_attribution=_local_image("/images/scrub-jay.jpg"),
        location=Location(lat=37.7685, lng=-122.4645, area="Oak woodlands and picnic areas"),
        seasonality=Seasonality(
            availability=Availability.YEAR_ROUND,
            peak_time="Most active in morning",
            behavior="Very active during acorn season (fall), highly social year-round",
        ),
        habitat="Oak woodlands, scrublands, and park areas",
        conservation_status="Least Concern",
    ),
    Species(
        id="douglas-iris-1",
        name="Douglas Iris",
        scientific_name="Iris douglasiana",
        type=SpeciesType.PLANT,
        category="flower",
        description="Native California wildflower with striking blue-purple blooms in spring.",
        image="/images/douglas-iris.jpg",
        image_attribution=_local_image("/images/douglas-iris.jpg"),
        location=Location(lat=37.7681, lng=-122.4702, area="Native plant areas and hillsides"),
        seasonality=Seasonality(
            best_months=[3, 4, 5, 6],
            availability=Availability.SEASONAL,
            peak_time="Spring blooming season",
            behavior="Peak blooming March through May, dormant in summer",
        ),
        habitat="Coastal grasslands and native plant gardens",
        conservation_status="Least Concern",
    ),
)
