"""Great-circle distance and radius filtering for located records."""
import math
from typing import Any, Iterable, List, Mapping, Optional, Protocol, TypeVar, Union

from pydantic import ValidationError

from golfpro.schemas.geocoding import Coordinates

EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.60934
MILES_PER_KM = 0.621371


class LocatedEntity(Protocol):
    """Anything with optional latitude/longitude attributes."""

    latitude: Optional[float]
    longitude: Optional[float]


E = TypeVar("E")


def distance(a: Coordinates, b: Coordinates) -> float:
    """
    Haversine distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometres
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for near-antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def entity_coordinates(entity: Union[LocatedEntity, Mapping[str, Any]]) -> Optional[Coordinates]:
    """
    Coordinates of a record, or None when it cannot be placed.

    Records may be objects or mappings. Missing, non-numeric and
    out-of-range values all give None.
    """
    if isinstance(entity, Mapping):
        latitude = entity.get("latitude")
        longitude = entity.get("longitude")
    else:
        latitude = getattr(entity, "latitude", None)
        longitude = getattr(entity, "longitude", None)
    if latitude is None or longitude is None:
        return None
    try:
        return Coordinates(latitude=latitude, longitude=longitude)
    except (ValidationError, TypeError, ValueError):
        return None


def filter_within_radius(
    entities: Iterable[E],
    center: Coordinates,
    max_km: float
) -> List[E]:
    """
    Keep the entities whose distance to ``center`` is at most ``max_km``.

    Entities without usable coordinates are dropped. Input order is preserved.

    Args:
        entities: Objects or mappings exposing latitude/longitude
        center: Search centre
        max_km: Radius in kilometres

    Returns:
        Matching entities in their original order
    """
    within = []
    for entity in entities:
        coordinates = entity_coordinates(entity)
        if coordinates is None:
            continue
        if distance(coordinates, center) <= max_km:
            within.append(entity)
    return within


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE
