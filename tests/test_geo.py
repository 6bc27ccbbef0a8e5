import math

import pytest
from pydantic import ValidationError

from ring360.models.geo import GeoPoint, Heading


def test_geopoint_longitude_uses_gis_convention():
    p = GeoPoint(lat_deg=10.0, lon_deg=-60.0)
    assert p.longitude.degrees == 300.0
    assert p.longitude.rotations == 0


def test_lon_offset_across_antimeridian():
    a = GeoPoint(lat_deg=0.0, lon_deg=143.32)
    b = GeoPoint(lat_deg=0.0, lon_deg=-111.4)
    assert a.lon_offset_to(b) == pytest.approx(105.28)
    assert b.lon_offset_to(a) == pytest.approx(-105.28)


def test_lon_shift_wraps():
    p = GeoPoint(lat_deg=45.0, lon_deg=170.0, alt_m=12.0)
    east = p.with_lon_shift(20.0)
    assert east.lon_deg == pytest.approx(-170.0)
    assert east.lat_deg == 45.0 and east.alt_m == 12.0
    # lands exactly on the antimeridian, reported as +180
    assert p.with_lon_shift(-350.0).lon_deg == 180.0


def test_lon_shift_revalidates_the_point():
    p = GeoPoint(lat_deg=0.0, lon_deg=10.0)
    with pytest.raises(ValidationError):
        p.with_lon_shift(math.inf)
    with pytest.raises(ValidationError):
        p.with_lon_shift(math.nan)


def test_geopoint_validation():
    with pytest.raises(ValidationError):
        GeoPoint(lat_deg=95.0, lon_deg=0.0)
    with pytest.raises(ValidationError):
        GeoPoint(lat_deg=0.0, lon_deg=200.0)


@pytest.mark.parametrize(
    "north, east, heading",
    [(1.0, 0.0, 0.0), (0.0, 1.0, 90.0), (-1.0, 0.0, 180.0), (0.0, -1.0, 270.0), (3.0, 3.0, 45.0)],
)
def test_heading_from_components(north, east, heading):
    assert Heading.from_components(north, east).heading_deg == pytest.approx(heading)


def test_heading_turn():
    assert Heading(heading_deg=350.0).turn_to(Heading(heading_deg=10.0)) == pytest.approx(20.0)
    assert Heading(heading_deg=10.0).turn_to(Heading(heading_deg=350.0)) == pytest.approx(-20.0)
    assert Heading(heading_deg=90.0).bearing.sin() == pytest.approx(1.0)
    with pytest.raises(ValidationError):
        Heading(heading_deg=360.0)
