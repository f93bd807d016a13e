import warnings
import pytest
import numpy as np
import astropy.units as u
import astropy.constants as const
import star_utilities as su
from star_utilities import StarProperties


def test_default_star_is_the_sun():
    sun = StarProperties()
    assert sun.temperature == su.SUN_TEMPERATURE
    assert sun.radius == su.SUN_RADIUS
    assert sun.spectral_class == 'G2'
    assert sun.solar_radius == 1.0
    assert sun.solar_temperature == 1.0
    assert sun.solar_luminosity == pytest.approx(1.0, rel=0.01)
    assert sun.normalized_luminosity == pytest.approx(0.5, abs=1e-3)

def test_temperature_is_stored_as_whole_kelvin():
    star = StarProperties(temperature=6543.9, radius=1000)
    assert star.temperature == 6543
    assert isinstance(star.temperature, int)
    assert isinstance(star.radius, float)

def test_derived_quantities_follow_core():
    star = StarProperties(temperature=12000, radius=2.5e6)
    assert star.luminosity == su.get_estimated_luminosity(12000, 2.5e6)
    assert star.solar_luminosity_exponent == su.get_estimated_solar_luminosity_exponent(12000, 2.5e6)
    assert star.normalized_temperature == su.get_normalized_temperature(12000)
    assert star.normalized_luminosity == su.get_normalized_estimated_solar_luminosity_exponent(12000, 2.5e6)

def test_derived_quantities_are_not_cached():
    star = StarProperties(temperature=5000, radius=1e5)
    before = star.luminosity
    star.radius = 2e5
    assert star.luminosity == pytest.approx(4 * before)

def test_astropy_quantities_are_converted():
    star = StarProperties(temperature=5778 * u.K, radius=1 * u.R_sun)
    assert star.temperature == 5778
    assert star.radius == pytest.approx(const.R_sun.to(u.km).value)

    star = StarProperties(temperature=6000 * u.K, radius=1000 * u.m)
    assert star.temperature == 6000
    assert star.radius == pytest.approx(1.0)

@pytest.mark.parametrize("temperature, radius", [
    (0, 1000),
    (0.5, 1000),
    (-5000, 1000),
    (np.nan, 1000),
    (5000, 0),
    (5000, -1),
    (5000, np.inf),
])
def test_validation_rejects_non_physical_values(temperature, radius):
    with pytest.raises(ValueError):
        StarProperties(temperature=temperature, radius=radius)

def test_validation_warns_outside_diagram_range():
    with pytest.warns(UserWarning, match="outside the HR diagram range"):
        StarProperties(temperature=1000, radius=1000)
    with pytest.warns(UserWarning):
        StarProperties(temperature=50000, radius=1000)

def test_no_warning_inside_diagram_range():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        StarProperties(temperature=2500, radius=1000)
        StarProperties(temperature=40000, radius=1000)
        assert StarProperties(temperature=40000.7, radius=1000).temperature == 40000

def test_without_validation_values_are_degenerate():
    star = StarProperties(temperature=0, radius=1000, validate=False)
    assert star.spectral_class == '?'
    assert star.solar_luminosity_exponent == -np.inf
    assert star.normalized_luminosity == 0.0

def test_from_solar_units():
    star = StarProperties.from_solar_units(2.0, 10)
    assert star.temperature == 11556
    assert star.radius == pytest.approx(6963400)
    assert star.solar_radius == pytest.approx(10)

def test_from_normalized():
    star = StarProperties.from_normalized(0.5, 0.5)
    assert star.temperature == 10000
    assert star.radius == pytest.approx(su.get_estimated_radius(10000, su.SUN_LUMINOSITY))
    assert star.normalized_luminosity == pytest.approx(0.5)

def test_replace_returns_new_value():
    star = StarProperties(temperature=4000, radius=5e5)
    hotter = star.replace(temperature=8000)
    assert hotter == StarProperties(temperature=8000, radius=5e5)
    assert star.temperature == 4000
    assert star.copy() == star
    assert star.copy() is not star

def test_replace_rejects_unknown_fields():
    with pytest.raises(ValueError, match="mass"):
        StarProperties().replace(mass=2)

def test_value_semantics():
    a = StarProperties(temperature=4000, radius=5e5)
    b = StarProperties(temperature=4000, radius=5e5)
    assert a == b
    with pytest.raises(TypeError):
        hash(a)
    assert a != StarProperties(temperature=4001, radius=5e5)
    assert repr(a) == 'StarProperties(temperature=4000, radius=500000.0)'

def test_verbose_reports_assumed_units(capsys):
    StarProperties(temperature=5000, radius=1000, verbose=True)
    out = capsys.readouterr().out
    assert 'assuming K' in out
    assert 'assuming km' in out


if __name__ == '__main__':
    pytest.main([__file__, '--verbose'])
