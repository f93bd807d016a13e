import warnings
import numpy as np
import astropy.units as u
import star_utilities.core as core

class StarProperties:
    """
    Temperature and radius of a star, the two values picked on the HR diagram.

    Instances behave like values: they compare equal when both fields match, and
    edits produce new objects via `replace()`. Every derived quantity (spectral class,
    luminosity, normalized diagram coordinates) is computed on demand.
    """
    def __init__(self, temperature=core.SUN_TEMPERATURE, radius=core.SUN_RADIUS,
                 validate=True, verbose=False):
        """Initialize a StarProperties object.

        Args:
            temperature (int or astropy.units.Quantity, optional): Surface temperature.
                Plain numbers are taken as Kelvin and truncated to an integer.
                Defaults to the temperature of the Sun.
            radius (float or astropy.units.Quantity, optional): Radius. Plain numbers are
                taken as km. Defaults to the radius of the Sun.
            validate (bool, optional): Whether to reject non-physical values. Defaults to True.
            verbose (bool, optional): Whether to print status messages. Defaults to False.

        Raises:
            ValueError: If validate is True and temperature or radius is not a positive
                finite number.

        Note:
            With validate=False any finite value is accepted and derived quantities follow the
            permissive contract of the core formulas (nan/inf instead of errors).
        """
        self.verbose = verbose

        if hasattr(temperature, 'unit'):
            temperature = temperature.to(u.K, equivalencies=u.temperature()).value
        elif verbose:
            print('Variable \'temperature\' has no astropy.unit, assuming K')
        if hasattr(radius, 'unit'):
            radius = radius.to(u.km).value
        elif verbose:
            print('Variable \'radius\' has no astropy.unit, assuming km')

        if validate:
            self.validate(temperature, radius)

        self.temperature = int(temperature)
        self.radius = float(radius)

    @staticmethod
    def validate(temperature, radius):
        """Check that temperature (K) and radius (km) describe a physical star.

        The temperature is checked as the whole Kelvin value that gets stored.

        Raises:
            ValueError: If either value is not a positive finite number.
        """
        if not np.isfinite(temperature) or int(temperature) <= 0:
            raise ValueError(f"Temperature must be at least 1 K, got {temperature}.")
        temperature = int(temperature)
        if not np.isfinite(radius) or radius <= 0:
            raise ValueError(f"Radius must be a positive finite number of km, got {radius}.")
        if not core.TEMPERATURE_MIN <= temperature <= core.TEMPERATURE_MAX:
            warnings.warn(f"Temperature {temperature} K lies outside the HR diagram range "
                          f"[{core.TEMPERATURE_MIN}, {core.TEMPERATURE_MAX}] K.", UserWarning)

    @classmethod
    def from_solar_units(cls, solar_temperature, solar_radius, **kwargs):
        """Create a star from its temperature and radius relative to the Sun."""
        return cls(temperature=int(solar_temperature * core.SUN_TEMPERATURE),
                   radius=solar_radius * core.SUN_RADIUS, **kwargs)

    @classmethod
    def from_normalized(cls, normalized_temperature, normalized_luminosity, **kwargs):
        """Create the star found at a normalized (temperature, luminosity) position of the HR diagram.

        The temperature is truncated to whole Kelvin first, and the radius is then solved
        for that temperature and the luminosity at `normalized_luminosity`.

        Args:
            normalized_temperature (float): Position on the temperature axis, 0 at TEMPERATURE_MIN.
            normalized_luminosity (float): Position on the luminosity exponent axis.
            **kwargs: Passed on to the constructor.

        Returns:
            StarProperties: The star at that position.
        """
        temperature = int(core.get_temperature(normalized_temperature))
        luminosity = core.get_luminosity(normalized_luminosity)
        radius = core.get_estimated_radius(temperature, luminosity)
        return cls(temperature=temperature, radius=radius, **kwargs)

    def replace(self, **changes):
        """Return a copy with `temperature` and/or `radius` replaced."""
        unknown = set(changes) - {'temperature', 'radius'}
        if unknown:
            raise ValueError(f"Unknown star properties: {', '.join(sorted(unknown))}")
        return StarProperties(temperature=changes.get('temperature', self.temperature),
                              radius=changes.get('radius', self.radius),
                              validate=False, verbose=self.verbose)

    def copy(self):
        return self.replace()

    @property
    def spectral_class(self):
        return core.get_spectral_class(self.temperature)

    @property
    def luminosity(self):
        """Estimated luminosity in W."""
        return core.get_estimated_luminosity(self.temperature, self.radius)

    @property
    def solar_luminosity(self):
        return core.get_estimated_solar_luminosity(self.temperature, self.radius)

    @property
    def solar_luminosity_exponent(self):
        return core.get_estimated_solar_luminosity_exponent(self.temperature, self.radius)

    @property
    def normalized_temperature(self):
        return core.get_normalized_temperature(self.temperature)

    @property
    def normalized_luminosity(self):
        return core.get_normalized_estimated_solar_luminosity_exponent(self.temperature, self.radius)

    @property
    def solar_radius(self):
        return self.radius / core.SUN_RADIUS

    @property
    def solar_temperature(self):
        return self.temperature / core.SUN_TEMPERATURE

    def __eq__(self, other):
        if not isinstance(other, StarProperties):
            return NotImplemented
        return self.temperature == other.temperature and self.radius == other.radius

    # Fields are mutable
    __hash__ = None

    def __repr__(self):
        return f'StarProperties(temperature={self.temperature}, radius={self.radius!r})'
