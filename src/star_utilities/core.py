import numpy as np

# Normalization domain of the HR diagram
TEMPERATURE_MIN = 2500          # K
TEMPERATURE_MAX = 40000         # K
LUMINOSITY_EXPONENT_MIN = -5    # log10(L/Lsun)
LUMINOSITY_EXPONENT_MAX = 5

SUN_TEMPERATURE = 5778          # K
SUN_RADIUS = 696340             # km
SUN_LUMINOSITY = 3.84e26        # W

STEFAN_BOLTZMANN_CONSTANT = 5.67e-8   # W/m^2/K^4

# Spectral classes as (letter, lower bound, upper bound) in K, coolest first
SPECTRAL_CLASS_RANGES = [
    ('M', 2400, 3700),
    ('K', 3700, 5200),
    ('G', 5200, 6000),
    ('F', 6000, 7500),
    ('A', 7500, 10000),
    ('B', 10000, 30000),
]


def _as_float_array(x):
    return np.asarray(x, dtype=np.float64)

def _as_output(x):
    """Return a Python float for 0-d results, the array otherwise."""
    return x.item() if np.ndim(x) == 0 else x


def is_in_range(value, min, max):
    """Half-open range test, min <= value < max."""
    return value >= min and value < max

def inverse_lerp(a, b, value):
    """
    Position of `value` between `a` and `b` as a fraction, clamped to [0, 1].
    Returns 0 when a == b.
    """
    if a == b:
        return _as_output(np.zeros_like(_as_float_array(value)))
    t = (_as_float_array(value) - a) / (b - a)
    return _as_output(np.clip(t, 0.0, 1.0))

def lerp(a, b, t):
    """Linear interpolation between `a` and `b`. `t` is not clamped."""
    return _as_output(a + (b - a) * _as_float_array(t))


# ----------------------------------------------------------------------------------------
# Classification
# ----------------------------------------------------------------------------------------

def get_spectral_class(temperature):
    """
    Returns the spectral class of a star based on its temperature in Kelvin, e.g. 'G2'.
    https://en.wikipedia.org/wiki/Stellar_classification

    Args:
        temperature (int): Temperature in Kelvin.

    Returns:
        str: The class letter followed by its 0-9 subdivision, 'O' for the hottest stars
            (no subdivision) and '?' for temperatures below 2400 K.
    """
    if temperature < 2400:
        return '?'

    for letter, low, high in SPECTRAL_CLASS_RANGES:
        if is_in_range(temperature, low, high):
            return f'{letter}{get_subdivision(temperature, low, high)}'

    return 'O'

def get_subdivision(value, min, max):
    """
    Returns the 0-9 subdivision of a value inside [min, max), where 9 is closest to
    min and 0 is closest to max.

    Args:
        value (float): The input value.
        min (float): Lower end of the range.
        max (float): Upper end of the range.

    Returns:
        int: The subdivision digit.
    """
    digit = int((1 - inverse_lerp(min, max, value)) * 10)
    return digit if digit < 9 else 9


# ----------------------------------------------------------------------------------------
# Luminosity
# ----------------------------------------------------------------------------------------

def get_estimated_luminosity(temperature, radius):
    """
    Estimate the luminosity of a star from its temperature and radius using the
    Stefan-Boltzmann law, L = 4*pi*r^2*sigma*T^4.
    https://en.wikipedia.org/wiki/Stefan%E2%80%93Boltzmann_law#Examples

    Args:
        temperature (float or array-like): Temperature in Kelvin.
        radius (float or array-like): Radius in km.

    Returns:
        float or np.ndarray: The estimated luminosity in W.
    """
    temperature = _as_float_array(temperature)
    radius_meters = _as_float_array(radius) * 1000

    radius_squared = radius_meters * radius_meters
    temperature_fourth = temperature * temperature * temperature * temperature

    return _as_output(4 * np.pi * radius_squared * STEFAN_BOLTZMANN_CONSTANT * temperature_fourth)

def get_estimated_solar_luminosity(temperature, radius):
    """Estimated luminosity relative to the Sun (L/Lsun). See get_estimated_luminosity()."""
    return _as_output(_as_float_array(get_estimated_luminosity(temperature, radius)) / SUN_LUMINOSITY)

def get_estimated_solar_luminosity_exponent(temperature, radius):
    """
    Base-10 exponent of the estimated solar luminosity, log10(L/Lsun).

    Non-positive temperatures or radii give -inf or nan rather than an error.
    """
    relative_luminosity = _as_float_array(get_estimated_solar_luminosity(temperature, radius))
    with np.errstate(divide='ignore', invalid='ignore'):
        exponent = np.log10(relative_luminosity)
    return _as_output(exponent)

def get_normalized_estimated_solar_luminosity_exponent(temperature, radius):
    """
    Estimated solar luminosity exponent mapped from
    [LUMINOSITY_EXPONENT_MIN, LUMINOSITY_EXPONENT_MAX] onto [0, 1] (clamped).

    Args:
        temperature (float or array-like): Temperature in Kelvin.
        radius (float or array-like): Radius in km.

    Returns:
        float or np.ndarray: The normalized luminosity exponent.
    """
    exponent = get_estimated_solar_luminosity_exponent(temperature, radius)
    return inverse_lerp(LUMINOSITY_EXPONENT_MIN, LUMINOSITY_EXPONENT_MAX, exponent)

def get_luminosity(normalized_luminosity):
    """
    Real luminosity (W) from a normalized luminosity exponent. Values outside [0, 1]
    extrapolate beyond the exponent range instead of being clamped.

    Args:
        normalized_luminosity (float or array-like): Normalized exponent relative to
            LUMINOSITY_EXPONENT_MIN and LUMINOSITY_EXPONENT_MAX.

    Returns:
        float or np.ndarray: The luminosity in W.
    """
    exponent = _as_float_array(lerp(LUMINOSITY_EXPONENT_MIN, LUMINOSITY_EXPONENT_MAX, normalized_luminosity))
    solar_luminosity = 10.0**exponent

    return _as_output(SUN_LUMINOSITY * solar_luminosity)


# ----------------------------------------------------------------------------------------
# Temperature
# ----------------------------------------------------------------------------------------

def get_normalized_temperature(temperature):
    """
    Position of a temperature on the logarithmic axis between TEMPERATURE_MIN (0) and
    TEMPERATURE_MAX (1).

    Computed as 1 / log_b(TEMPERATURE_MAX / TEMPERATURE_MIN) with b = T / TEMPERATURE_MIN,
    and exactly 0 at T == TEMPERATURE_MIN where the base would be 1.

    Args:
        temperature (float or array-like): Temperature in Kelvin.

    Returns:
        float or np.ndarray: The normalized temperature. Not clamped.
    """
    b = _as_float_array(temperature) / TEMPERATURE_MIN
    if b.ndim == 0 and b == 1:
        return 0.0

    with np.errstate(divide='ignore', invalid='ignore'):
        l = np.log(TEMPERATURE_MAX / TEMPERATURE_MIN) / np.log(b)
        normalized = np.where(b == 1, 0.0, 1 / l)
    return _as_output(normalized)

def get_temperature(normalized_temperature):
    """
    Real temperature in Kelvin from its position on the logarithmic temperature axis.
    Inverse of get_normalized_temperature().
    """
    b = TEMPERATURE_MAX / TEMPERATURE_MIN
    return _as_output(TEMPERATURE_MIN * np.power(b, _as_float_array(normalized_temperature)))


# ----------------------------------------------------------------------------------------
# Radius
# ----------------------------------------------------------------------------------------

def get_estimated_radius(temperature, luminosity):
    """
    Estimate the radius of a star from its temperature and luminosity by inverting the
    Stefan-Boltzmann law, r = sqrt(L / (4*pi*sigma*T^4)).
    https://en.wikipedia.org/wiki/Stefan%E2%80%93Boltzmann_law#Examples

    Args:
        temperature (float or array-like): Temperature in Kelvin.
        luminosity (float or array-like): Luminosity in W.

    Returns:
        float or np.ndarray: The estimated radius in km. nan for negative luminosities,
            inf or nan for a temperature of 0.
    """
    denominator = 4 * np.pi * STEFAN_BOLTZMANN_CONSTANT * np.power(_as_float_array(temperature), 4)
    with np.errstate(divide='ignore', invalid='ignore'):
        radius_meters = np.sqrt(_as_float_array(luminosity) / denominator)
    return _as_output(radius_meters / 1000)
