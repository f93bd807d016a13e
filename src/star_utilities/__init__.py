from .core import TEMPERATURE_MIN, \
                  TEMPERATURE_MAX, \
                  LUMINOSITY_EXPONENT_MIN, \
                  LUMINOSITY_EXPONENT_MAX, \
                  SUN_TEMPERATURE, \
                  SUN_RADIUS, \
                  SUN_LUMINOSITY, \
                  STEFAN_BOLTZMANN_CONSTANT, \
                  is_in_range, \
                  get_spectral_class, \
                  get_subdivision, \
                  get_estimated_luminosity, \
                  get_estimated_solar_luminosity, \
                  get_estimated_solar_luminosity_exponent, \
                  get_normalized_estimated_solar_luminosity_exponent, \
                  get_luminosity, \
                  get_normalized_temperature, \
                  get_temperature, \
                  get_estimated_radius

from .star import StarProperties
from .hr_diagram import HRDiagram, Rect, pixel_to_normalized, normalized_to_pixel
from .component import StarComponent
