import star_utilities.core as core
from star_utilities.star import StarProperties
from star_utilities.hr_diagram import HRDiagram

# Shader parameter names written by StarComponent.update()
STAR_TEMPERATURE_PARAMETER = '_StarTemperature'
STAR_LUMINOSITY_PARAMETER = '_StarLuminosity'

class StarComponent:
    """
    Host-side adapter for a rendered star.

    Holds the star's properties as explicit data and, once per rendering tick, turns them
    into the normalized temperature and luminosity a star shader expects. Edits from the
    HR diagram replace the properties with a new value.
    """
    def __init__(self, star_properties=None):
        self.star_properties = star_properties if star_properties is not None else StarProperties()
        self.property_block = {}

    def update(self):
        """Recompute the shader parameters of the current star and return the property block."""
        self.property_block[STAR_TEMPERATURE_PARAMETER] = self.star_properties.normalized_temperature
        self.property_block[STAR_LUMINOSITY_PARAMETER] = self.star_properties.normalized_luminosity
        return self.property_block

    def apply_pick(self, position, graph_rect, diagram=None):
        """Select the star under `position` on the HR diagram drawn in `graph_rect`.

        Returns:
            bool: Whether the position hit the diagram and the properties were replaced.
        """
        diagram = diagram if diagram is not None else HRDiagram()
        star = diagram.pick(position, graph_rect)
        if star is None:
            return False
        self.star_properties = star
        return True

    def set_solar_radius(self, solar_radius):
        self.star_properties = self.star_properties.replace(radius=solar_radius * core.SUN_RADIUS)

    def set_solar_temperature(self, solar_temperature):
        self.star_properties = self.star_properties.replace(
            temperature=int(solar_temperature * core.SUN_TEMPERATURE))
