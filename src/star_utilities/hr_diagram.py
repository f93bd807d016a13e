import numpy as np
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import star_utilities.core as core
from star_utilities.star import StarProperties

class Rect:
    """Axis-aligned rectangle in screen coordinates (y grows downwards)."""
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def x_max(self):
        return self.x + self.width

    @property
    def y_max(self):
        return self.y + self.height

    @property
    def position(self):
        return (self.x, self.y)

    def contains(self, point):
        px, py = point
        return self.x <= px < self.x_max and self.y <= py < self.y_max

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __repr__(self):
        return f'Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})'


def pixel_to_normalized(position, rect):
    """
    Convert a screen position inside the diagram image into normalized
    (temperature, luminosity) coordinates.

    Temperature increases from right to left and luminosity from bottom to top,
    so the top-left corner of `rect` maps to (1, 1).

    Args:
        position (tuple): (x, y) screen position.
        rect (Rect): The diagram image area.

    Returns:
        tuple: (normalized_temperature, normalized_luminosity). Not clamped.
    """
    rel_x = position[0] - rect.x
    rel_y = position[1] - rect.y
    return (1 - rel_x / rect.width, 1 - rel_y / rect.height)

def normalized_to_pixel(normalized_temperature, normalized_luminosity, rect):
    """Screen position of normalized (temperature, luminosity) coordinates. Inverse of pixel_to_normalized()."""
    return (rect.x_max - rect.width * normalized_temperature,
            rect.y_max - rect.height * normalized_luminosity)

def luminosity_axis_labels():
    """Labels of the luminosity axis from top to bottom as (exponent, label) pairs."""
    labels = []
    for exponent in range(core.LUMINOSITY_EXPONENT_MAX, core.LUMINOSITY_EXPONENT_MIN - 1, -1):
        labels.append((exponent, '1' if exponent == 0 else f'10^{exponent}'))
    return labels

def temperature_axis_labels(steps=5):
    """
    Labels of the temperature axis starting at TEMPERATURE_MIN and doubling with each step,
    as (temperature, label) pairs. They are placed from right to left on the diagram.
    """
    labels = []
    temp = core.TEMPERATURE_MIN
    for _ in range(steps):
        labels.append((temp, f'{temp}K'))
        temp *= 2
    return labels


class HRDiagram:
    """
    Layout and interaction of an interactive Hertzsprung-Russell diagram.

    The diagram image fills a framed box, leaving margins for the axis labels. Clicking
    inside the image picks the star at that position; the star currently selected is
    drawn as a square marker.
    """
    def __init__(self, top_margin=20, left_margin=30, right_bottom_margin=20,
                 temperature_steps=5, marker_size=16, verbose=False):
        """Initialize an HRDiagram object.

        Args:
            top_margin (float, optional): Space above the image for the title. Defaults to 20.
            left_margin (float, optional): Space left of the image for luminosity labels. Defaults to 30.
            right_bottom_margin (float, optional): Space right of the image and, together with
                left_margin, below it for temperature labels. Defaults to 20.
            temperature_steps (int, optional): Number of temperature labels. Defaults to 5.
            marker_size (float, optional): Side length of the star marker. Defaults to 16.
            verbose (bool, optional): Whether to print status messages. Defaults to False.

        Raises:
            ValueError: If a margin or the marker size is negative, or temperature_steps < 2.
        """
        if min(top_margin, left_margin, right_bottom_margin, marker_size) < 0:
            raise ValueError("Margins and marker_size must not be negative.")
        if temperature_steps < 2:
            raise ValueError("temperature_steps must be at least 2.")

        self.top_margin = top_margin
        self.left_margin = left_margin
        self.right_bottom_margin = right_bottom_margin
        self.temperature_steps = temperature_steps
        self.marker_size = marker_size
        self.verbose = verbose

    def image_rect(self, graph_rect):
        """Area of the diagram image inside the framed box `graph_rect`."""
        return Rect(graph_rect.x + self.left_margin,
                    graph_rect.y + self.top_margin,
                    graph_rect.width - self.left_margin - self.right_bottom_margin,
                    graph_rect.height - self.left_margin - self.right_bottom_margin)

    def luminosity_tick_positions(self, graph_rect):
        """Label areas of the luminosity axis as (label, Rect) pairs, from top to bottom.

        Each label is vertically centred on its tick.
        """
        image_rect = self.image_rect(graph_rect)
        label_interval = image_rect.height / (core.LUMINOSITY_EXPONENT_MAX - core.LUMINOSITY_EXPONENT_MIN)

        ticks = []
        for c, (_, label) in enumerate(luminosity_axis_labels()):
            y = image_rect.y + label_interval * c - label_interval / 2
            ticks.append((label, Rect(graph_rect.x, y, self.left_margin, label_interval)))
        return ticks

    def temperature_tick_positions(self, graph_rect, label_height=18):
        """Label areas of the temperature axis as (label, Rect) pairs, from right to left."""
        image_rect = self.image_rect(graph_rect)
        label_interval = image_rect.width / (self.temperature_steps - 1)

        ticks = []
        for i, (_, label) in enumerate(temperature_axis_labels(self.temperature_steps)):
            x = image_rect.x_max - label_interval * i
            ticks.append((label, Rect(x, image_rect.y_max, label_interval, label_height)))
        return ticks

    def pick(self, position, graph_rect):
        """Return the star under a screen position, or None if it lies outside the diagram image.

        Args:
            position (tuple): (x, y) screen position, e.g. of a mouse click.
            graph_rect (Rect): The framed box the diagram is drawn in.

        Returns:
            StarProperties or None: The picked star.
        """
        image_rect = self.image_rect(graph_rect)
        if not image_rect.contains(position):
            return None

        normalized_temperature, normalized_luminosity = pixel_to_normalized(position, image_rect)
        star = StarProperties.from_normalized(normalized_temperature, normalized_luminosity, validate=False)
        if self.verbose:
            print(f'Picked star: T = {star.temperature} K, R = {star.radius:.0f} km ({star.spectral_class})')
        return star

    def marker_rect(self, star, graph_rect):
        """Square marker area centred on the position of `star`."""
        image_rect = self.image_rect(graph_rect)
        x, y = normalized_to_pixel(star.normalized_temperature, star.normalized_luminosity, image_rect)
        half = self.marker_size / 2
        return Rect(x - half, y - half, self.marker_size, self.marker_size)

    @staticmethod
    def readout(star):
        """Values shown next to the diagram for the selected star."""
        return {
            'spectral_class': star.spectral_class,
            'solar_luminosity': star.solar_luminosity,
            'solar_radius': star.solar_radius,
            'solar_temperature': star.solar_temperature,
        }

    def plot(self, star=None, ax=None, show_classes=True):
        """Plot the HR diagram with matplotlib.

        Args:
            star (StarProperties, optional): Star to mark on the diagram. Defaults to None.
            ax (matplotlib.axes.Axes, optional): Axes to plot on. If None, creates new figure.
            show_classes (bool, optional): Whether to shade the spectral class bands. Defaults to True.

        Returns:
            matplotlib.axes.Axes: The axes containing the plot.
        """
        if ax is None:
            _, ax = plt.subplots()

        if show_classes:
            colors = plt.cm.RdYlBu(np.linspace(0, 1, len(core.SPECTRAL_CLASS_RANGES) + 1))
            bands = core.SPECTRAL_CLASS_RANGES + [('O', 30000, core.TEMPERATURE_MAX)]
            for (letter, low, high), color in zip(bands, colors):
                low = max(low, core.TEMPERATURE_MIN)
                ax.axvspan(low, high, color=color, alpha=.25, linewidth=0)
                ax.text(np.sqrt(low * high), 10.0**(core.LUMINOSITY_EXPONENT_MAX - .5), letter,
                        ha='center', va='center', fontsize=9)

        # Lines of constant radius
        temps = np.logspace(np.log10(core.TEMPERATURE_MIN), np.log10(core.TEMPERATURE_MAX), 100)
        for solar_radius in [.01, .1, 1, 10, 100]:
            lums = core.get_estimated_solar_luminosity(temps, solar_radius * core.SUN_RADIUS)
            ax.loglog(temps, lums, '--', color='grey', linewidth=.5)

        if star is not None:
            ax.scatter([star.temperature], [star.solar_luminosity], color='red', s=40, zorder=3,
                       label=f'{star.spectral_class}, {star.solar_radius:.3g} R☉')
            ax.legend(loc='lower left', framealpha=1)

        ax.set_xscale('log')
        ax.set_yscale('log')
        ax.set_xlim(core.TEMPERATURE_MAX, core.TEMPERATURE_MIN)
        ax.set_ylim(10.0**core.LUMINOSITY_EXPONENT_MIN, 10.0**core.LUMINOSITY_EXPONENT_MAX)
        ax.set_xticks([temp for temp, _ in temperature_axis_labels(self.temperature_steps)])
        ax.set_xticklabels([label for _, label in temperature_axis_labels(self.temperature_steps)])
        ax.xaxis.set_minor_formatter(mticker.NullFormatter())
        ax.set_xlabel('Temperature (K)')
        ax.set_ylabel('Luminosity (L☉)')
        ax.set_title('Hertzsprung-Russell Diagram')

        return ax
