from pathlib import Path
import astropy.units as u
import star_utilities as su

script_dir = Path(__file__).parent

# --------------------------- Setup stars ---------------------------------------
sun = su.StarProperties()
sirius = su.StarProperties(temperature=9940 * u.K, radius=1.711 * u.R_sun)
betelgeuse = su.StarProperties.from_solar_units(solar_temperature=0.62, solar_radius=764)

for name, star in [('Sun', sun), ('Sirius A', sirius), ('Betelgeuse', betelgeuse)]:
    print(f'{name:>10}: {star.spectral_class:>2}, L = {star.solar_luminosity:10.3g} Lsun, '
          f'diagram position = ({star.normalized_temperature:.3f}, {star.normalized_luminosity:.3f})')

# --------------------------- Pick a star on the diagram -------------------------
diagram = su.HRDiagram(verbose=True)
graph_rect = su.Rect(0, 0, 400, 400)
component = su.StarComponent(sun)
component.apply_pick((120, 90), graph_rect, diagram=diagram)
print('Shader parameters:', component.update())
print('Read-out:', diagram.readout(component.star_properties))

# --------------------------- Plot ----------------------------------------------
savefig_kwargs = dict(dpi=300, bbox_inches='tight', pad_inches=0.01)
ax = diagram.plot(star=component.star_properties)
ax.figure.savefig(script_dir / 'hr_diagram.png', **savefig_kwargs)
