"""Command line interface for analemma.

Usage::

    analemma --help
    analemma --lat 51.5 --day 172 --hour 9.5
    analemma analemma/examples/earth_default.yaml --tilt 45 --output-dir out
"""
import os

import click

from .config import Configurator, InvalidParameterError, check_finite
from .engine import SolarEngine
from .eot import interplay
from .trace_io import write_trace_csv

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

TRACE_FILE = "analemma_trace.csv"
DAY_PATH_FILE = "analemma_day_path.csv"


def format_hours(hours):
    """Format decimal hours as HH:MM."""
    total = int(round(hours * 60))
    h, m = divmod(total, 60)
    return f"{h:02d}:{m:02d}"


def format_duration(hours):
    total = int(round(hours * 60))
    h, m = divmod(total, 60)
    return f"{h}h {m}m"


def _hemisphere(latitude):
    return f"{abs(latitude):.2f} deg {'N' if latitude >= 0 else 'S'}"


def _run_value(name, value, run, default):
    """Option value, else the config file's ``run`` entry, else `default`."""
    if value is None:
        value = run.get(name, default)
    try:
        value = check_finite(name, value)
        if not isinstance(value, float):
            raise InvalidParameterError(f"{name} must be a single number")
    except InvalidParameterError as err:
        raise click.BadParameter(str(err), param_hint=f"--{name}")
    return value


def summarize(engine, day, hour):
    """Build the text summary for one day and clock hour."""
    cfg = engine.config
    p = cfg.params
    clock = "mean solar time" if cfg.apparent_time else "apparent solar time"
    eot = engine.equation_of_time(day)
    pos = engine.sun_position(day, hour)
    times = engine.sun_times(day)
    speed = engine.orbital_speed(day)

    lines = [
        f"Orbit:        tilt={p.tilt:.2f} deg, eccentricity={p.eccentricity:.4f}, "
        f"perihelion day {p.perihelion_day:g}",
        f"Latitude:     {_hemisphere(cfg.latitude)}",
        f"Day {day:g}, {format_hours(hour)} ({clock})",
        f"  Declination:      {engine.declination(day):+.2f} deg",
        f"  Equation of time: {eot.total:+.1f} min "
        f"(eccentricity {eot.eccentricity:+.1f}, obliquity {eot.obliquity:+.1f})",
    ]
    relation = interplay(eot)
    if relation is not None:
        lines.append(f"  The two effects are {relation} each other.")
    ext = engine.eot_extremes()
    lines.append(
        f"  EOT extremes:     {ext.max_minutes:+.1f} min on day {ext.max_day}, "
        f"{ext.min_minutes:+.1f} min on day {ext.min_day}"
    )
    if pos.altitude > 0:
        lines.append(
            f"  Sun:              alt {pos.altitude:.1f} deg, az {pos.azimuth:.1f} deg"
        )
    else:
        lines.append(f"  Sun:              below horizon (alt {pos.altitude:.1f} deg)")
    if times.never_rises:
        lines.append("  Sunrise/sunset:   never (polar night)")
    elif times.never_sets:
        lines.append("  Sunrise/sunset:   00:00 / 24:00 (midnight sun)")
    else:
        lines.append(
            f"  Sunrise/sunset:   {format_hours(times.sunrise)} / "
            f"{format_hours(times.sunset)}"
        )
    lines.append(f"  Day length:       {format_duration(times.day_length)}")
    if times.noon_altitude > 0:
        lines.append(f"  Noon altitude:    {times.noon_altitude:.1f} deg")
    lines.append(f"  Orbital speed:    {(speed - 1) * 100:+.1f}% vs mean")
    return "\n".join(lines)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("config_file", required=False,
                type=click.Path(exists=True, dir_okay=False))
@click.option("--tilt", type=float, default=None,
              help="Axial tilt [degrees] (default: 23.44)")
@click.option("--eccentricity", type=float, default=None,
              help="Orbital eccentricity (default: 0.0167)")
@click.option("--perihelion-day", type=float, default=None,
              help="Day of year of perihelion (default: 3)")
@click.option("--lat", type=float, default=None,
              help="Observer latitude [degrees] (default: 40)")
@click.option("--day", type=float, default=None,
              help="Day of year to summarise (default: 172)")
@click.option("--hour", type=float, default=None,
              help="Clock hour to summarise and trace (default: 12)")
@click.option("--solar-clock", is_flag=True,
              help="Read clock hours as apparent (sundial) time, no EOT shift")
@click.option("--no-eccentricity", is_flag=True,
              help="Mask the eccentricity part of the equation of time")
@click.option("--no-obliquity", is_flag=True,
              help="Mask the obliquity part of the equation of time")
@click.option("--output-dir", type=click.Path(file_okay=False), default=None,
              help="Write analemma and day-path traces as CSV here")
@click.option("-q", "--quiet", is_flag=True, help="Suppress output")
def main(config_file, tilt, eccentricity, perihelion_day, lat, day, hour,
         solar_clock, no_eccentricity, no_obliquity, output_dir, quiet):
    """analemma: Sun position, Equation of Time and analemma traces."""
    run = {}
    try:
        if config_file:
            config, data = Configurator.from_yaml(config_file)
            run = data.get("run") or {}
            if not isinstance(run, dict):
                raise InvalidParameterError("section 'run' must be a mapping")
        else:
            config = Configurator()

        changes = {
            "tilt": tilt,
            "eccentricity": eccentricity,
            "perihelion_day": perihelion_day,
            "latitude": lat,
        }
        changes = {k: v for k, v in changes.items() if v is not None}
        if solar_clock:
            changes["apparent_time"] = False
        if no_eccentricity:
            changes["show_eccentricity"] = False
        if no_obliquity:
            changes["show_obliquity"] = False
        engine = SolarEngine(config.replace(**changes))
    except InvalidParameterError as err:
        raise click.UsageError(str(err))

    day = _run_value("day", day, run, 172)
    hour = _run_value("hour", hour, run, 12.0)
    if not 0 <= hour < 24:
        raise click.BadParameter(f"hour={hour} must lie in [0, 24)",
                                 param_hint="--hour")

    if not quiet:
        if config_file:
            click.echo(f"Config: {config_file}")
        click.echo(summarize(engine, day, hour))

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        trace_path = os.path.join(output_dir, TRACE_FILE)
        path_path = os.path.join(output_dir, DAY_PATH_FILE)
        write_trace_csv(trace_path, engine.generate_analemma(hour),
                        header=f"analemma at {format_hours(hour)}")
        write_trace_csv(path_path, engine.generate_day_path(day),
                        header=f"sun path on day {day:g}")
        if not quiet:
            click.echo(f"Wrote {trace_path}")
            click.echo(f"Wrote {path_path}")


if __name__ == "__main__":
    main()
