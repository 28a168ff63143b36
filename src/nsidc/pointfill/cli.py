import click

from nsidc.pointfill import config
from nsidc.pointfill import pointfill


@click.group(epilog="For detailed help on each command, run: pointfill COMMAND --help")
def cli():
    """The pointfill utility scatters semi-random point markers over the
    area features visible in a map viewport."""
    pass

@cli.command()
@click.option('-c', '--config', 'config_filename', help='Path to configuration file to display', required=True)
def info(config_filename):
    """Summarizes the contents of a configuration file."""
    click.echo(pointfill.banner())
    configuration = config.configuration(config.config_parser_factory(config_filename), {})
    configuration.show()

@cli.command()
@click.option('-c', '--config', 'config_filename', help='Path to configuration file', required=True)
@click.option('-s', '--seed', type=int, help='Seed for the random source.', required=False, default=None)
@click.option('-r', '--resolution', type=float, help='Map units per pixel.', required=False, default=None)
@click.option('-o', '--output', 'output_file', help='Path of the GeoJSON file to write.', required=False, default=None)
def fill(config_filename, seed, resolution, output_file):
    """Scatters points over area features based on configuration file contents."""
    click.echo(pointfill.banner())
    overrides = {
        'seed': seed,
        'resolution': resolution,
        'output_file': output_file,
    }
    configuration = config.configuration(config.config_parser_factory(config_filename), overrides)
    try:
        pointfill.process(configuration)
    except Exception as e:
        print("\nUnable to fill points: " + str(e))
        exit(1)
    click.echo(f'Filled points using the configuration file {config_filename}')

if __name__ == "__main__":
    cli()
