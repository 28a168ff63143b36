from unittest.mock import patch

from click.testing import CliRunner
import pytest

from nsidc.pointfill.cli import cli


# Unit tests for the 'cli' module functions.
#
# The test boundary is the cli module's interface with the pointfill module,
# so in addition to testing the cli module's behavior, the tests should mock
# that module's functions and assert that cli functions call them with the
# correct parameters and handle any exceptions they may throw.

@pytest.fixture
def cli_runner():
    return CliRunner()

def test_without_subcommand(cli_runner):
    result = cli_runner.invoke(cli)
    assert result.exit_code == 0
    assert 'Usage' in result.output
    assert 'Commands' in result.output
    for subcommand in ['info', 'fill']:
        assert subcommand in result.output

def test_help(cli_runner):
    result = cli_runner.invoke(cli, ['--help'])
    assert result.exit_code == 0

def test_info_requires_config(cli_runner):
    result = cli_runner.invoke(cli, ['info'])
    assert result.exit_code != 0

def test_info_with_config(cli_runner):
    result = cli_runner.invoke(cli, ['info', '--config', './example/forest.ini'])
    assert result.exit_code == 0

def test_info_with_config_summarizes(cli_runner):
    result = cli_runner.invoke(cli, ['info', '--config', './example/forest.ini'])

    for key in ['features_file', 'label_attribute', 'extent', 'resolution', 'output_file',
                'min_pixel_area', 'seed', 'styles', 'Bosque de mangle', 'default']:
        assert key in result.output

@patch('nsidc.pointfill.pointfill.process')
def test_fill_requires_config_does_not_call_process(mock, cli_runner):
    result = cli_runner.invoke(cli, ['fill'])
    assert not mock.called
    assert result.exit_code != 0

@patch('nsidc.pointfill.pointfill.process')
def test_fill_with_config_calls_process(mock, cli_runner):
    result = cli_runner.invoke(cli, ['fill', '--config', './example/forest.ini'])
    assert mock.called
    assert result.exit_code == 0

@patch('nsidc.pointfill.pointfill.process')
def test_fill_with_overrides(process_mock, cli_runner):
    result = cli_runner.invoke(cli, ['fill', '-s', '3', '-r', '2.5', '-o', 'out.geojson',
                                     '--config', './example/forest.ini'])

    assert process_mock.called
    args = process_mock.call_args.args
    assert len(args) == 1
    configuration = args[0]
    assert configuration.seed == 3
    assert configuration.resolution == 2.5
    assert configuration.output_file == 'out.geojson'
    assert result.exit_code == 0

@patch('nsidc.pointfill.pointfill.process')
def test_fill_uses_config_seed_by_default(process_mock, cli_runner):
    cli_runner.invoke(cli, ['fill', '--config', './example/forest.ini'])
    configuration = process_mock.call_args.args[0]
    assert configuration.seed == 42

@patch('nsidc.pointfill.pointfill.process', side_effect=ValueError('Invalid configuration'))
def test_fill_handles_process_errors(process_mock, cli_runner):
    result = cli_runner.invoke(cli, ['fill', '--config', './example/forest.ini'])
    assert result.exit_code == 1
    assert 'Unable to fill points: Invalid configuration' in result.output
