import configparser
import dataclasses
import os.path
from typing import List, Optional

from nsidc.pointfill import constants
from nsidc.pointfill.classification import SamplingRule, SamplingTable, default_table
from nsidc.pointfill.models import Extent


@dataclasses.dataclass
class Config:
    features_file: str
    label_attribute: str
    extent: Extent
    resolution: float
    output_file: str
    min_pixel_area: float
    seed: Optional[int]
    styles: List[str]
    sampling_table: SamplingTable

    def show(self):
        print()
        print('Using configuration:')
        for k, v in self.__dict__.items():
            if k == 'sampling_table':
                continue
            print(f'  + {k}: {v}')
        print('  + sampling rules:')
        for label in self.sampling_table.labels:
            print(f'    - {label}: {self.sampling_table.rules[label]}')
        print(f'    - {constants.DEFAULT_CLASS_NAME}: {self.sampling_table.default}')


def config_parser_factory(configuration_file):
    """
    Returns a ConfigParser by reading the specified file.
    """
    if configuration_file is None or not os.path.exists(configuration_file):
        raise ValueError(f'Unable to find configuration file {configuration_file}')
    cfg_parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    cfg_parser.read(configuration_file)
    return cfg_parser


def _get_configuration_value(section, name, value_type, config_parser, overrides):
    """
    Returns a value from the provided config parser; any value for the key that
    is provided in the 'overrides' dictionary will take precedence.
    """
    if overrides.get(name) is not None:
        return overrides.get(name)
    if value_type is float:
        return config_parser.getfloat(section, name)
    elif value_type is int:
        value = config_parser.get(section, name, fallback='')
        return int(value) if value.strip() else None
    elif value_type is list:
        return _split(config_parser.get(section, name))
    elif value_type is Extent:
        return Extent.from_bounds([float(v) for v in _split(config_parser.get(section, name))])
    else:
        return config_parser.get(section, name)


def _split(value):
    return [item.strip() for item in value.split(',') if item.strip()]


def _sampling_rule(config_parser, section):
    return SamplingRule(
        style_index=config_parser.getint(section, 'style'),
        probability=config_parser.getfloat(section, 'probability'),
        density=config_parser.getfloat(section, 'density'),
        randomness=config_parser.getfloat(section, 'randomness'),
    )


def sampling_table(config_parser):
    """
    Returns the sampling table described by the 'Class:<label>' sections, or
    the built-in table when there are none. 'Class:default' holds the rule for
    unlisted labels.
    """
    class_sections = [s for s in config_parser.sections() if s.startswith(constants.CLASS_SECTION_PREFIX)]
    if not class_sections:
        return default_table()

    rules = {}
    default = default_table().default
    for section in class_sections:
        label = section[len(constants.CLASS_SECTION_PREFIX):].strip()
        if label == constants.DEFAULT_CLASS_NAME:
            default = _sampling_rule(config_parser, section)
        else:
            rules[label] = _sampling_rule(config_parser, section)
    return SamplingTable(default=default, rules=rules)


def configuration(config_parser, overrides):
    """
    Returns a valid Config object that is populated from the provided config
    parser, with values overriden with anything provided in 'overrides'.
    """
    config_parser['DEFAULT'] = {
        'label_attribute': constants.DEFAULT_LABEL_ATTRIBUTE,
        'resolution': constants.DEFAULT_RESOLUTION,
        'output_file': constants.DEFAULT_OUTPUT_FILE,
        'min_pixel_area': constants.DEFAULT_MIN_PIXEL_AREA,
        'seed': '',
        'styles': constants.DEFAULT_STYLES,
    }
    try:
        return Config(
            _get_configuration_value(constants.SOURCE_SECTION_NAME, 'features_file', str, config_parser, overrides),
            _get_configuration_value(constants.SOURCE_SECTION_NAME, 'label_attribute', str, config_parser, overrides),
            _get_configuration_value(constants.VIEWPORT_SECTION_NAME, 'extent', Extent, config_parser, overrides),
            _get_configuration_value(constants.VIEWPORT_SECTION_NAME, 'resolution', float, config_parser, overrides),
            _get_configuration_value(constants.DESTINATION_SECTION_NAME, 'output_file', str, config_parser, overrides),
            _get_configuration_value(constants.SETTINGS_SECTION_NAME, 'min_pixel_area', float, config_parser, overrides),
            _get_configuration_value(constants.SETTINGS_SECTION_NAME, 'seed', int, config_parser, overrides),
            _get_configuration_value(constants.SETTINGS_SECTION_NAME, 'styles', list, config_parser, overrides),
            sampling_table(config_parser),
        )
    except (configparser.Error, ValueError) as e:
        raise ValueError(f'Unable to read the configuration file: {e}') from e


def validate(configuration):
    """
    Validates each value in the configuration.
    """
    validations = [
        ['features_file', lambda path: os.path.exists(path), 'The features_file does not exist.'],
        ['output_file', lambda path: os.path.isdir(os.path.dirname(os.path.abspath(path))),
         'The output_file directory does not exist.'],
        ['resolution', lambda value: value > 0, 'The resolution must be positive.'],
        ['extent', lambda extent: not extent.is_empty, 'The extent is inverted.'],
        ['sampling_table', lambda table: all(i < len(configuration.styles) for i in table.style_indexes()),
         'A sampling rule refers to a style that is not listed in styles.'],
    ]
    errors = [msg for name, fn, msg in validations if not fn(getattr(configuration, name))]
    return len(errors) == 0, errors
