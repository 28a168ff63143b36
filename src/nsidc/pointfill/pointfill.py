import logging
import sys

import numpy as np
from funcy import decorator
from pyfiglet import Figlet

from nsidc.pointfill import config
from nsidc.pointfill import constants
from nsidc.pointfill import layers
from nsidc.pointfill.orchestrator import ViewportFillOrchestrator


CONSOLE_FORMAT = "%(message)s"
LOGFILE_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"

def init_logging(configuration: config.Config):
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    logfile_handler = logging.FileHandler(constants.LOGFILE_NAME, "w")
    logfile_handler.setLevel(logging.DEBUG)
    logfile_handler.setFormatter(logging.Formatter(LOGFILE_FORMAT))
    logger.addHandler(logfile_handler)

@decorator
def log(call):
    logging.getLogger(constants.LOGGER_NAME).info(call._func.__name__)
    return call()

def banner():
    """
    Displays the name of this utility using incredible ASCII-art.
    """
    f = Figlet(font='slant')
    return f.renderText('pointfill')

@log
def load_features(configuration: config.Config):
    features = layers.read_features(configuration.features_file, configuration.label_attribute)
    logging.getLogger(constants.LOGGER_NAME).info(
        f'Read {len(features)} area features from {configuration.features_file}')
    return layers.FeatureLayer(features)

@log
def fill_points(configuration: config.Config, feature_layer: layers.FeatureLayer):
    point_layer = layers.PointLayer(configuration.styles)
    orchestrator = ViewportFillOrchestrator(
        point_layer,
        layers.StaticViewport(configuration.extent, configuration.resolution),
        table=configuration.sampling_table,
        rng=np.random.default_rng(configuration.seed),
        min_pixel_area=configuration.min_pixel_area,
    )
    report = orchestrator.sync(feature_layer)
    return point_layer, report

@log
def save_points(configuration: config.Config, point_layer: layers.PointLayer):
    path = layers.write_points(configuration.output_file, point_layer)
    logging.getLogger(constants.LOGGER_NAME).info(f'Wrote {len(point_layer)} points to {path}')
    return path

def process(configuration: config.Config):
    """
    Scatters points over the features in the configured viewport and writes
    them to the output file.
    """
    init_logging(configuration)
    valid, errors = config.validate(configuration)
    if not valid:
        raise ValueError('Invalid configuration: ' + ' '.join(errors))

    feature_layer = load_features(configuration)
    point_layer, report = fill_points(configuration, feature_layer)
    logging.getLogger(constants.LOGGER_NAME).info(
        f'Processed {report.features} features: {report.boundaries} boundaries, '
        f'{report.duplicates} duplicates, {report.skipped_small} too small, '
        f'{report.skipped_invalid} invalid')
    save_points(configuration, point_layer)
    return report
