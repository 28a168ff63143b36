# Default configuration values
DEFAULT_LABEL_ATTRIBUTE = 'Class_name'
DEFAULT_MIN_PIXEL_AREA = 0.99
DEFAULT_RESOLUTION = 1.0
DEFAULT_OUTPUT_FILE = 'points.geojson'
DEFAULT_STYLES = 'mature, secondary, mangrove'

# Configuration sections
SOURCE_SECTION_NAME = 'Source'
VIEWPORT_SECTION_NAME = 'Viewport'
DESTINATION_SECTION_NAME = 'Destination'
SETTINGS_SECTION_NAME = 'Settings'
CLASS_SECTION_PREFIX = 'Class:'
DEFAULT_CLASS_NAME = 'default'

# Built-in sampling rules: (style, probability, density in pixels, randomness)
MATURE_FOREST = 'Bosque latifoliado mixto maduro'
MANGROVE_FOREST = 'Bosque de mangle'
MATURE_FOREST_RULE = (0, 0.8, 30, 0.8)
MANGROVE_FOREST_RULE = (2, 1.0, 16, 0.5)
DEFAULT_RULE = (1, 1.0, 20, 1.0)  # secondary and other forests

# Logging
LOGGER_NAME = 'nsidc.pointfill'
LOGFILE_NAME = 'pointfill.log'
