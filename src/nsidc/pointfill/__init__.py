__version__ = "v0.1.0"


__all__ = [
    "__version__",
    "classification",
    "cli",
    "config",
    "constants",
    "duplicates",
    "geometry",
    "layers",
    "models",
    "orchestrator",
    "pointfill",
    "ring_selector",
    "sampler",
]

from . import classification
from . import cli
from . import config
from . import constants
from . import duplicates
from . import geometry
from . import layers
from . import models
from . import orchestrator
from . import pointfill
from . import ring_selector
from . import sampler
