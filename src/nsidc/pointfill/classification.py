"""
Mapping from a feature's classification label to its sampling parameters.

Densities are stored in screen pixels so that the scatter looks the same at
every zoom level; ``lookup`` converts them to map units with the current
resolution.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from nsidc.pointfill import constants
from nsidc.pointfill.models import SamplingParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplingRule:
    style_index: int
    probability: float
    density: float  # pixels
    randomness: float

    def __post_init__(self):
        errors = rule_errors(self)
        if errors:
            raise ValueError("Invalid sampling rule: " + "; ".join(errors))

    def parameters(self, resolution: float) -> SamplingParameters:
        return SamplingParameters(
            density=self.density * resolution,
            randomness=self.randomness,
            probability=self.probability,
            style_index=self.style_index,
        )


def rule_errors(rule: SamplingRule) -> List[str]:
    validations = [
        ['style_index', lambda v: v >= 0, 'style must not be negative'],
        ['probability', lambda v: 0 <= v <= 1, 'probability must be between 0 and 1'],
        ['density', lambda v: v > 0, 'density must be positive'],
        ['randomness', lambda v: 0 <= v <= 1, 'randomness must be between 0 and 1'],
    ]
    return [msg for name, fn, msg in validations if not fn(getattr(rule, name))]


@dataclass(frozen=True)
class SamplingTable:
    """Sampling rules keyed on label, with a rule for everything else."""

    default: SamplingRule
    rules: Dict[str, SamplingRule] = field(default_factory=dict)

    @property
    def labels(self) -> List[str]:
        return list(self.rules)

    def rule_for(self, label: Optional[str]) -> SamplingRule:
        rule = self.rules.get(label)
        if rule is None:
            logger.debug(f"No sampling rule for {label!r}, using the default")
            return self.default
        return rule

    def lookup(self, label: Optional[str], resolution: float) -> SamplingParameters:
        return self.rule_for(label).parameters(resolution)

    def style_indexes(self) -> List[int]:
        return sorted({rule.style_index for rule in [self.default, *self.rules.values()]})


def default_table() -> SamplingTable:
    return SamplingTable(
        default=SamplingRule(*constants.DEFAULT_RULE),
        rules={
            constants.MATURE_FOREST: SamplingRule(*constants.MATURE_FOREST_RULE),
            constants.MANGROVE_FOREST: SamplingRule(*constants.MANGROVE_FOREST_RULE),
        },
    )
