"""Domain model: outcomes, display values, write errors, config."""

from quietio.domain.model.config import OutputConfig
from quietio.domain.model.display import DisplayValue, SupportsDisplay, to_display_string
from quietio.domain.model.outcome import Describable, Failure, Outcome, Success, outcome_of
from quietio.domain.model.write_error import WriteError

__all__ = [
    "Describable",
    "DisplayValue",
    "Failure",
    "Outcome",
    "OutputConfig",
    "Success",
    "SupportsDisplay",
    "WriteError",
    "outcome_of",
    "to_display_string",
]
