"""Domain exceptions."""

from quietio.domain.exceptions.base import QuietIOError
from quietio.domain.exceptions.template import TemplateError

__all__ = [
    "QuietIOError",
    "TemplateError",
]
