"""Builtin command modules; importing them fills the builtin table."""

from . import meta as _meta  # noqa: F401
from . import navigation as _navigation  # noqa: F401
from . import text as _text  # noqa: F401

__all__ = []
