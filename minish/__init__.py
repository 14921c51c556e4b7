"""minish package: a small interactive shell with quoting, redirection and completion."""

from loguru import logger

from .completion import CompletionEngine, ReadlineCompleter, longest_common_prefix
from .config import ShellSettings
from .exceptions import ConfigurationError, RedirectionError, ShellError
from .redirection import RedirectionPlan, RedirectMode, RedirectTarget, StdioPlan, extract
from .resolver import Resolution, ResolutionKind, resolve
from .session import ShellSession
from .shell import CommandResult, Shell
from .shell_parser import ParsedCommand, parse_command
from .tokenizer import tokenize

# Library users opt in through minish.logging_utils.configure_logging.
logger.disable("minish")

__all__ = [
    "Shell",
    "ShellSession",
    "ShellSettings",
    "CommandResult",
    "ParsedCommand",
    "parse_command",
    "tokenize",
    "extract",
    "RedirectionPlan",
    "RedirectTarget",
    "RedirectMode",
    "StdioPlan",
    "Resolution",
    "ResolutionKind",
    "resolve",
    "CompletionEngine",
    "ReadlineCompleter",
    "longest_common_prefix",
    "ShellError",
    "RedirectionError",
    "ConfigurationError",
]
