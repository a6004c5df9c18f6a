# Error taxonomy for a generation run.
# Every class is fatal; the CLI maps it to a process exit code.


class NameGenError(Exception):
    """Base class for all failures of a run."""
    exit_code = 1


class ConfigError(NameGenError):
    """Missing or invalid environment input, or an unknown profile."""
    exit_code = 2


class TransportError(NameGenError):
    """The inference server could not be reached or answered non-2xx."""
    exit_code = 3


class ProtocolError(NameGenError):
    """The response envelope lacks a usable message.content."""
    exit_code = 4


class ParseError(NameGenError):
    """The model content is not JSON or does not fit the response schema."""
    exit_code = 5


class OutputError(NameGenError):
    """The Markdown table could not be written."""
    exit_code = 6


class Cancelled(NameGenError):
    """The batch was stopped before it completed; nothing is written."""
    exit_code = 130
