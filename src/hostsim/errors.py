"""
Error taxonomy for the simulator.

Every failure in the generate/encode/persist loop surfaces as a subclass of
SimulatorError; the original exception is chained as __cause__.
"""


class SimulatorError(Exception):
    """Base class for all simulator failures."""

    pass


class ConfigError(SimulatorError):
    """Raised when a configuration file is unreadable or has invalid values."""

    pass


class FileAcquisitionError(SimulatorError):
    """Raised when the output file cannot be opened or created."""

    pass


class SerializationError(SimulatorError):
    """Raised when a sample cannot be encoded, or a line cannot be decoded."""

    pass


class WriteError(SimulatorError):
    """Raised when writing to the output file or observation stream fails."""

    pass


class FlushError(SimulatorError):
    """Raised when a durable flush fails after a successful write."""

    pass
