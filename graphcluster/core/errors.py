"""Exception types raised by graph clustering components."""


class GraphClusterError(Exception):
    """Base class for all graphcluster errors."""


class ConfigurationError(GraphClusterError, ValueError):
    """
    An algorithm could not be configured.

    Raised eagerly while building an algorithm: missing required options,
    unknown algorithm names or weighting modes, malformed parameter values,
    and graphs that violate a structural precondition.
    """


class NumericalError(GraphClusterError, ArithmeticError):
    """A numerical routine failed or was asked for an impossible result."""
