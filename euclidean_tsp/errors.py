class TSPError(Exception):
    """Base class for every error raised by the solvers and their structures."""


class BadVertexError(TSPError, ValueError):
    """An edge was followed from a vertex that is not one of its endpoints."""


class EmptyHeapError(TSPError, IndexError):
    """The fringe heap was read while holding no elements."""


class ConfigurationError(TSPError, ValueError):
    """Invalid point count, seed or solver name, detected before any solver runs."""


class TourReconstructionError(TSPError, RuntimeError):
    """A solver's selected structure could not be walked into a single closed tour."""
