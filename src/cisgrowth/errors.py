"""Error kinds raised when a caller violates a gadget contract."""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Base class for all contract violations raised by cisgrowth."""


class SizeMismatchError(InvalidArgumentError):
    """A mask or vector does not fit the gadget's number of link nodes."""


class InvalidChainCountError(InvalidArgumentError):
    """A chain was requested with an unsupported repeat count."""


class DegenerateGadgetError(InvalidArgumentError):
    """The graph is too small for the requested gadget, or its link nodes are unusable."""
