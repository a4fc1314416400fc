"""Exceptions raised while building dovetail joints."""


class DovetailError(Exception):
    """Base class for dovetail joint errors."""


class InvalidJointGeometry(DovetailError, ValueError):
    """Parameters that would produce a degenerate or impossible joint."""


class UnknownDisplayMode(DovetailError, ValueError):
    """A display mode outside of all / pins / tails."""


class UnknownBoardLayout(DovetailError, ValueError):
    """A board layout outside of apart / assembled."""
