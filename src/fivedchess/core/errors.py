"""Exceptions raised by the rules engine."""

from __future__ import annotations


class ContractViolation(ValueError):
    """A caller broke a precondition it was responsible for checking.

    Raised before any state is mutated, e.g. selecting an empty square,
    moving the wrong color, or addressing a board that does not exist.
    """
