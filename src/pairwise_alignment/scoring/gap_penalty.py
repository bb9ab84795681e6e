"""
Gap penalty models.

A gap is a run of consecutive gap positions on one row; its length is >= 1.
Costs are added to alignment scores, so they are zero or negative.

    Linear(cost):          f(L) = cost * L
    Affine(open, extend):  f(L) = open + extend * (L - 1)

Linear reports `cost` as both its opening and extension cost, which makes
Affine(c, c) and Linear(c) the same model numerically.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.exceptions import InputError, InputErrorKind, ScoringError


def _as_cost(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ScoringError(f"{label} must be an integer, got {value!r}")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise ScoringError(f"{label} must be an integer, got {value!r}")
    value = int(value)
    if value > 0:
        raise ScoringError(f"{label} must be zero or negative, got {value}")
    return value


class GapPenalty:
    """Common interface of the gap models."""

    @property
    def gap_open(self) -> int:
        raise NotImplementedError

    @property
    def gap_extend(self) -> int:
        raise NotImplementedError

    @property
    def is_affine(self) -> bool:
        return False

    def penalty(self, length: int) -> int:
        """Cost of a contiguous gap run of `length` positions."""
        if length < 1:
            raise ValueError(f"Gap length must be >= 1, got {length}")
        return self.gap_open + self.gap_extend * (length - 1)


@dataclass(frozen=True)
class Linear(GapPenalty):
    """Uniform cost per gap position."""
    cost: int

    def __post_init__(self):
        object.__setattr__(self, 'cost', _as_cost(self.cost, "Gap cost"))

    @property
    def gap_open(self) -> int:
        return self.cost

    @property
    def gap_extend(self) -> int:
        return self.cost


@dataclass(frozen=True)
class Affine(GapPenalty):
    """Opening cost for the first position, extension cost for the rest."""
    open_cost: int
    extend_cost: int

    def __post_init__(self):
        object.__setattr__(self, 'open_cost', _as_cost(self.open_cost, "Gap open cost"))
        object.__setattr__(self, 'extend_cost', _as_cost(self.extend_cost, "Gap extend cost"))

    @property
    def gap_open(self) -> int:
        return self.open_cost

    @property
    def gap_extend(self) -> int:
        return self.extend_cost

    @property
    def is_affine(self) -> bool:
        return True


class GapModel(Enum):
    LINEAR = 'linear'
    AFFINE = 'affine'

    @classmethod
    def from_name(cls, name) -> 'GapModel':
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InputError(InputErrorKind.GAP_MODEL_NOT_EXIST, name) from None


def make_gap_penalty(model, gap_open, gap_extend: Optional[int] = None) -> GapPenalty:
    """
    Build a gap penalty from a model name and costs.

    For the linear model only `gap_open` is used.
    """
    model = GapModel.from_name(model)
    if model is GapModel.LINEAR:
        return Linear(gap_open)
    if gap_extend is None:
        gap_extend = gap_open
    return Affine(gap_open, gap_extend)


__all__ = ['GapPenalty', 'Linear', 'Affine', 'GapModel', 'make_gap_penalty']
