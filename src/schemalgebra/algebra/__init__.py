"""Algebra layer — exclusion, intersection, and schema combinators.

Every operation is pure and total: it returns a Descriptor for every input,
using ``error`` descriptors where no sound result can be represented.
This layer depends only on the domain layer.
"""

from schemalgebra.algebra.combinators import all_of, any_of, if_then_else, negate
from schemalgebra.algebra.dispatch import exclude
from schemalgebra.algebra.intersect import intersect

__all__ = ["all_of", "any_of", "exclude", "if_then_else", "intersect", "negate"]
