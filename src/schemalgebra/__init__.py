"""schemalgebra — set algebra over JSON-schema value-space descriptors."""

from schemalgebra.algebra import all_of, any_of, exclude, if_then_else, intersect, negate
from schemalgebra.domain.descriptors import Descriptor, ErrorKind, MetaType, load_descriptor
from schemalgebra.domain.membership import matches

__version__ = "0.1.0"

__all__ = [
    "Descriptor",
    "ErrorKind",
    "MetaType",
    "__version__",
    "all_of",
    "any_of",
    "exclude",
    "if_then_else",
    "intersect",
    "load_descriptor",
    "matches",
    "negate",
]
