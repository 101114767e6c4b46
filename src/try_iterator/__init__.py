from . import traits
from ._iter import Iter, Seq
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._traversal import (
    Predicate,
    is_double_ended,
    try_all,
    try_any,
    try_find,
    try_position,
    try_rposition,
)

__all__ = [
    "NONE",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Predicate",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "Some",
    "is_double_ended",
    "traits",
    "try_all",
    "try_any",
    "try_find",
    "try_position",
    "try_rposition",
]
