"\"\"\"Predicates over the modifications carried by a record.\"\"\""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ...schemas.modification import Modification
from ..types import FilterComparator, PredicateError

if TYPE_CHECKING:
    from ..filter import RecordFilter


def modification_predicate(flt: "RecordFilter", modifications: Sequence[Modification]) -> bool:
    comparator = flt.comparator
    if comparator is FilterComparator.HAS_ANY_MODIFICATION:
        return len(modifications) > 0

    if comparator is FilterComparator.HAS_DESCRIPTION:
        return any(
            mod.description is not None and mod.description == flt.value
            for mod in modifications
        )

    if comparator is FilterComparator.HAS_MASS:
        if flt.target_mass is None:
            raise PredicateError(f"mass target {flt.value!r} is not a number")
        return any(
            abs(mod.mass - flt.target_mass) <= flt.mass_tolerance
            for mod in modifications
        )

    if comparator is FilterComparator.HAS_RESIDUE:
        # the modification does not have to sit on this residue, only start with it
        return any(
            mod.residue is not None and str(mod.residue).startswith(flt.value)
            for mod in modifications
        )

    raise PredicateError(f"comparator '{comparator}' is not supported for modification filters")
