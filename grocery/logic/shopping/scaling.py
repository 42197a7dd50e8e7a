"""Household scaling: one multiplier from household composition."""
from grocery.domain.Household import HouseholdComposition
from grocery.utilities.constants import ADULT_WEIGHT, CHILD_AGE_WEIGHTS

__all__ = ["child_weight", "household_scaling"]


def child_weight(age: int) -> float:
    for max_age, weight in CHILD_AGE_WEIGHTS:
        if age <= max_age:
            return weight
    # older children stay in the last band
    return CHILD_AGE_WEIGHTS[-1][1]


def household_scaling(household: HouseholdComposition) -> float:
    """Sum of member weights: adults 1.0, children by age band.

    Children count only when the household declares children. A household
    with no adults and no children scales to 0.
    """
    total = household.adults * ADULT_WEIGHT
    if household.has_children:
        total += sum(child_weight(age) for age in household.children_ages)
    return round(total, 4)
