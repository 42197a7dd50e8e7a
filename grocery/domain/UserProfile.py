"""UserProfile: the fragment of a user's profile consumed by the grocery engine."""
from grocery.domain.Budget import BudgetPolicy
from grocery.domain.DietaryProfile import DietaryProfile
from grocery.domain.Household import HouseholdComposition
from grocery.utilities.errors import ProfileError

ORGANIC_CHOICES = ("yes", "when_affordable", "no")


class UserProfile:
    def __init__(self, household: HouseholdComposition, budget: BudgetPolicy, dietary: DietaryProfile,
                 organic: str = "no"):
        self.household = household
        self.budget = budget
        self.dietary = dietary
        self.organic = organic

    def __str__(self) -> str:
        return f"Profile: {self.household} - Budget: {self.budget} - {self.dietary}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds a profile, applying defaults for missing sections.

        Only a missing profile object is an error; absent household, budget or
        dietary sections fall back to a one-person household, a zero flexible
        budget and an empty dietary profile respectively.
        '''
        if data is None:
            raise ProfileError("User profile is required")
        if isinstance(data, UserProfile):
            return data
        if not isinstance(data, dict):
            raise ProfileError(f"User profile must be a mapping, got {type(data).__name__}")
        prefs = data.get("shoppingPreferences") if isinstance(data.get("shoppingPreferences"), dict) else {}
        organic = str(prefs.get("organic") or "no").lower()
        if organic not in ORGANIC_CHOICES:
            organic = "no"
        return UserProfile(
            household=HouseholdComposition.from_dict(data.get("household")),
            budget=BudgetPolicy.from_dict(data.get("budget")),
            dietary=DietaryProfile.from_dict(data.get("dietary"), prefer_preferred_variant=organic == "yes"),
            organic=organic,
        )
