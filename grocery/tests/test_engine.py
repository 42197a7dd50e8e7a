import unittest
from datetime import date

from grocery.logic.pricing.catalog import IngredientPriceEntry, PriceCatalog
from grocery.logic.shopping.categorizer import CategoryRules
from grocery.logic.shopping.engine import GroceryListEngine
from grocery.logic.shopping.staples import CuisineStapleTable
from grocery.utilities.constants import CATEGORY_ORDER
from grocery.utilities.errors import ProfileError


def _profile(proteins=(), vegetables=(), fruits=(), grains=(), cuisines=(), allergies=(), restrictions=(),
             weekly=500, priority="flexible", household=None, organic="no"):
    return {
        "household": household if household is not None else {"totalMembers": 1, "adultCount": 1},
        "budget": {"weekly": weekly, "currency": "USD", "priority": priority},
        "dietary": {
            "restrictions": list(restrictions),
            "allergies": list(allergies),
            "cuisinePreferences": list(cuisines),
            "favoriteIngredients": {
                "proteins": list(proteins),
                "vegetables": list(vegetables),
                "fruits": list(fruits),
                "grains": list(grains),
            },
        },
        "shoppingPreferences": {"organic": organic},
    }


class TestGroceryListEngine(unittest.TestCase):

    def setUp(self):
        self.engine = GroceryListEngine()

    def test_empty_preferences_give_empty_list(self):
        grocery_list = self.engine.generate("u1", _profile())
        self.assertEqual(grocery_list.items, [])
        self.assertEqual(grocery_list.metadata["itemCount"], 0)
        self.assertEqual(grocery_list.metadata["budgetStatus"], "under")

    def test_allergy_overrides_essential(self):
        grocery_list = self.engine.generate("u1", _profile(proteins=["peanuts", "chicken"], allergies=["peanuts"]))
        names = [i.name.lower() for i in grocery_list.items]
        self.assertNotIn("peanuts", names)
        self.assertIn("chicken", names)

    def test_no_item_contains_an_allergen(self):
        profile = _profile(proteins=["chicken", "salmon", "tofu"], vegetables=["spinach", "sesame greens"],
                           grains=["bread"], cuisines=["asian", "american", "italian"],
                           allergies=["fish", "other:Sesame", "eggs"])
        grocery_list = self.engine.generate("u1", profile)
        for item in grocery_list.items:
            name = item.name.lower()
            for allergen in ("fish", "salmon", "sesame", "egg"):
                self.assertNotIn(allergen, name)
        self.assertTrue(grocery_list.items)

    def test_vegan_household(self):
        profile = _profile(proteins=["tofu", "beef"], cuisines=["american"], restrictions=["vegan"])
        names = [i.name for i in self.engine.generate("u1", profile).items]
        self.assertEqual(sorted(names), ["Bread", "Tofu"])

    def test_items_sorted_by_category_then_priority(self):
        profile = _profile(proteins=["chicken"], vegetables=["broccoli"], grains=["rice"],
                           cuisines=["italian", "american"])
        items = self.engine.generate("u1", profile).items
        keys = [(CATEGORY_ORDER.index(i.category), ["essential", "staple", "optional"].index(i.priority))
                for i in items]
        self.assertEqual(keys, sorted(keys))
        self.assertEqual(items[0].name, "Broccoli")

    def test_household_scaling_applied(self):
        household = {"totalMembers": 4, "adultCount": 2, "hasChildren": True, "childrenAges": [3, 7]}
        grocery_list = self.engine.generate("u1", _profile(proteins=["chicken"], household=household))
        chicken = grocery_list.items[0]
        # scaling 2.8 -> 5.6 lb
        self.assertEqual(chicken.quantity, 6)
        self.assertAlmostEqual(chicken.estimated_price, 22.34)
        self.assertEqual(grocery_list.metadata["householdSize"], 4)

    def test_strict_overage_recorded_in_metadata(self):
        profile = _profile(proteins=["beef", "salmon"], weekly=20, priority="strict")
        grocery_list = self.engine.generate("u1", profile)
        self.assertEqual(grocery_list.metadata["budgetStatus"], "over")
        self.assertEqual(grocery_list.warnings[0].type, "over_budget")
        self.assertTrue(all(i.alternative_suggestion for i in grocery_list.items))

    def test_zero_member_household_rejected_when_there_is_something_to_buy(self):
        household = {"totalMembers": 0}
        with self.assertRaises(ProfileError):
            self.engine.generate("u1", _profile(proteins=["chicken"], household=household))

    def test_zero_member_household_with_only_staples(self):
        household = {"totalMembers": 0}
        grocery_list = self.engine.generate("u1", _profile(cuisines=["american"], household=household))
        self.assertEqual(grocery_list.metadata["itemCount"], 5)

    def test_missing_profile_is_an_error(self):
        with self.assertRaises(ProfileError):
            self.engine.generate("u1", None)

    def test_missing_sections_use_defaults(self):
        grocery_list = self.engine.generate("u1", {})
        self.assertEqual(grocery_list.items, [])
        self.assertEqual(grocery_list.metadata["budgetLimit"], 0)
        self.assertEqual(grocery_list.metadata["budgetStatus"], "at")

    def test_injected_tables(self):
        engine = GroceryListEngine(
            catalog=PriceCatalog([IngredientPriceEntry("kimchi", 6.5, None, "jar")]),
            rules=CategoryRules([("pantry", ("kimchi",))]),
            staples=CuisineStapleTable({"korean": ["kimchi", "gochujang"]}),
        )
        items = engine.generate("u1", _profile(cuisines=["Korean"])).items
        self.assertEqual([(i.name, i.category, i.estimated_price, i.unit) for i in items], [
            ("Kimchi", "pantry", 6.5, "jar"),
            ("Gochujang", "other", 5.0, "item"),
        ])

    def test_week_dates(self):
        grocery_list = self.engine.generate("u1", _profile(), today=date(2024, 1, 1))
        self.assertEqual(grocery_list.week_starting, date(2024, 1, 1))
        self.assertEqual(grocery_list.week_ending, date(2024, 1, 8))


if __name__ == '__main__':
    unittest.main()
