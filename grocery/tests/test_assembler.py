import unittest

from grocery.domain.DietaryProfile import DietaryProfile
from grocery.logic.pricing.catalog import PriceCatalog
from grocery.logic.shopping.assembler import ItemAssembler, round_half_up
from grocery.logic.shopping.categorizer import CategoryRules
from grocery.logic.shopping.staples import CuisineStapleTable


def _profile(proteins=(), vegetables=(), fruits=(), grains=(), cuisines=(), organic=False):
    return DietaryProfile(
        cuisine_preferences=list(cuisines),
        favorite_ingredients={
            "proteins": list(proteins),
            "vegetables": list(vegetables),
            "fruits": list(fruits),
            "grains": list(grains),
        },
        prefer_preferred_variant=organic,
    )


class TestItemAssembler(unittest.TestCase):

    def setUp(self):
        self.assembler = ItemAssembler(PriceCatalog.default(), CategoryRules.default(), CuisineStapleTable.default())

    def _by_id(self, items):
        return {i.id: i for i in items}

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(1.5), 2)
        self.assertEqual(round_half_up(1.49), 1)
        self.assertEqual(round_half_up(0), 0)

    def test_quantities_and_prices_for_single_adult(self):
        items = self._by_id(self.assembler.assemble(
            _profile(["chicken"], ["broccoli"], ["apples"], ["rice"]), 1.0))
        chicken = items["protein_chicken"]
        self.assertEqual((chicken.quantity, chicken.unit), (2, "lb"))
        self.assertAlmostEqual(chicken.estimated_price, 7.98)
        self.assertEqual(chicken.category, "proteins")
        self.assertEqual(chicken.priority, "essential")
        self.assertEqual(chicken.for_meals, ["various"])

        broccoli = items["veg_broccoli"]
        self.assertEqual(broccoli.quantity, 1)
        self.assertAlmostEqual(broccoli.estimated_price, 2.49)
        self.assertEqual(broccoli.category, "produce")

        apples = items["fruit_apples"]
        self.assertEqual(apples.quantity, 2)
        self.assertEqual(apples.for_meals, ["snacks"])

        rice = items["grain_rice"]
        self.assertEqual((rice.quantity, rice.unit), (2, "pack"))
        self.assertAlmostEqual(rice.estimated_price, 2.99)
        self.assertEqual(rice.category, "grains_bread")

    def test_scaling_applies_to_weighted_buckets_only(self):
        items = self._by_id(self.assembler.assemble(
            _profile(["beef"], ["carrots"], ["apples"], ["pasta"]), 2.0))
        self.assertEqual(items["protein_beef"].quantity, 4)
        self.assertAlmostEqual(items["protein_beef"].estimated_price, 27.96)
        self.assertEqual(items["veg_carrots"].quantity, 2)
        self.assertAlmostEqual(items["veg_carrots"].estimated_price, 3.98)
        self.assertEqual(items["fruit_apples"].quantity, 3)
        self.assertAlmostEqual(items["fruit_apples"].estimated_price, 5.97)
        self.assertEqual(items["grain_pasta"].quantity, 2)
        self.assertAlmostEqual(items["grain_pasta"].estimated_price, 1.99)

    def test_half_quantities_round_up(self):
        items = self._by_id(self.assembler.assemble(_profile(["pork"]), 1.25))
        self.assertEqual(items["protein_pork"].quantity, 3)

    def test_preferred_variant_pricing(self):
        items = self._by_id(self.assembler.assemble(_profile(["chicken"], grains=["rice"], organic=True), 1.0))
        self.assertAlmostEqual(items["protein_chicken"].estimated_price, 15.98)
        self.assertAlmostEqual(items["grain_rice"].estimated_price, 4.99)

    def test_bucket_caps(self):
        profile = _profile(
            proteins=["chicken", "beef", "pork", "fish", "tofu"],
            vegetables=["v%d" % i for i in range(10)],
            fruits=["f%d" % i for i in range(6)],
            grains=["rice", "oats", "quinoa"],
        )
        items = self.assembler.assemble(profile, 1.0)
        prefixes = [i.id.split("_")[0] for i in items]
        self.assertEqual(prefixes.count("protein"), 3)
        self.assertEqual(prefixes.count("veg"), 7)
        self.assertEqual(prefixes.count("fruit"), 4)
        self.assertEqual(prefixes.count("grain"), 2)
        self.assertEqual([i.name for i in items[:3]], ["Chicken", "Beef", "Pork"])

    def test_unknown_ingredient_uses_bucket_category_and_default_price(self):
        items = self._by_id(self.assembler.assemble(_profile(["peanuts"], ["kale"]), 1.0))
        self.assertEqual(items["protein_peanuts"].category, "proteins")
        self.assertAlmostEqual(items["protein_peanuts"].estimated_price, 10.0)
        self.assertEqual(items["veg_kale"].category, "produce")

    def test_categorizer_overrides_bucket(self):
        items = self._by_id(self.assembler.assemble(_profile(vegetables=["tofu"]), 1.0))
        self.assertEqual(items["veg_tofu"].category, "proteins")

    def test_staples_appended_after_favorites(self):
        items = self.assembler.assemble(_profile(["chicken"], cuisines=["american"]), 1.0)
        self.assertEqual(items[0].id, "protein_chicken")
        self.assertEqual([i.id for i in items[1:]],
                         ["staple_butter", "staple_milk", "staple_eggs", "staple_bread", "staple_cheese"])

    def test_duplicate_preferences_kept_once(self):
        items = self.assembler.assemble(_profile(["chicken", "Chicken"]), 1.0)
        self.assertEqual([i.id for i in items], ["protein_chicken"])

    def test_empty_profile_yields_no_items(self):
        self.assertEqual(self.assembler.assemble(_profile(), 1.0), [])


if __name__ == '__main__':
    unittest.main()
