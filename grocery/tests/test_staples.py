import unittest

from grocery.logic.pricing.catalog import PriceCatalog
from grocery.logic.shopping.categorizer import CategoryRules
from grocery.logic.shopping.staples import CuisineStapleTable, display_name


class TestStapleGenerator(unittest.TestCase):

    def setUp(self):
        self.table = CuisineStapleTable.default()
        self.catalog = PriceCatalog.default()
        self.rules = CategoryRules.default()

    def test_display_name(self):
        self.assertEqual(display_name("olive_oil"), "Olive Oil")
        self.assertEqual(display_name("rice"), "Rice")

    def test_staples_deduplicated_across_cuisines(self):
        keys = self.table.staple_keys(["italian", "mexican"])
        self.assertEqual(keys, [
            "olive_oil", "garlic", "onions", "canned_tomatoes", "pasta", "cheese",
            "beans", "rice", "peppers", "tomatoes", "tortillas",
        ])

    def test_staple_items(self):
        items = self.table.staples(["Italian"], self.catalog, self.rules)
        self.assertEqual(len(items), 6)
        oil = items[0]
        self.assertEqual(oil.id, "staple_olive_oil")
        self.assertEqual(oil.name, "Olive Oil")
        self.assertEqual(oil.quantity, 1)
        self.assertEqual(oil.unit, "bottle")
        self.assertEqual(oil.category, "pantry")
        self.assertEqual(oil.estimated_price, 8.99)
        self.assertEqual(oil.priority, "staple")
        self.assertEqual(oil.for_meals, [])
        self.assertFalse(oil.checked)
        self.assertFalse(oil.purchased)
        self.assertIsNone(oil.alternative_suggestion)

    def test_unpriced_staple_uses_default(self):
        items = self.table.staples(["mexican"], self.catalog, self.rules)
        tortillas = [i for i in items if i.id == "staple_tortillas"][0]
        self.assertEqual(tortillas.estimated_price, 5.0)
        self.assertEqual(tortillas.unit, "item")
        self.assertEqual(tortillas.category, "other")

    def test_unknown_and_empty_cuisines(self):
        self.assertEqual(self.table.staples(["martian"], self.catalog, self.rules), [])
        self.assertEqual(self.table.staples([], self.catalog, self.rules), [])
        self.assertEqual(self.table.staples(None, self.catalog, self.rules), [])

    def test_custom_table(self):
        table = CuisineStapleTable({"Nordic": ["rye bread", "butter"]})
        items = table.staples(["nordic"], self.catalog, self.rules)
        self.assertEqual([i.id for i in items], ["staple_rye_bread", "staple_butter"])
        self.assertEqual(items[0].category, "grains_bread")


if __name__ == '__main__':
    unittest.main()
