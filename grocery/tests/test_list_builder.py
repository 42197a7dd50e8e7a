import unittest
from datetime import date

from grocery.domain.Budget import BudgetPolicy
from grocery.domain.GroceryItem import GroceryItem
from grocery.domain.Household import HouseholdComposition
from grocery.domain.Notice import Notice
from grocery.logic.shopping.budget import BudgetResolution
from grocery.logic.shopping.list_builder import assemble_list, sort_items


def _item(item_id, category, priority):
    return GroceryItem(id=item_id, name=item_id, quantity=1, category=category, estimated_price=2.0,
                       priority=priority)


class TestListBuilder(unittest.TestCase):

    def test_sort_by_category_then_priority(self):
        items = [
            _item("oil", "pantry", "staple"),
            _item("chips", "other", "optional"),
            _item("milk", "dairy", "staple"),
            _item("chicken", "proteins", "essential"),
            _item("garlic", "produce", "staple"),
            _item("broccoli", "produce", "essential"),
            _item("rice", "grains_bread", "essential"),
        ]
        self.assertEqual([i.id for i in sort_items(items)],
                         ["broccoli", "garlic", "chicken", "milk", "rice", "oil", "chips"])

    def test_sort_is_stable(self):
        items = [_item("b", "produce", "essential"), _item("a", "produce", "essential"),
                 _item("x", "dairy", "staple"), _item("c", "produce", "essential")]
        self.assertEqual([i.id for i in sort_items(items)], ["b", "a", "c", "x"])

    def test_unknown_category_sorts_last(self):
        items = [_item("mystery", "frozen", "essential"), _item("other", "other", "optional")]
        self.assertEqual([i.id for i in sort_items(items)], ["other", "mystery"])

    def test_assemble_list_metadata(self):
        items = [_item("milk", "dairy", "staple"), _item("broccoli", "produce", "essential")]
        warning = Notice("over_budget", "Too much", overage=3.0)
        resolution = BudgetResolution(items, "over", 4.0, [warning], [])
        household = HouseholdComposition(3, 2, True, [6])
        budget = BudgetPolicy(1.0, "EUR", "strict")

        grocery_list = assemble_list(resolution, household, budget, "user-1", today=date(2024, 3, 4))

        self.assertTrue(grocery_list.id)
        self.assertEqual(grocery_list.user_id, "user-1")
        self.assertEqual(grocery_list.week_starting, date(2024, 3, 4))
        self.assertEqual(grocery_list.week_ending, date(2024, 3, 11))
        self.assertEqual([i.id for i in grocery_list.items], ["broccoli", "milk"])
        self.assertEqual(grocery_list.metadata, {
            "householdSize": 3,
            "totalEstimatedCost": 4.0,
            "budgetLimit": 1.0,
            "budgetStatus": "over",
            "itemCount": 2,
            "currency": "EUR",
        })
        self.assertEqual(grocery_list.warnings, [warning])
        self.assertEqual(grocery_list.suggestions, [])
        # input order untouched
        self.assertEqual([i.id for i in items], ["milk", "broccoli"])

    def test_empty_list(self):
        resolution = BudgetResolution([], "at", 0.0)
        grocery_list = assemble_list(resolution, HouseholdComposition(1, 1), BudgetPolicy(0), "u")
        self.assertEqual(grocery_list.items, [])
        self.assertEqual(grocery_list.metadata["itemCount"], 0)

    def test_ids_are_unique(self):
        resolution = BudgetResolution([], "at", 0.0)
        a = assemble_list(resolution, HouseholdComposition(1, 1), BudgetPolicy(0), "u")
        b = assemble_list(resolution, HouseholdComposition(1, 1), BudgetPolicy(0), "u")
        self.assertNotEqual(a.id, b.id)


if __name__ == '__main__':
    unittest.main()
