import unittest

from surplus_sales.models import Material, MultiCab
from surplus_sales.repositories import AccessoryRepository, MaterialRepository, MultiCabRepository
from surplus_sales.repositories.query import CONTAINS_ANY, EQ, IEQ, FilterClause, FilterQuery


class TestFilterQuery(unittest.TestCase):

    def setUp(self):
        self.query = MultiCabRepository.query

    def compile(self, params):
        return self.query.select(params).compile()

    def test_no_filters_selects_everything_newest_first(self):
        compiled = self.compile({})
        sql = str(compiled)
        self.assertNotIn("WHERE", sql)
        self.assertIn("ORDER BY multicabs.created_at DESC", sql)
        self.assertEqual(compiled.params, {})

    def test_empty_and_missing_values_are_ignored(self):
        clauses = self.query.clauses({"make": "", "status": None, "search": ""})
        self.assertEqual(clauses, [])

    def test_unrecognized_keys_never_reach_sql(self):
        clauses = self.query.clauses({"price; DROP TABLE multicabs": "1", "category": "Lumber"})
        self.assertEqual(clauses, [])
        self.assertNotIn("DROP", str(self.compile({"price; DROP TABLE multicabs": "1"})))

    def test_one_bound_clause_per_key(self):
        params = {"make": "Suzuki", "status": "Available", "unit_color": "Maroon"}
        clauses = self.query.clauses(params)
        self.assertEqual(
            clauses,
            [
                FilterClause("make", EQ, "Suzuki"),
                FilterClause("unit_color", EQ, "Maroon"),
                FilterClause("status", EQ, "Available"),
            ],
        )

        compiled = self.compile(params)
        sql = str(compiled)
        self.assertEqual(sorted(compiled.params.values()), ["Available", "Maroon", "Suzuki"])
        self.assertEqual(sql.count(" AND "), 2)
        for value in params.values():
            self.assertNotIn(value, sql)

    def test_search_adds_one_or_group_over_two_columns(self):
        params = {"make": "Suzuki", "search": "carry"}
        clauses = self.query.clauses(params)
        self.assertEqual(clauses[-1], FilterClause(("name", "make"), CONTAINS_ANY, "%carry%"))

        compiled = self.compile(params)
        sql = str(compiled)
        self.assertEqual(len(compiled.params), 3)
        self.assertEqual(list(compiled.params.values()).count("%carry%"), 2)
        self.assertIn(" OR ", sql)
        self.assertEqual(sql.count(" AND "), 1)
        self.assertNotIn("carry", sql)

    def test_search_term_with_quotes_stays_a_parameter(self):
        compiled = self.compile({"search": "x' OR '1'='1"})
        self.assertNotIn("'1'='1", str(compiled))
        self.assertIn("%x' OR '1'='1%", compiled.params.values())

    def test_like_wildcards_in_search_are_escaped(self):
        clause = self.query.clauses({"search": "50%_off"})[0]
        self.assertEqual(clause.value, "%50\\%\\_off%")
        self.assertIn("ESCAPE", str(self.compile({"search": "50%"})))

    def test_count_uses_same_filters(self):
        compiled = self.query.count({"make": "Suzuki"}).compile()
        self.assertIn("count(*)", str(compiled))
        self.assertEqual(list(compiled.params.values()), ["Suzuki"])


class TestMaterialFilters(unittest.TestCase):

    def setUp(self):
        self.query = MaterialRepository.query

    def test_filters_compare_case_insensitively(self):
        clauses = self.query.clauses({"category": "lumber", "supplier": "Wood Works"})
        self.assertEqual([c.operator for c in clauses], [IEQ, IEQ])
        self.assertIn("lower(materials.category) = lower(", str(self.query.select({"category": "lumber"})))

    def test_numeric_search_matches_id(self):
        self.assertEqual(self.query.clauses({"search": "42"}), [FilterClause("id", EQ, 42)])

    def test_non_ascii_digits_search_as_text(self):
        self.assertEqual(self.query.clauses({"search": "²"})[0].operator, CONTAINS_ANY)

    def test_out_of_range_number_searches_as_text(self):
        term = "9" * 25
        self.assertEqual(
            self.query.clauses({"search": term}),
            [FilterClause(("name", "category", "supplier"), CONTAINS_ANY, f"%{term}%")],
        )
        self.assertEqual(self.query.clauses({"search": str(2 ** 31 - 1)})[0].operator, EQ)

    def test_text_search_spans_name_category_and_supplier(self):
        clause = self.query.clauses({"search": "ply"})[0]
        self.assertEqual(clause.column, ("name", "category", "supplier"))
        self.assertEqual(clause.value, "%ply%")


class TestAccessoryFilters(unittest.TestCase):

    def test_recognized_keys(self):
        self.assertEqual(
            AccessoryRepository.query.recognized_keys,
            ("make", "status", "unit_color", "search"),
        )

    def test_unknown_operator_is_rejected(self):
        query = FilterQuery(MultiCab, {"make": "make"})
        with self.assertRaises(ValueError):
            query.condition(FilterClause("make", "gt", "x"))

    def test_query_without_search_columns_ignores_search(self):
        query = FilterQuery(Material, {"status": "status"})
        self.assertEqual(query.clauses({"search": "anything"}), [])


if __name__ == "__main__":
    unittest.main()
