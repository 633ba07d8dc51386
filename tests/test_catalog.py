import unittest

from jqlens.queries.catalog import DEFAULT_LABEL, PRESET_QUERIES, QueryCatalog, QueryPreset


class QueryCatalogTests(unittest.TestCase):
    def test_presets_keep_insertion_order(self) -> None:
        self.assertEqual(
            PRESET_QUERIES.labels(),
            ["Context Count", "Simple Context Count", "Error Levels", "Recent Errors"],
        )

    def test_default_is_context_count(self) -> None:
        self.assertEqual(DEFAULT_LABEL, "Context Count")
        self.assertEqual(PRESET_QUERIES.default.label, "Context Count")
        self.assertEqual(
            PRESET_QUERIES.default.expression,
            "group_by(.fields.context) | map({context: .[0].fields.context, count: length}) | sort_by(.count) | reverse",
        )

    def test_resolve_prefers_custom_expression(self) -> None:
        self.assertEqual(PRESET_QUERIES.resolve(".[0]"), ".[0]")

    def test_resolve_falls_back_to_default(self) -> None:
        for blank in (None, "", "   \n"):
            with self.subTest(blank=blank):
                self.assertEqual(PRESET_QUERIES.resolve(blank), PRESET_QUERIES.default.expression)

    def test_catalog_is_read_only(self) -> None:
        exported = PRESET_QUERIES.as_dict()
        exported["Injected"] = "."
        self.assertNotIn("Injected", PRESET_QUERIES)
        self.assertEqual(len(PRESET_QUERIES), 4)
        with self.assertRaises(TypeError):
            PRESET_QUERIES._presets["Injected"] = QueryPreset("Injected", ".")

    def test_duplicate_labels_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            QueryCatalog([QueryPreset("A", "."), QueryPreset("A", ".[]")], default_label="A")

    def test_unknown_default_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            QueryCatalog([QueryPreset("A", ".")], default_label="B")


if __name__ == "__main__":
    unittest.main()
