"""Tests for variant entry normalization and derived fields."""

import pytest

from models import VariantOption
from normalization.variants import assemble_group, normalize_variant


class TestNormalizeVariant:
    def test_basic_fields(self):
        option = normalize_variant({"text": "M", "selected": True, "value": "m-38"})
        assert option.text == "M"
        assert option.selected is True
        assert option.value == "m-38"
        assert option.extra is None

    def test_defaults_for_bad_fields(self):
        option = normalize_variant({"text": None, "selected": "yes", "value": 42})
        assert option.text == ""
        assert option.selected is False
        assert option.value is None

    def test_numeric_text_is_rendered(self):
        assert normalize_variant({"text": 38}).text == "38"

    def test_selected_string_true(self):
        assert normalize_variant({"text": "S", "selected": "true"}).selected is True

    def test_extra_only_recognized_keys(self):
        option = normalize_variant({
            "text": "Red",
            "colorValue": "#f00",
            "inStock": False,
            "swatchId": "abc",
        })
        assert option.extra == {"colorValue": "#f00", "inStock": False}

    def test_extra_values_kept_verbatim(self):
        option = normalize_variant({"text": "Red", "inStock": None})
        assert option.extra == {"inStock": None}

    def test_is_frozen(self):
        option = normalize_variant({"text": "S"})
        with pytest.raises(Exception):
            option.text = "M"

    def test_structural_equality(self):
        assert normalize_variant({"text": "S", "value": "x"}) == VariantOption(text="S", value="x")


class TestIsInStock:
    @pytest.mark.parametrize("raw, expected", [
        ({"text": "S", "inStock": True}, True),
        ({"text": "S", "inStock": "true"}, False),
        ({"text": "S", "inStock": 1}, False),
        ({"text": "S", "value": "Out of Stock"}, False),
        ({"text": "S"}, True),
    ])
    def test_truth_table(self, raw, expected):
        assert normalize_variant(raw).is_in_stock is expected

    def test_extra_wins_over_value(self):
        option = normalize_variant({"text": "S", "inStock": True, "value": "sold out"})
        assert option.is_in_stock is True

    def test_embedded_json_wins_over_keywords(self):
        option = normalize_variant({"text": "S", "value": '{"inStock": true, "label": "sold out"}'})
        assert option.is_in_stock is True

    def test_deeply_nested_value_falls_through(self):
        option = normalize_variant({"text": "S", "value": "[" * 200000 + "\"inStock\""})
        assert option.is_in_stock is True

    def test_embedded_json(self):
        assert normalize_variant({"text": "S", "value": '{"inStock": false}'}).is_in_stock is False
        assert normalize_variant({"text": "S", "value": '{"inStock": true}'}).is_in_stock is True

    def test_embedded_json_without_flag_value_is_false(self):
        option = normalize_variant({"text": "S", "value": '{"inStock": "yes"}'})
        assert option.is_in_stock is False

    def test_broken_json_falls_through_to_keywords(self):
        option = normalize_variant({"text": "S", "value": "inStock: no, size disabled"})
        assert option.is_in_stock is False

    def test_broken_json_without_keyword_defaults_true(self):
        option = normalize_variant({"text": "S", "value": "{inStock"})
        assert option.is_in_stock is True

    @pytest.mark.parametrize("value", [
        "Unavailable", "OUT-OF-STOCK", "size--disabled", "Sold Out", "out of stock",
    ])
    def test_keywords(self, value):
        assert normalize_variant({"text": "S", "value": value}).is_in_stock is False


class TestDerivedFields:
    def test_rgb_from_value(self):
        option = normalize_variant({"text": "Black", "value": "background: rgb(10, 20, 30); color: red"})
        assert option.rgb_value == "rgb(10, 20, 30)"

    def test_rgb_is_case_sensitive(self):
        assert normalize_variant({"text": "Black", "value": "RGB(1, 2, 3)"}).rgb_value is None

    def test_empty_rgb_is_ignored(self):
        assert normalize_variant({"text": "Black", "value": "rgb() then rgb(4, 5, 6)"}).rgb_value == "rgb(4, 5, 6)"

    def test_rgb_from_extra(self):
        option = normalize_variant({"text": "Black", "rgbValue": "rgb(0, 0, 0)", "value": "rgb(1, 1, 1)"})
        assert option.rgb_value == "rgb(0, 0, 0)"

    def test_color_value_falls_back_to_value(self):
        assert normalize_variant({"text": "Red", "value": "#ff0000"}).color_value == "#ff0000"
        assert normalize_variant({"text": "Red", "colorValue": "red", "value": "x"}).color_value == "red"
        assert normalize_variant({"text": "Red"}).color_value is None

    @pytest.mark.parametrize("value, expected", [
        ("https://cdn.example.com/a.jpg", "https://cdn.example.com/a.jpg"),
        ("//cdn.example.com/a.jpg", "//cdn.example.com/a.jpg"),
        ("red", None),
    ])
    def test_image_url_from_value(self, value, expected):
        assert normalize_variant({"text": "Red", "value": value}).image_url == expected

    def test_image_url_from_extra(self):
        option = normalize_variant({"text": "Red", "imageUrl": "https://x/a.jpg", "value": "https://x/b.jpg"})
        assert option.image_url == "https://x/a.jpg"


class TestAssembleGroup:
    def test_drops_entries_without_text_and_keeps_order(self):
        entries = [
            {"text": "S"},
            {"value": "no text"},
            "M",
            None,
            {"text": ""},
            {"text": "L"},
        ]
        result = assemble_group("sizes", entries)
        assert [o.text for o in result.options] == ["S", "", "L"]
        assert [index for index, _ in result.dropped] == [1, 2, 3]

    def test_non_string_keys_are_ignored(self):
        result = assemble_group("sizes", [{"text": "S", 1: "one", "inStock": False}])
        assert result.options[0].extra == {"inStock": False}

    def test_failing_entry_does_not_abort_group(self, monkeypatch):
        import normalization.variants as variants

        original = variants.normalize_variant

        def flaky(raw):
            if raw["text"] == "boom":
                raise RuntimeError("bad entry")
            return original(raw)

        monkeypatch.setattr(variants, "normalize_variant", flaky)
        result = variants.assemble_group("sizes", [{"text": "S"}, {"text": "boom"}, {"text": "M"}])
        assert [o.text for o in result.options] == ["S", "M"]
        assert result.dropped[0][0] == 1
        assert "bad entry" in result.dropped[0][1]

    def test_drops_are_logged(self, caplog):
        with caplog.at_level("WARNING", logger="normalization.variants"):
            assemble_group("colors", [{"value": "x"}])
        assert "missing text" in caplog.text
