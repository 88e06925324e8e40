import pytest

from giftideas.errors import ExtractionError, ParseError, ShapeValidationError
from giftideas.parsing import extract_json_array, parse_gift_ideas


ONE_IDEA = '[{"name":"A","description":"d","reason":"r","priceRange":"$1"}]'


class TestExtractJsonArray:

    def test_bare_array(self):
        assert extract_json_array(ONE_IDEA) == ONE_IDEA

    def test_array_inside_prose(self):
        text = f"Sure! Here are some ideas:\n{ONE_IDEA}\nHope that helps."
        assert extract_json_array(text) == ONE_IDEA

    def test_array_inside_markdown_fence(self):
        text = f"```json\n{ONE_IDEA}\n```"
        assert extract_json_array(text) == ONE_IDEA

    def test_strict_match_spans_whitespace_and_nesting(self):
        text = 'ideas:\n[\n  {"name": "A", "whereToBuy": ["X", "Y"]},\n  {"name": "B"}\n]\nthanks'
        assert extract_json_array(text) == text[len("ideas:\n"):-len("\nthanks")]

    def test_falls_back_to_loose_match_without_objects(self):
        assert extract_json_array('the colors are ["red", "blue"] ok') == '["red", "blue"]'

    def test_no_brackets_raises(self):
        with pytest.raises(ExtractionError) as exc:
            extract_json_array("I can't help with gift ideas today.")
        assert "response format was unexpected" in str(exc.value)

    def test_empty_text_raises(self):
        with pytest.raises(ExtractionError):
            extract_json_array("")


class TestParseGiftIdeas:

    def test_valid_array(self):
        ideas = parse_gift_ideas(ONE_IDEA)

        assert len(ideas) == 1
        assert ideas[0].name == "A"
        assert ideas[0].description == "d"
        assert ideas[0].reason == "r"
        assert ideas[0].price_range == "$1"
        assert ideas[0].where_to_buy == []

    def test_optional_lists_are_read(self):
        text = (
            '[{"name":"Kit","description":"d","reason":"r","priceRange":"$20",'
            '"whereToBuy":["REI","Amazon"],"recommendedBrands":["Black Diamond"]}]'
        )
        idea = parse_gift_ideas(text)[0]

        assert idea.where_to_buy == ["REI", "Amazon"]
        assert idea.recommended_brands == ["Black Diamond"]
        assert idea.model_dump(by_alias=True)["whereToBuy"] == ["REI", "Amazon"]

    def test_trailing_comma_is_parse_error(self):
        with pytest.raises(ParseError) as exc:
            parse_gift_ideas('[{"name":"A","description":"d","reason":"r","priceRange":"$1"},]')
        assert str(exc.value) == "Failed to parse the AI response. Please try again."

    def test_empty_array_is_shape_error(self):
        with pytest.raises(ShapeValidationError) as exc:
            parse_gift_ideas("[]")
        assert "invalid response format" in str(exc.value)

    def test_object_instead_of_array_is_shape_error(self):
        with pytest.raises(ShapeValidationError):
            parse_gift_ideas('{"name":"A"}')

    def test_first_item_missing_reason(self):
        with pytest.raises(ShapeValidationError) as exc:
            parse_gift_ideas('[{"name":"A","description":"d","priceRange":"$1"}]')
        assert "missing required information" in str(exc.value)

    def test_first_item_with_blank_field(self):
        with pytest.raises(ShapeValidationError):
            parse_gift_ideas('[{"name":"","description":"d","reason":"r","priceRange":"$1"}]')

    def test_first_item_not_an_object(self):
        with pytest.raises(ShapeValidationError):
            parse_gift_ideas('["red", "blue"]')

    def test_only_first_item_is_checked_for_required_fields(self):
        text = '[{"name":"A","description":"d","reason":"r","priceRange":"$1"},{"name":"B"}]'
        ideas = parse_gift_ideas(text)

        assert [g.name for g in ideas] == ["A", "B"]
        assert ideas[1].reason == ""

    def test_later_item_that_is_not_an_object_is_skipped(self):
        ideas = parse_gift_ideas('[{"name":"A","description":"d","reason":"r","priceRange":"$1"}, 7, {"name":"B"}]')

        assert [g.name for g in ideas] == ["A", "B"]

    def test_store_list_written_as_text(self):
        text = (
            '[{"name":"A","description":"d","reason":"r","priceRange":"$1",'
            '"whereToBuy":"Amazon, Target","recommendedBrands":"Lego"}]'
        )
        idea = parse_gift_ideas(text)[0]

        assert idea.where_to_buy == ["Amazon", "Target"]
        assert idea.recommended_brands == ["Lego"]

    def test_nulls_in_later_items_are_read_as_blank(self):
        text = (
            '[{"name":"A","description":"d","reason":"r","priceRange":"$1"},'
            '{"name":"B","description":null,"whereToBuy":null}]'
        )
        ideas = parse_gift_ideas(text)

        assert ideas[1].name == "B"
        assert ideas[1].description == ""
        assert ideas[1].where_to_buy == []
