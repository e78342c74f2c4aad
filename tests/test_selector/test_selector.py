"""Tests for the selector fragment parser and unification."""

import pytest

from bemforge.errors import SelectorUnificationError
from bemforge.selector import (
    CompoundSelector,
    SimpleSelector,
    parse_complex,
    parse_compound,
    split_selector_list,
    unify,
    unify_compound,
)


# ---------------------------------------------------------------------------
# Selector lists
# ---------------------------------------------------------------------------


class TestSplitSelectorList:
    def test_single(self):
        assert split_selector_list(".a") == [".a"]

    def test_strips_whitespace(self):
        assert split_selector_list(" .a ,  .b ") == [".a", ".b"]

    def test_ignores_commas_in_parentheses(self):
        assert split_selector_list(":is(.a, .b), .c") == [":is(.a, .b)", ".c"]

    def test_ignores_commas_in_quotes(self):
        assert split_selector_list('[title="a,b"], .c') == ['[title="a,b"]', ".c"]

    def test_empty(self):
        assert split_selector_list("") == []


# ---------------------------------------------------------------------------
# Compound parsing
# ---------------------------------------------------------------------------


class TestParseCompound:
    def test_type_and_class(self):
        compound = parse_compound("a.button")
        assert compound.simples == (
            SimpleSelector(kind="type", value="a"),
            SimpleSelector(kind="class", value="button"),
        )

    def test_all_kinds(self):
        compound = parse_compound('input#q.field[type="text"]:focus::placeholder')
        assert [s.kind for s in compound.simples] == [
            "type",
            "id",
            "class",
            "attribute",
            "pseudo_class",
            "pseudo_element",
        ]
        assert str(compound) == 'input#q.field[type="text"]:focus::placeholder'

    def test_pseudo_with_nested_arguments(self):
        compound = parse_compound(".a:not(:is(.b, .c))")
        assert compound.simples[1] == SimpleSelector(kind="pseudo_class", value=":not(:is(.b, .c))")

    def test_legacy_pseudo_element(self):
        compound = parse_compound(".a:before")
        assert compound.pseudo_elements == (SimpleSelector(kind="pseudo_element", value=":before"),)

    def test_universal(self):
        assert parse_compound("*").type_selector == SimpleSelector(kind="universal", value="*")

    def test_unrecognized_is_raw(self):
        compound = parse_compound(".a&b")
        assert compound.is_raw
        assert str(compound) == ".a&b"

    def test_type_after_class_is_raw(self):
        assert parse_compound("[x]a").is_raw

    def test_empty(self):
        compound = parse_compound("  ")
        assert compound == CompoundSelector()
        assert not compound.is_raw


class TestParseComplex:
    def test_descendant(self):
        complex_ = parse_complex(".nav .item")
        assert complex_.ancestors == ".nav "
        assert str(complex_.subject) == ".item"

    def test_child_combinator(self):
        complex_ = parse_complex(".nav > li")
        assert complex_.ancestors == ".nav > "
        assert str(complex_) == ".nav > li"

    def test_combinator_inside_arguments_ignored(self):
        complex_ = parse_complex("li:nth-child(2n + 1)")
        assert complex_.ancestors == ""

    def test_attribute_operator_ignored(self):
        complex_ = parse_complex("[class~=a]")
        assert complex_.ancestors == ""

    def test_hex_escape_space_is_not_a_combinator(self):
        complex_ = parse_complex(r".a .\31 0")
        assert complex_.ancestors == ".a "
        assert complex_.subject.simples == (SimpleSelector(kind="class", value=r"\31 0"),)

    def test_simple_escape(self):
        complex_ = parse_complex(r".a\ b")
        assert complex_.ancestors == ""


# ---------------------------------------------------------------------------
# Unification
# ---------------------------------------------------------------------------


class TestUnify:
    def test_tag_then_class(self):
        assert unify("button", ".large") == "button.large"

    def test_tag_moves_first(self):
        assert unify(".button", "a") == "a.button"

    def test_same_tag(self):
        assert unify("a.x", "A.y") == "a.x.y"

    def test_duplicates_removed(self):
        assert unify(".a.b", ".b.c") == ".a.b.c"

    def test_universal_dropped(self):
        assert unify("*", ".a") == ".a"

    def test_universal_alone_kept(self):
        assert unify("*", "*") == "*"

    def test_universal_replaced_by_tag(self):
        assert unify("*.a", "p") == "p.a"

    def test_pseudo_element_stays_last(self):
        assert unify(".a::after", ":hover") == ".a:hover::after"

    def test_same_pseudo_element(self):
        assert unify(".a::after", ".b::after") == ".a.b::after"

    def test_pseudo_class_after_pseudo_element_stays_on_it(self):
        assert (
            unify(".list::-webkit-scrollbar-thumb:hover", ".x")
            == ".list.x::-webkit-scrollbar-thumb:hover"
        )

    def test_qualifier_pseudo_element_tail_appended(self):
        assert unify(".a", "::before:hover") == ".a::before:hover"

    def test_tails_differing_after_pseudo_element_conflict(self):
        with pytest.raises(SelectorUnificationError):
            unify(".a::before:hover", ".b::before")

    def test_hex_escape_with_closing_space(self):
        assert unify(r".\31 0", "a") == r"a.\31 0"

    @pytest.mark.parametrize("qualifier", ["", "   ", " , "])
    def test_empty_qualifier_raises(self, qualifier):
        with pytest.raises(SelectorUnificationError):
            unify(".a", qualifier)

    def test_same_id(self):
        assert unify("#main", "#main.x") == "#main.x"

    def test_ancestors_kept(self):
        assert unify(".nav .item", ".active") == ".nav .item.active"

    def test_selector_lists(self):
        assert unify(".a, .b", "p, .c") == "p.a, .a.c, p.b, .b.c"

    def test_raw_falls_back_to_concatenation(self):
        assert unify(".a", "&x") == ".a&x"

    @pytest.mark.parametrize(
        "base, qualifier",
        [
            ("a", "button"),
            ("#one", "#two"),
            (".a::before", "::after"),
        ],
    )
    def test_conflicts(self, base, qualifier):
        with pytest.raises(SelectorUnificationError) as exc_info:
            unify(base, qualifier)
        assert exc_info.value.base == base
        assert exc_info.value.qualifier == qualifier


class TestUnifyCompound:
    def test_empty_side(self):
        compound = parse_compound(".a")
        assert unify_compound(CompoundSelector(), compound) == compound
        assert unify_compound(compound, CompoundSelector()) == compound

    def test_result_is_structured(self):
        result = unify_compound(parse_compound(".large"), parse_compound("button"))
        assert result.type_selector == SimpleSelector(kind="type", value="button")
        assert str(result) == "button.large"
