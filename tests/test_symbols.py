"""
Tests for the operator symbol table.
"""

import pytest

from between import (
    UnknownSymbolError,
    between,
    between_flipped,
    between_param_both,
    between_param_left_fmap_left,
    by_symbol,
    compose,
    fixity_of,
)
from between.symbols import SYMBOLS, Fixity, lookup


class TestLookup:
    def test_core_operators(self):
        assert by_symbol("~@~") is between
        assert by_symbol("~@@~") is between_flipped
        assert by_symbol("^@^") is between_param_both
        assert by_symbol("<^@~") is between_param_left_fmap_left
        assert by_symbol(".") is compose

    def test_every_combinator_has_one_spelling(self):
        # compose + 6 core/parametrised + 14 lifted
        assert len(SYMBOLS) == 21
        assert len({s.function for s in SYMBOLS.values()}) == 21

    def test_lifted_family_has_fourteen_members(self):
        lifted = [op for op in SYMBOLS if "<" in op or ">" in op]
        assert len(lifted) == 14

    def test_flipped_spellings_name_flipped_functions(self):
        for spelling, symbol in SYMBOLS.items():
            assert ("@@" in spelling) == symbol.name.endswith("_flipped"), spelling

    def test_symbol_name(self):
        assert lookup("<~@~>").name == "between_fmap_both"

    def test_unknown_spelling(self):
        with pytest.raises(UnknownSymbolError) as exc_info:
            by_symbol("~@?")
        assert exc_info.value.symbol == "~@?"
        assert isinstance(exc_info.value, KeyError)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SYMBOLS["~@~"] = SYMBOLS["^@^"]  # type: ignore[index]


class TestFixity:
    def test_core_pair_associates_opposite_ways(self):
        assert fixity_of("~@~") == Fixity("left", 8)
        assert fixity_of("~@@~") == Fixity("right", 8)

    def test_composition_binds_tighter_than_everything(self):
        compose_precedence = fixity_of(".").precedence
        assert all(
            s.fixity.precedence < compose_precedence for op, s in SYMBOLS.items() if op != "."
        )

    def test_param_both_is_non_associative(self):
        assert fixity_of("^@^").associativity == "none"
        assert fixity_of("<^@@^").associativity == "none"

    def test_precedence_range_is_validated(self):
        with pytest.raises(ValueError, match="precedence"):
            Fixity("left", 10)
