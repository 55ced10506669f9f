from ais_navlog.cleaning.repair import ReplaceNthDelimiter, default_rules, repair_lines
from ais_navlog.cleaning.tokenizer import tokenize_line


def test_replace_nth_delimiter_replaces_only_that_occurrence():
    rule = ReplaceNthDelimiter(overshoot=1, ordinal=3)

    assert rule.apply("a,b,c,d,e") == "a,b,c d,e"


def test_replace_nth_delimiter_leaves_short_line_untouched():
    rule = ReplaceNthDelimiter(overshoot=1, ordinal=5)

    assert rule.apply("a,b,c") == "a,b,c"


def test_repair_fixes_extra_delimiter_in_free_text(sentence):
    broken = sentence({14: "PORT,SMITH"})
    expected = sentence({14: "PORT SMITH"})

    lines, n_repaired = repair_lines([broken], default_rules(), field_count=22)

    assert lines == [expected]
    assert n_repaired == 1
    assert len(tokenize_line(lines[0])) == 22


def test_repair_leaves_well_formed_lines_alone(sentence):
    line = sentence()

    lines, n_repaired = repair_lines([line], default_rules(), field_count=22)

    assert lines == [line]
    assert n_repaired == 0


def test_repair_ignores_lines_without_matching_rule(sentence):
    """Two surplus delimiters have no rule and pass through unrepaired."""
    line = sentence({14: "A,B,C"})

    lines, n_repaired = repair_lines([line], default_rules(), field_count=22)

    assert lines == [line]
    assert n_repaired == 0


def test_repair_dispatches_on_overshoot():
    rules = [
        ReplaceNthDelimiter(overshoot=1, ordinal=1),
        ReplaceNthDelimiter(overshoot=2, ordinal=2, replacement="_"),
    ]

    lines, n_repaired = repair_lines(["a,b,c", "a,b,c,d", "a,b"], rules, field_count=2)

    assert lines == ["a b,c", "a,b_c,d", "a,b"]
    assert n_repaired == 2
