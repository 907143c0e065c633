"""Tests for the structured accessors."""

from __future__ import annotations

import pytest

from cexparser.parsing.accessors import (
    RelationSetRecord,
    bodies,
    concatenated_table,
    labels,
    relation_sets,
    unique_column_values,
)
from cexparser.parsing.diagnostics import Diagnostic
from cexparser.parsing.splitter import parse_cex
from cexparser.parsing.store import BlockStore


def test_bodies_and_labels(sample_cex: str) -> None:
    store = parse_cex(sample_cex)
    assert labels(store)[0] == "cexversion"
    assert bodies(store, "cexversion") == ("3.0",)
    assert bodies(store, "nope") == ()


def test_two_note_blocks() -> None:
    store = parse_cex("#!notes\nfirst\n#!notes\nsecond\n")
    assert bodies(store, "notes") == ("first", "second")


# concatenated_table

MULTI_TABLE = """\
#!ctsdata
urn|text
u1|one
u2|two
#!ctsdata
urn|text
u3|three
#!ctsdata
   // indented comment, dropped by the splitter
urn|text
"""


def test_concatenated_table_one_header() -> None:
    store = parse_cex(MULTI_TABLE)
    result = concatenated_table(store, "ctsdata")
    lines = result.split("\n")
    assert lines == ["urn|text", "u1|one", "u2|two", "u3|three"]
    assert lines.count("urn|text") == 1


def test_concatenated_table_row_count_matches_bodies() -> None:
    store = parse_cex(MULTI_TABLE)
    data_rows = sum(len(body.split("\n")) - 1 for body in bodies(store, "ctsdata"))
    assert len(concatenated_table(store, "ctsdata").split("\n")) == 1 + data_rows


def test_concatenated_table_without_header() -> None:
    store = parse_cex(MULTI_TABLE)
    assert concatenated_table(store, "ctsdata", include_header=False) == "u1|one\nu2|two\nu3|three"


def test_concatenated_table_trims_lines() -> None:
    store = parse_cex("#!t\n  a|b  \n  1|2\n")
    assert concatenated_table(store, "t") == "a|b\n1|2"


def test_concatenated_table_absent_label() -> None:
    assert concatenated_table(parse_cex("#!a\nx\n"), "missing") == ""


def test_concatenated_table_skips_bodies_without_content_lines() -> None:
    # store built directly: the splitter itself never keeps such a body
    store = BlockStore({"t": ["// comment\n   ", "h1|h2\nv1|v2"]})
    assert concatenated_table(store, "t") == "h1|h2\nv1|v2"


# unique_column_values

def test_values_filtered_by_key() -> None:
    store = parse_cex("#!datamodels\nModel|Collection\nA|X\nB|Y\nA|Z\n")
    result = unique_column_values(store, "Collection", key_column="Model", key_value="A")
    assert result == ("X", "Z")


def test_unique_values_sorted_without_duplicates(sample_cex: str) -> None:
    store = parse_cex(sample_cex)
    result = unique_column_values(store, "Model")
    assert result == (
        "urn:cite2:cite:datamodels.v1:imagemodel",
        "urn:cite2:cite:datamodels.v1:tbsmodel",
    )
    assert list(result) == sorted(set(result))


def test_values_across_several_bodies() -> None:
    text = (
        "#!datamodels\nModel|Collection\nM1|C3\n"
        "#!datamodels\nCollection|Model\nC1|M1\nC2|M2\n"
    )
    store = parse_cex(text)
    assert unique_column_values(store, "Collection", key_column="Model", key_value="M1") == ("C1", "C3")


def test_values_are_trimmed() -> None:
    store = parse_cex("#!datamodels\n Model | Collection \n A | X \n")
    assert unique_column_values(store, "Collection") == ("X",)


def test_column_names_are_case_sensitive() -> None:
    store = parse_cex("#!datamodels\nmodel|collection\nA|X\n")
    diagnostics: list[Diagnostic] = []
    assert unique_column_values(store, "Collection", diagnostics=diagnostics) == ()
    assert len(diagnostics) == 1
    assert diagnostics[0].label == "datamodels"
    assert "Collection" in diagnostics[0].message


def test_missing_key_column_skips_body() -> None:
    store = parse_cex("#!datamodels\nCollection\nX\n#!datamodels\nModel|Collection\nA|Y\n")
    diagnostics: list[Diagnostic] = []
    result = unique_column_values(
        store, "Collection", key_column="Model", key_value="A", diagnostics=diagnostics
    )
    assert result == ("Y",)
    assert [d.index for d in diagnostics] == [0]


def test_short_rows_are_skipped() -> None:
    store = parse_cex("#!datamodels\nModel|Collection\nA\nB|Y\n")
    assert unique_column_values(store, "Collection", key_column="Model", key_value="A") == ()
    assert unique_column_values(store, "Collection") == ("Y",)


def test_values_on_other_label() -> None:
    store = parse_cex("#!catalog\nurn|label\nu1|One\nu2|Two\n")
    assert unique_column_values(store, "label", label="catalog") == ("One", "Two")


def test_values_absent_label() -> None:
    assert unique_column_values(parse_cex(""), "Model") == ()


@pytest.mark.parametrize(
    "key_args",
    [{"key_column": "Model"}, {"key_value": "A"}],
)
def test_half_given_key_filter_is_rejected(key_args: dict[str, str]) -> None:
    store = parse_cex("#!datamodels\nModel|Collection\nA|X\n")
    with pytest.raises(ValueError, match="must be given together"):
        unique_column_values(store, "Collection", **key_args)


def test_missing_column_is_logged(log_messages: list[str]) -> None:
    store = parse_cex("#!datamodels\nA|B\n1|2\n")
    unique_column_values(store, "Model")
    assert any("column 'Model' not in header" in m for m in log_messages)


# relation_sets

def test_relation_set_with_header() -> None:
    store = parse_cex("#!citerelationset\nurn|urn:test:1\nlabel|My Relation\nSource|Target\nA|B\n")
    assert relation_sets(store, include_header=True) == [
        RelationSetRecord(urn="urn:test:1", label="My Relation", data="Source|Target\nA|B")
    ]


def test_relation_set_without_header() -> None:
    store = parse_cex("#!citerelationset\nurn|urn:test:1\nlabel|R\nSource|Target\nA|B\nC|D\n")
    [record] = relation_sets(store, include_header=False)
    assert record.data == "A|B\nC|D"


def test_relation_set_header_only() -> None:
    store = parse_cex("#!citerelationset\nurn|urn:test:1\nlabel|R\nSource|Target\n")
    assert relation_sets(store)[0].data == "Source|Target"
    assert relation_sets(store, include_header=False)[0].data == ""


def test_relation_set_prefixes_are_case_insensitive() -> None:
    store = parse_cex("#!citerelationset\nURN| urn:test:2 \nLabel|  Upper  \nh\n")
    [record] = relation_sets(store)
    assert record.urn == "urn:test:2"
    assert record.label == "Upper"


def test_short_relation_set_is_skipped() -> None:
    store = parse_cex("#!citerelationset\nurn|urn:test:1\nlabel|Too short\n")
    diagnostics: list[Diagnostic] = []
    assert relation_sets(store, diagnostics=diagnostics) == []
    assert "not enough lines" in diagnostics[0].message


def test_malformed_relation_sets_do_not_stop_the_rest() -> None:
    text = (
        "#!citerelationset\nname|urn:bad:1\nlabel|Bad urn\nh\n"
        "#!citerelationset\nurn|urn:bad:2\ntitle|Bad label\nh\n"
        "#!citerelationset\nurn|urn:good:3\nlabel|Good\nh\nrow\n"
    )
    diagnostics: list[Diagnostic] = []
    records = relation_sets(parse_cex(text), diagnostics=diagnostics)
    assert [r.urn for r in records] == ["urn:good:3"]
    assert [d.index for d in diagnostics] == [0, 1]


def test_relation_set_sample(sample_cex: str) -> None:
    [record] = relation_sets(parse_cex(sample_cex))
    assert record.urn == "urn:cite2:sample:dse.v1:"
    assert record.label == "Diplomatic edition"
    assert record.data.split("\n")[0] == "passage|imageroi|surface"
    assert len(record.data.split("\n")) == 3
    assert record.to_dict()["label"] == "Diplomatic edition"
