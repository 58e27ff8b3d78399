# tests/test_classifier.py

from __future__ import annotations

from gedcom_reader.loader import RawRecord
from gedcom_reader.records import Family, GeneralRecord, RecordBins, classify, classify_all


def test_each_prefix_lands_in_its_bin() -> None:
    """Routing is on the first xref character; unknown prefixes go to others."""
    bins = classify_all(
        [
            RawRecord("HEAD", "1 GEDC\n"),
            RawRecord("F1", "FAM\n"),
            RawRecord("I1", "INDI\n1 NAME A /B/\n"),
            RawRecord("S1", "SOUR\n"),
            RawRecord("N1", "SNOTE x\n"),
            RawRecord("R1", "REPO\n"),
        ]
    )

    assert [f.xref for f in bins.families] == ["F1"]
    assert [i.xref for i in bins.individuals] == ["I1"]
    assert [s.xref for s in bins.sources] == ["S1"]
    assert [o.xref for o in bins.others] == ["HEAD", "N1", "R1"]


def test_family_starts_unresolved() -> None:
    """Classification alone leaves spouse surnames as placeholders."""
    bins = RecordBins()
    classify(RawRecord("F1", "FAM\n1 HUSB @I1@\n"), bins)
    assert bins.families == [Family(xref="F1", body="FAM\n1 HUSB @I1@\n")]
    assert bins.families[0].husband_surname == "?"


def test_individual_fills_surname_index() -> None:
    """Only recognized NAME shapes enter the surname index."""
    bins = classify_all(
        [
            RawRecord("I1", "INDI\n1 NAME John /Smith/\n"),
            RawRecord("I2", "INDI\n1 NAME Madonna\n"),
            RawRecord("I3", "INDI\n1 SEX F\n"),
            RawRecord("I4", "INDI\n1 NAME a/b/c/d\n"),
        ]
    )

    assert bins.surnames == {"I1": "Smith", "I2": "?"}
    assert [i.display_name for i in bins.individuals] == ["Smith John ", "? Madonna", "?", "?"]


def test_duplicates_are_appended_not_merged() -> None:
    """Repeated xrefs are kept as separate records."""
    bins = classify_all([RawRecord("S1", "SOUR a\n"), RawRecord("S1", "SOUR b\n")])
    assert bins.sources == [GeneralRecord("S1", "SOUR a\n"), GeneralRecord("S1", "SOUR b\n")]


def test_lowercase_prefix_is_other() -> None:
    """Prefix matching is case-sensitive."""
    bins = classify_all([RawRecord("i1", "INDI\n1 NAME A /B/\n")])
    assert not bins.individuals
    assert bins.others[0].xref == "i1"
