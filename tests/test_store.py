"""
Unit tests for DataStore, the generic-data collection of an owning entity.

This suite covers:
- Attaching records with and without renaming
- Lookup by kind (enum or alias), by name, and first-match access
- Typed access replacing downcasts
- Detaching by identity and clearing
"""

import pytest

from gendata.core import DataStore
from gendata.exceptions import UnknownDataKindError
from gendata.schema import CommentData, DataKind, PairData, UnitCellData


@pytest.fixture
def store():
    return DataStore(
        [
            CommentData("first comment"),
            PairData("Jane Doe", name="Author"),
            PairData("2024", name="Year"),
            UnitCellData(),
        ]
    )


def test_len_and_iteration_order(store):
    assert len(store) == 4
    assert [record.kind for record in store] == [
        DataKind.COMMENT,
        DataKind.PAIR,
        DataKind.PAIR,
        DataKind.UNIT_CELL,
    ]


def test_attach_with_name():
    store = DataStore()
    record = store.attach(CommentData("hello"), name="Remark")
    assert record.get_name() == "Remark"
    assert store.get_by_name("Remark") == [record]


def test_attach_rejects_non_records():
    with pytest.raises(TypeError):
        DataStore().attach("not a record")


def test_get_by_kind(store):
    pairs = store.get_by_kind(DataKind.PAIR)
    assert [p.get_value() for p in pairs] == ["Jane Doe", "2024"]
    assert store.get_by_kind(DataKind.TORSION) == []


def test_get_by_kind_alias(store):
    """Kind aliases resolve to the same records as the enum member."""
    assert store.get_by_kind("UnitCell") == store.get_by_kind(DataKind.UNIT_CELL)
    assert len(store.get_by_kind("pair")) == 2


def test_get_by_kind_unknown(store):
    with pytest.raises(UnknownDataKindError):
        store.get_by_kind("qqqqqqqqqq")


def test_get_first_match(store):
    """Names are matched before kinds."""
    assert store.get("Year").get_value() == "2024"
    assert store.get(DataKind.PAIR).get_name() == "Author"
    assert isinstance(store.get("unit_cell"), UnitCellData)
    assert store.get("Publisher") is None
    assert store.get(DataKind.ANGLE) is None


def test_has_data(store):
    assert store.has_data("Author")
    assert store.has_data(DataKind.COMMENT)
    assert not store.has_data(DataKind.RING)
    assert not store.has_data("Editor")


def test_get_typed(store):
    cells = store.get_typed(DataKind.UNIT_CELL)
    assert len(cells) == 1
    assert isinstance(cells[0], UnitCellData)


def test_get_typed_without_registered_type(store):
    with pytest.raises(UnknownDataKindError):
        store.get_typed(DataKind.SPIN)


def test_detach_by_identity(store):
    """Only the attached object itself is removed."""
    author = store.get("Author")
    assert not store.detach(PairData("Jane Doe", name="Author"))
    assert store.detach(author)
    assert author not in store
    assert len(store) == 3
    assert not store.detach(author)


def test_clear(store):
    store.clear()
    assert len(store) == 0
    assert store.all() == []


def test_names_natural_order():
    store = DataStore(
        [PairData("b", name="Step10"), PairData("a", name="Step2"), CommentData("c"), PairData("d", name="Step2")]
    )
    assert store.names() == ["Comment", "Step2", "Step10"]


def test_attach_logs_when_verbose(caplog):
    store = DataStore(verbose=True)
    with caplog.at_level("DEBUG"):
        store.attach(CommentData("x"))
    assert "Attached COMMENT record 'Comment'" in caplog.text
