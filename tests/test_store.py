"""Tests for the SQLite record store."""
import pytest

from table_editor import ConfigError, FieldType, RecordStore

COLUMNS = ["title", "pages", "price"]


def test_opens_the_only_data_table(store):
    assert store.table == "books"
    assert store.id_column == "id"
    assert store.count() == 3


def test_introspect_schema(store):
    assert store.introspect_schema() == [
        ("id", "INTEGER", True),
        ("title", "TEXT", False),
        ("pages", "INTEGER", True),
        ("price", "REAL", True),
    ]


def test_max_rendered_length(store):
    assert store.max_rendered_length("title", FieldType.TEXT) == 4
    assert store.max_rendered_length("pages", FieldType.INTEGER) == 4
    assert store.max_rendered_length("price", FieldType.REAL) == 5


def test_max_rendered_length_of_empty_table(make_db):
    store = RecordStore(make_db("CREATE TABLE t (id INTEGER PRIMARY KEY, n REAL);", "empty.db"))
    try:
        assert store.max_rendered_length("n", FieldType.REAL) == 0
    finally:
        store.close()


def test_query_all_sorted(store):
    ascending = store.query_all_sorted(COLUMNS, "pages")
    assert [r.values[0] for r in ascending] == ["Dune", "Emma", "It"]
    descending = store.query_all_sorted(COLUMNS, "price", descending=True)
    assert [r.values[0] for r in descending] == ["Emma", "Dune", "It"]
    assert descending[0].values == ("Emma", 1040, 12.5)


def test_query_one(store):
    first = store.query_all_sorted(COLUMNS, "title")[0]
    assert store.query_one(first.id, COLUMNS) == first
    assert store.query_one(9999, COLUMNS) is None


def test_insert_update_delete(store):
    new_id = store.insert([("title", "Ubik"), ("pages", 202), ("price", None)])
    assert store.count() == 4
    assert store.query_one(new_id, COLUMNS).values == ("Ubik", 202, None)

    store.update(new_id, [("title", "Ubik"), ("pages", 224), ("price", 7.0)])
    assert store.query_one(new_id, COLUMNS).values == ("Ubik", 224, 7.0)

    store.delete(new_id)
    assert store.count() == 3
    assert new_id not in [r.id for r in store.query_all_sorted(COLUMNS, "title")]


def test_labels_and_display_name(make_db):
    path = make_db("""
        CREATE TABLE wines (id INTEGER PRIMARY KEY, vintage INTEGER);
        CREATE TABLE labels (name TEXT PRIMARY KEY, description TEXT);
        CREATE TABLE meta (name TEXT);
        INSERT INTO labels VALUES ('vintage', 'Year');
        INSERT INTO meta VALUES ('Cellar');
    """, "cellar.db")
    store = RecordStore(path)
    try:
        assert store.table == "wines"
        assert store.lookup_label("vintage") == "Year"
        assert store.lookup_label("other") is None
        assert store.display_name() == "Cellar"
    finally:
        store.close()


def test_display_name_defaults_to_file_name(store):
    assert store.lookup_label("title") is None
    assert store.display_name() == "books"


def test_several_tables_need_a_choice(make_db):
    path = make_db("""
        CREATE TABLE a (id INTEGER PRIMARY KEY, x TEXT);
        CREATE TABLE b (id INTEGER PRIMARY KEY, y TEXT);
    """, "two.db")
    with pytest.raises(ConfigError, match="Several tables"):
        RecordStore(path)
    store = RecordStore(path, "b")
    try:
        assert store.table == "b"
    finally:
        store.close()


@pytest.mark.parametrize("script, message", [
    ("CREATE TABLE labels (name TEXT, description TEXT);", "No data table"),
    ("CREATE TABLE t (code TEXT PRIMARY KEY, x TEXT);", "INTEGER primary key"),
    ("CREATE TABLE t (x TEXT);", "INTEGER primary key"),
    ("CREATE TABLE t (a INTEGER, b INTEGER, PRIMARY KEY (a, b));", "INTEGER primary key"),
])
def test_unusable_databases(make_db, script, message):
    with pytest.raises(ConfigError, match=message):
        RecordStore(make_db(script, "bad.db"))


def test_missing_table(make_db):
    with pytest.raises(ConfigError, match="No table"):
        RecordStore(make_db(), "nothing")


def test_not_a_database(tmp_path):
    path = tmp_path / "junk.db"
    path.write_text("this is not sqlite " * 100)
    with pytest.raises(ConfigError, match="Cannot read"):
        RecordStore(str(path))


def test_quoted_names(make_db):
    store = RecordStore(make_db('CREATE TABLE "my table" ("row id" INTEGER PRIMARY KEY, "a""b" TEXT);', "q.db"))
    try:
        new_id = store.insert([('a"b', "quoted")])
        assert store.query_one(new_id, ['a"b']).values == ("quoted",)
    finally:
        store.close()
