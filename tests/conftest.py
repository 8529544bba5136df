"""Shared fixtures: throwaway SQLite files and a stand-in for the curses window."""
import sqlite3

import pytest

from table_editor import RecordStore, open_session

BOOKS = """
CREATE TABLE books (id INTEGER PRIMARY KEY, title TEXT NOT NULL, pages INTEGER, price REAL);
INSERT INTO books (title, pages, price) VALUES ('Dune', 412, 9.99);
INSERT INTO books (title, pages, price) VALUES ('Emma', 1040, 12.5);
INSERT INTO books (title, pages, price) VALUES ('It', 1138, NULL);
"""


class FakeScreen:
    """Records what gets drawn and replays a fixed list of key events."""

    def __init__(self, keys=(), rows=24, cols=80):
        self.keys = list(keys)
        self.rows = rows
        self.cols = cols
        self.cursor = (0, 0)
        self.erase()

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.lines = [""] * self.rows
        self.writes = []

    clear = erase

    def addstr(self, y, x, text, attr=0):
        line = self.lines[y].ljust(x)
        self.lines[y] = line[:x] + text + line[x + len(text):]
        self.writes.append((y, x, text, attr))

    def move(self, y, x):
        self.cursor = (y, x)

    def clrtoeol(self):
        pass

    def refresh(self):
        pass

    def keypad(self, flag):
        pass

    def get_wch(self):
        if not self.keys:
            raise AssertionError("screen ran out of keys")
        return self.keys.pop(0)

    def attr_at(self, y):
        return [attr for (wy, _, _, attr) in self.writes if wy == y]


@pytest.fixture
def make_db(tmp_path):
    def make(script=BOOKS, name="books.db"):
        path = tmp_path / name
        conn = sqlite3.connect(path)
        conn.executescript(script)
        conn.commit()
        conn.close()
        return str(path)
    return make


@pytest.fixture
def store(make_db):
    s = RecordStore(make_db())
    yield s
    s.close()


@pytest.fixture
def session(store):
    return open_session(store)


@pytest.fixture
def fake_screen():
    return FakeScreen
