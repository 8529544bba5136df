#!/usr/bin/env python3
"""
Curses-based editor for a single SQLite table whose columns are discovered
from the table's own schema.

License: MIT

Usage:
    python3 table_editor.py [-f path/to/database.db] [-t TABLE] [-l]
or
    table-editor [-f path/to/database.db] [-t TABLE] [-l]

Without -f, exactly one *.db file must exist in the current directory.

Controls:
  In record view:
    Up/Down    - navigate records (PgUp/PgDn/Home/End also work)
    a          - add a record
    e or Enter - edit selected record
    d          - delete selected record
    < / >      - sort by previous/next column
    r          - reverse sort direction
    q or ESC   - quit

  In the entry form:
    Tab/Enter/Down - next field
    Up/Shift-Tab   - previous field
    Backspace      - delete last character
    Ctrl-D         - finish editing (asks for confirmation)
    ESC            - cancel
"""
import argparse
import curses
import enum
import glob
import logging
import math
import os
import re
import sqlite3
import sys
from collections import namedtuple
from contextlib import closing
from dataclasses import dataclass

__version__ = "1.0.0"

log = logging.getLogger("table_editor")

LOG_ENV = "TABLE_EDITOR_LOG"
DB_PATTERN = "*.db"
LABEL_TABLE = "labels"
META_TABLE = "meta"
# columns narrower than this are cut rather than dropped
TEXT_MIN_WIDTH = 6
SEPARATOR = 2

COMMIT_KEY = "\x04"
ESCAPE_KEY = "\x1b"


class ConfigError(Exception):
    """Fatal problem with the data source or the screen; ends the program."""


class LayoutError(ConfigError):
    pass


class CoercionError(ValueError):
    """Text that does not convert losslessly; ``fallback`` is what gets stored."""

    def __init__(self, text, fallback):
        super().__init__(f"cannot convert {text!r}, using {fallback!r}")
        self.text = text
        self.fallback = fallback


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_REAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
# range of an SQLite INTEGER
INT_MIN, INT_MAX = -2 ** 63, 2 ** 63 - 1


def to_integer(text):
    try:
        value = int(text)
    except ValueError:
        value = None
    if value is not None and str(value) == text and INT_MIN <= value <= INT_MAX:
        return value
    m = _INT_PREFIX.match(text)
    fallback = int(m.group(1)) if m else 0
    raise CoercionError(text, min(max(fallback, INT_MIN), INT_MAX))


def to_real(text):
    try:
        value = float(text)
    except ValueError:
        m = _REAL_PREFIX.match(text)
        raise CoercionError(text, float(m.group(1)) if m else 0.0) from None
    if math.isnan(value):
        # SQLite would store NaN as NULL
        raise CoercionError(text, 0.0)
    return value


class FieldType(enum.Enum):
    TEXT = "Text"
    INTEGER = "Integer"
    REAL = "Real"

    @property
    def numeric(self):
        return self is not FieldType.TEXT

    def coerce(self, text):
        if self is FieldType.INTEGER:
            return to_integer(text)
        if self is FieldType.REAL:
            return to_real(text)
        return text


def classify_type(declared):
    """Map a declared SQLite column type onto Text, Integer or Real."""
    decl = (declared or "").upper()
    if "INT" in decl:
        return FieldType.INTEGER
    if any(s in decl for s in ("CHAR", "CLOB", "TEXT")):
        return FieldType.TEXT
    if any(s in decl for s in ("REAL", "FLOA", "DOUB")):
        return FieldType.REAL
    raise ConfigError(f"Unsupported column type: {declared!r}")


@dataclass
class Field:
    name: str
    description: str
    type: FieldType
    optional: bool = True
    value: str = ""
    longest: int = 0
    minwidth: int = 1
    maxwidth: int = 1
    width: int = 0

    def set_bounds(self, longest):
        self.longest = longest
        self.maxwidth = max(longest, len(self.description), 1)
        if self.type.numeric:
            # numbers are never cut, so they always get their full width
            self.minwidth = max(longest, 1)
        else:
            self.minwidth = min(TEXT_MIN_WIDTH, self.maxwidth)


Record = namedtuple("Record", "id values")


def quote(name):
    return '"' + name.replace('"', '""') + '"'


class RecordStore:
    """CRUD access to one table keyed by its integer primary key."""

    def __init__(self, path, table=None):
        self.path = path
        try:
            self.conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            raise ConfigError(f"Cannot open {path}: {e}") from e
        # allow non-UTF-8 text by replacing invalid bytes
        self.conn.text_factory = lambda b: b.decode("utf-8", "replace")
        self.conn.row_factory = sqlite3.Row
        try:
            self.tables = self._table_names()
            self.table = table or self._primary_table()
            if self.table not in self.tables:
                raise ConfigError(f"No table {self.table!r} in {path}")
            self.id_column = self._id_column()
        except sqlite3.DatabaseError as e:
            self.conn.close()
            raise ConfigError(f"Cannot read {path}: {e}") from e
        except ConfigError:
            self.conn.close()
            raise
        log.info("opened %s, table %s keyed by %s", path, self.table, self.id_column)

    def _table_names(self):
        cursor = self.conn.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        return [row["name"] for row in cursor]

    def _primary_table(self):
        candidates = [t for t in self.tables
                      if t not in (LABEL_TABLE, META_TABLE) and not t.startswith("sqlite_")]
        if not candidates:
            raise ConfigError(f"No data table found in {self.path}")
        if len(candidates) > 1:
            raise ConfigError(f"Several tables in {self.path}, pick one with -t: {', '.join(candidates)}")
        return candidates[0]

    def _id_column(self):
        info = self.conn.execute(f"PRAGMA table_info({quote(self.table)})").fetchall()
        keys = [ci for ci in info if ci["pk"]]
        if len(keys) != 1 or classify_or_none(keys[0]["type"]) is not FieldType.INTEGER:
            raise ConfigError(f"Table {self.table!r} needs a single INTEGER primary key column")
        return keys[0]["name"]

    def close(self):
        self.conn.close()

    def rollback(self):
        self.conn.rollback()

    def introspect_schema(self):
        info = self.conn.execute(f"PRAGMA table_info({quote(self.table)})")
        return [(ci["name"], ci["type"], not ci["notnull"]) for ci in info]

    def lookup_label(self, column):
        if LABEL_TABLE not in self.tables:
            return None
        row = self.conn.execute(
            f"SELECT description FROM {quote(LABEL_TABLE)} WHERE name = ?", (column,)
        ).fetchone()
        return row[0] if row else None

    def display_name(self):
        if META_TABLE in self.tables:
            row = self.conn.execute(f"SELECT name FROM {quote(META_TABLE)} LIMIT 1").fetchone()
            if row and row[0]:
                return str(row[0])
        return os.path.splitext(os.path.basename(self.path))[0]

    def max_rendered_length(self, column, ftype):
        col = quote(column)
        if ftype is FieldType.INTEGER:
            expr = f"LENGTH(CAST({col} AS INTEGER))"
        elif ftype is FieldType.REAL:
            expr = f"LENGTH(printf('%.2f', {col}))"
        else:
            expr = f"LENGTH({col})"
        sql = f"SELECT MAX({expr}) FROM {quote(self.table)} WHERE {col} IS NOT NULL"
        return self.conn.execute(sql).fetchone()[0] or 0

    def count(self):
        return self.conn.execute(f"SELECT COUNT(*) FROM {quote(self.table)}").fetchone()[0]

    def _select(self, columns):
        cols = ", ".join(quote(c) for c in [self.id_column] + list(columns))
        return f"SELECT {cols} FROM {quote(self.table)}"

    def query_all_sorted(self, columns, sort_column, descending=False):
        direction = "DESC" if descending else "ASC"
        sql = (f"{self._select(columns)} ORDER BY {quote(sort_column)} {direction}, "
               f"{quote(self.id_column)} {direction}")
        return [Record(row[0], tuple(row)[1:]) for row in self.conn.execute(sql)]

    def query_one(self, record_id, columns):
        sql = f"{self._select(columns)} WHERE {quote(self.id_column)} = ?"
        row = self.conn.execute(sql, (record_id,)).fetchone()
        return Record(row[0], tuple(row)[1:]) if row else None

    def insert(self, pairs):
        cols = ", ".join(quote(name) for name, _ in pairs)
        marks = ", ".join("?" for _ in pairs)
        cursor = self.conn.execute(
            f"INSERT INTO {quote(self.table)} ({cols}) VALUES ({marks})",
            [value for _, value in pairs],
        )
        self.conn.commit()
        log.info("inserted record %s into %s", cursor.lastrowid, self.table)
        return cursor.lastrowid

    def update(self, record_id, pairs):
        set_clause = ", ".join(f"{quote(name)}=?" for name, _ in pairs)
        self.conn.execute(
            f"UPDATE {quote(self.table)} SET {set_clause} WHERE {quote(self.id_column)}=?",
            [value for _, value in pairs] + [record_id],
        )
        self.conn.commit()
        log.info("updated record %s in %s", record_id, self.table)

    def delete(self, record_id):
        self.conn.execute(
            f"DELETE FROM {quote(self.table)} WHERE {quote(self.id_column)}=?", (record_id,)
        )
        self.conn.commit()
        log.info("deleted record %s from %s", record_id, self.table)


def classify_or_none(declared):
    try:
        return classify_type(declared)
    except ConfigError:
        return None


def introspect_fields(store):
    """Build the ordered Field list for every column except the identifier."""
    fields = []
    for name, declared, nullable in store.introspect_schema():
        if name == store.id_column:
            continue
        ftype = classify_type(declared)
        description = store.lookup_label(name) or name[:1].upper() + name[1:]
        fld = Field(name, description, ftype, optional=bool(nullable))
        fld.set_bounds(store.max_rendered_length(name, ftype))
        fields.append(fld)
    if not fields:
        raise ConfigError(f"Table {store.table!r} has no columns besides {store.id_column!r}")
    log.info("fields: %s", ", ".join(f"{f.name}:{f.type.value}" for f in fields))
    return fields


def storage_value(fld):
    if fld.value == "" and fld.optional:
        return None
    try:
        return fld.type.coerce(fld.value)
    except CoercionError as e:
        log.debug("%s: %s", fld.name, e)
        return e.fallback


def storage_values(fields):
    return [(f.name, storage_value(f)) for f in fields]


def edit_text(fld, value):
    if value is None:
        return ""
    if fld.type is FieldType.INTEGER and isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def layout_columns(fields, available_width):
    """Assign each field a render width, or 0 when it does not fit this pass.

    Every field starts at its minimum width. When that already overflows the
    screen, trailing fields are dropped until the rest fits. Otherwise the
    slack is handed out in passes, each field taking a share of the distance
    to its maximum width, until nothing grows or the line is full.
    """
    limit = available_width - 1
    total = 0
    for f in fields:
        f.width = f.minwidth
        total += f.width + SEPARATOR
    if not fields:
        return fields

    if total >= available_width:
        for f in reversed(fields[1:]):
            if total < limit:
                break
            total -= f.width + SEPARATOR
            f.width = 0
        if fields[0].width + SEPARATOR > available_width:
            raise LayoutError(f"Screen too narrow ({available_width} columns) to show {fields[0].description!r}")
        return fields

    count = len(fields)
    while total < limit:
        grown = 0
        for f in fields:
            if f.width >= f.maxwidth:
                continue
            inc = max((f.maxwidth - f.width) // count, 1)
            inc = min(inc, limit - total)
            f.width += inc
            total += inc
            grown += inc
            if total == limit:
                break
        if not grown:
            break
    return fields


def format_cell(fld, value):
    width = fld.width
    if value is None or value == "":
        return " " * width
    if fld.type.numeric:
        try:
            if fld.type is FieldType.INTEGER:
                cell = f"{int(value):>{width}d}"
            else:
                cell = f"{float(value):>{width}.2f}"
        except (TypeError, ValueError, OverflowError):
            cell = f"{str(value):>{width}}"
        # a number that no longer fits is hidden rather than cut
        return cell if len(cell) <= width else "#" * width
    text = str(value).replace("\n", " ")
    return text[:width].ljust(width)


def format_row(fields, values):
    cells = [format_cell(f, v) for f, v in zip(fields, values) if f.width]
    return (" " * SEPARATOR).join(cells)


def format_header(fields):
    cells = [f.description[:f.width].ljust(f.width) for f in fields if f.width]
    return (" " * SEPARATOR).join(cells)


@dataclass
class Session:
    store: RecordStore
    fields: list
    display_name: str = ""
    sort_index: int = 0
    descending: bool = False
    total: int = 0
    message: str = ""

    @property
    def columns(self):
        return [f.name for f in self.fields]

    @property
    def sort_field(self):
        return self.fields[self.sort_index]

    def query(self):
        self.total = self.store.count()
        return self.store.query_all_sorted(self.columns, self.sort_field.name, self.descending)


def open_session(store):
    return Session(store, introspect_fields(store), store.display_name())


def put(stdscr, y, x, text, attr=curses.A_NORMAL):
    """Write text clipped to the screen; drawing past the edge is ignored."""
    h, w = stdscr.getmaxyx()
    if y < 0 or y >= h or x >= w - 1:
        return
    try:
        stdscr.addstr(y, x, text[:w - 1 - x], attr)
    except curses.error:
        pass


def show_cursor(visible):
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        pass


TABLE_HELP = "Up/Down: Navigate  a: Add  e: Edit  d: Delete  </>: Sort column  r: Reverse  q: Quit"


def render_table(stdscr, session, rows, top=0, selected=0):
    """Draw header and the visible rows; return (rows drawn, selected record id or None)."""
    h, w = stdscr.getmaxyx()
    fields = session.fields
    layout_columns(fields, w)
    stdscr.erase()
    direction = "DESC" if session.descending else "ASC"
    title = (f"{session.display_name}: {session.total} records, "
             f"sorted by {session.sort_field.description} {direction}")
    put(stdscr, 0, 0, title)
    if session.message:
        put(stdscr, 0, len(title) + 2, session.message, curses.A_BOLD)

    x = 0
    for i, f in enumerate(fields):
        if not f.width:
            continue
        attr = curses.A_REVERSE if i == session.sort_index else curses.A_UNDERLINE
        put(stdscr, 1, x, f.description[:f.width].ljust(f.width), attr)
        x += f.width + SEPARATOR

    budget = max(h - 3, 0)
    drawn = 0
    selected_id = None
    for ridx in range(top, min(top + budget, len(rows))):
        record = rows[ridx]
        line = format_row(fields, record.values)
        attr = curses.A_NORMAL
        if ridx == selected:
            attr = curses.A_REVERSE
            selected_id = record.id
            line = line.ljust(w - 1)
        put(stdscr, 2 + drawn, 0, line, attr)
        drawn += 1

    put(stdscr, h - 1, 0, TABLE_HELP)
    stdscr.refresh()
    return drawn, selected_id


def key_name(key):
    try:
        return curses.keyname(key).decode("ascii", "replace")
    except (curses.error, ValueError):
        return str(key)


FORM_HELP = "Tab/Enter/Down: Next  Up: Previous  Ctrl-D: Save  ESC: Cancel"


class EntryForm:
    """Single-focus text entry over the fields, shared by add and edit."""

    def __init__(self, fields, title="Record"):
        self.fields = fields
        self.title = title
        self.focus = 0
        self.done = False
        self.cancelled = False
        self.warning = None
        self.warning_field = None
        self.message = ""

    @property
    def current(self):
        return self.fields[self.focus]

    @property
    def finished(self):
        return self.done or self.cancelled

    def validate(self):
        """Warn when an Integer field will not be stored exactly as typed."""
        fld = self.current
        if fld.type is FieldType.INTEGER and not (fld.value == "" and fld.optional):
            try:
                to_integer(fld.value)
            except CoercionError as e:
                self.warning = f"Using: {e.fallback}"
                self.warning_field = fld
                return False
        # a warning about another field stays until that field is fixed
        if self.warning_field is fld:
            self.warning = self.warning_field = None
        return True

    def move(self, step):
        self.validate()
        self.focus = (self.focus + step) % len(self.fields)

    def handle_key(self, key):
        self.message = ""
        if isinstance(key, int):
            if key in (curses.KEY_DOWN, curses.KEY_ENTER):
                self.move(1)
            elif key in (curses.KEY_UP, curses.KEY_BTAB):
                self.move(-1)
            elif key in (curses.KEY_BACKSPACE, curses.KEY_DC):
                self.current.value = self.current.value[:-1]
            elif key != curses.KEY_RESIZE:
                self.message = f"Ignored key: {key_name(key)}"
            return
        if key in ("\t", "\n", "\r"):
            self.move(1)
        elif key in ("\x7f", "\b"):
            self.current.value = self.current.value[:-1]
        elif key == COMMIT_KEY:
            self.validate()
            self.done = True
        elif key == ESCAPE_KEY:
            self.cancelled = True
        elif key.isprintable():
            self.current.value += key
        else:
            self.message = f"Ignored key: ^{chr((ord(key[:1]) + 64) % 128)}"

    def render(self, stdscr):
        h, w = stdscr.getmaxyx()
        stdscr.erase()
        put(stdscr, 0, 0, self.title, curses.A_BOLD)
        label_width = max(len(f.description) for f in self.fields)
        lines = max(h - 5, 1)
        top = max(0, self.focus - lines + 1)
        cursor = (2, 0)
        for n, f in enumerate(self.fields[top:top + lines]):
            y = 2 + n
            label = f"{f.description:>{label_width}}: "
            room = max(w - 1 - len(label), 1)
            text = f.value[-room:] if len(f.value) >= room else f.value
            attr = curses.A_BOLD if f is self.current else curses.A_NORMAL
            put(stdscr, y, 0, label, attr)
            put(stdscr, y, len(label), text)
            if f is self.current:
                cursor = (y, min(len(label) + len(text), w - 2))
        if self.warning:
            put(stdscr, h - 3, 0, f"{self.warning_field.description}: {self.warning}", curses.A_REVERSE)
        if self.message:
            put(stdscr, h - 2, 0, self.message)
        put(stdscr, h - 1, 0, FORM_HELP)
        try:
            stdscr.move(*cursor)
        except curses.error:
            pass
        stdscr.refresh()

    def run(self, stdscr):
        """Read keys until commit or cancel; True when the user finished editing."""
        show_cursor(True)
        try:
            while not self.finished:
                self.render(stdscr)
                self.handle_key(stdscr.get_wch())
            if self.done:
                # leave the final warning on screen under the confirmation prompt
                self.render(stdscr)
        finally:
            show_cursor(False)
        return self.done


def confirm(stdscr, message):
    h, w = stdscr.getmaxyx()
    put(stdscr, h - 2, 0, message)
    try:
        stdscr.clrtoeol()
    except curses.error:
        pass
    stdscr.refresh()
    key = stdscr.get_wch()
    return key in ("y", "Y")


WRITE_ERRORS = (sqlite3.DatabaseError, OverflowError)


def write_failed(session, error):
    session.store.rollback()
    log.error("write to %s failed: %s", session.store.table, error)
    session.message = f"Not saved: {error}"


def add_record(stdscr, session):
    for f in session.fields:
        f.value = ""
    form = EntryForm(session.fields, "Add record")
    if not form.run(stdscr) or not confirm(stdscr, "Save new record? (y/N)"):
        return None
    try:
        return session.store.insert(storage_values(session.fields))
    except WRITE_ERRORS as e:
        write_failed(session, e)
        return None


def edit_record(stdscr, session, record_id):
    record = session.store.query_one(record_id, session.columns)
    if record is None:
        return False
    for f, value in zip(session.fields, record.values):
        f.value = edit_text(f, value)
    form = EntryForm(session.fields, f"Edit record {record_id}")
    if not form.run(stdscr) or not confirm(stdscr, "Save changes? (y/N)"):
        return False
    try:
        session.store.update(record_id, storage_values(session.fields))
    except WRITE_ERRORS as e:
        write_failed(session, e)
        return False
    return True


def delete_record(stdscr, session, record_id):
    if not confirm(stdscr, f"Delete record {record_id}? (y/N)"):
        return False
    try:
        session.store.delete(record_id)
    except WRITE_ERRORS as e:
        write_failed(session, e)
        return False
    return True


def browse(stdscr, session):
    rows = None
    idx = top = 0
    while True:
        if rows is None:
            rows = session.query()
        h, w = stdscr.getmaxyx()
        visible = max(h - 3, 1)
        idx = max(min(idx, len(rows) - 1), 0)
        if idx < top:
            top = idx
        elif idx >= top + visible:
            top = idx - visible + 1
        _, record_id = render_table(stdscr, session, rows, top, idx)
        session.message = ""
        key = stdscr.get_wch()

        if key in (curses.KEY_DOWN, "j"):
            idx += 1
        elif key in (curses.KEY_UP, "k"):
            idx -= 1
        elif key == curses.KEY_NPAGE:
            idx += visible
        elif key == curses.KEY_PPAGE:
            idx -= visible
        elif key in (curses.KEY_HOME, "g"):
            idx = 0
        elif key in (curses.KEY_END, "G"):
            idx = len(rows) - 1
        elif key in ("q", ESCAPE_KEY):
            return
        elif key in (">", curses.KEY_RIGHT):
            session.sort_index = (session.sort_index + 1) % len(session.fields)
            rows = None
        elif key in ("<", curses.KEY_LEFT):
            session.sort_index = (session.sort_index - 1) % len(session.fields)
            rows = None
        elif key == "r":
            session.descending = not session.descending
            rows = None
        elif key == "a":
            if add_record(stdscr, session) is not None:
                session.message = "Record added"
            rows = None
        elif key in ("e", "\n", "\r", curses.KEY_ENTER) and record_id is not None:
            if edit_record(stdscr, session, record_id):
                session.message = "Record saved"
            rows = None
        elif key == "d" and record_id is not None:
            if delete_record(stdscr, session, record_id):
                session.message = "Record deleted"
            rows = None


def run(stdscr, session):
    show_cursor(False)
    stdscr.keypad(True)
    # reduce ESC key delay so ESC cancels promptly
    if hasattr(curses, "set_escdelay") and "ESCDELAY" not in os.environ:
        try:
            curses.set_escdelay(25)
        except curses.error:
            pass
    browse(stdscr, session)


def dump_table(session, out):
    fields = session.fields
    # wide enough for every column at its maximum width
    layout_columns(fields, sum(f.maxwidth + SEPARATOR for f in fields) + 1)
    out.write(format_header(fields).rstrip() + "\n")
    for record in session.query():
        out.write(format_row(fields, record.values).rstrip() + "\n")


def find_database(directory):
    matches = sorted(glob.glob(os.path.join(directory, DB_PATTERN)))
    if not matches:
        raise ConfigError(f"No {DB_PATTERN} file in {directory}; use -f FILE")
    if len(matches) > 1:
        names = ", ".join(os.path.basename(m) for m in matches)
        raise ConfigError(f"Several {DB_PATTERN} files in {directory} ({names}); use -f FILE")
    return matches[0]


def setup_logging(path=None):
    # the terminal belongs to curses, so log records only ever go to a file
    log.setLevel(logging.DEBUG)
    log.propagate = False
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    if path:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    else:
        handler = logging.NullHandler()
    log.addHandler(handler)
    return log


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="table-editor",
        description="Browse, add, edit and delete rows of an SQLite table.",
    )
    parser.add_argument("-f", "--file", help=f"database file (default: the only {DB_PATTERN} here)")
    parser.add_argument("-t", "--table", help="table to edit (default: the only data table)")
    parser.add_argument("-l", "--list", action="store_true", help="print the table as text and exit")
    parser.add_argument("--log", help=f"write a log file (default: ${LOG_ENV})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log or os.environ.get(LOG_ENV))
    try:
        path = args.file or find_database(os.getcwd())
        if not os.path.exists(path):
            raise ConfigError(f"Database file not found: {path}")
        with closing(RecordStore(path, args.table)) as store:
            session = open_session(store)
            if args.list:
                dump_table(session, sys.stdout)
            else:
                curses.wrapper(run, session)
    except ConfigError as e:
        log.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
