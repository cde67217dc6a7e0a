"""User accounts stored in SQLite with encrypted passwords."""

from __future__ import annotations

import sqlite3
import sys
from contextlib import closing
from pathlib import Path
from typing import Optional, Sequence

from .crypt import KeyIV, encrypt, generate_key_pair

KEY_FILE = "prv.key"
IV_FILE = "prv.iv"
MAX_ROWS = 128

_CREATE_TABLE = (
    "CREATE TABLE clients (id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "name VARCHAR(64) NOT NULL, passwd VARCHAR(128) NOT NULL, lastlogin DATE);"
)


class MissingKeyError(Exception):
    """The database exists but its key files do not."""


class DuplicateUserError(Exception):
    """A user with that name is already registered."""


def _default_base_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


class DBManager:
    """Stores clients in ``<base>/db/<name>`` with keys in ``<base>``."""

    def __init__(self, db_name: str, base_dir: Optional[Path] = None):
        self.key_folder = Path(base_dir) if base_dir is not None else _default_base_dir()
        self.db_path = self.key_folder / "db" / db_name
        key_path = self.key_folder / KEY_FILE
        iv_path = self.key_folder / IV_FILE
        keys_present = key_path.exists() and iv_path.exists()

        if not self.db_path.exists():
            self._first_setup()
            if keys_present:
                self.prvkey = self._load_keys()
            else:
                self.prvkey = self._first_key_setup()
        elif not keys_present:
            raise MissingKeyError("key file missing with existing database")
        else:
            self.prvkey = self._load_keys()

    def _load_keys(self) -> KeyIV:
        return KeyIV(
            key=(self.key_folder / KEY_FILE).read_bytes(),
            iv=(self.key_folder / IV_FILE).read_bytes(),
        )

    def _first_key_setup(self) -> KeyIV:
        kv = generate_key_pair()
        (self.key_folder / KEY_FILE).write_bytes(kv.key)
        (self.key_folder / IV_FILE).write_bytes(kv.iv)
        return kv

    def _first_setup(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._request(_CREATE_TABLE)

    def _request(self, query: str, params: Sequence[object] = ()) -> list[tuple]:
        with closing(sqlite3.connect(self.db_path)) as conn, conn:
            return conn.execute(query, params).fetchmany(MAX_ROWS)

    def _hash(self, passwd: str) -> str:
        return encrypt(passwd.encode("utf-8"), self.prvkey).hex()

    def _user_exists(self, rows: list[tuple]) -> bool:
        if len(rows) > 1:
            print("found more than one users?!", file=sys.stderr)
            return False
        return len(rows) == 1

    def login(self, username: str, passwd: str) -> bool:
        """Return True if the name and password match exactly one client."""
        rows = self._request(
            "SELECT * FROM clients WHERE clients.name == ? AND clients.passwd == ?;",
            (username, self._hash(passwd)),
        )
        return self._user_exists(rows)

    def register_user(self, username: str, passwd: str) -> None:
        """Add a client; raise DuplicateUserError if the name is taken."""
        encrypted = self._hash(passwd)
        rows = self._request("SELECT * FROM clients WHERE clients.name == ?;", (username,))
        if rows:
            raise DuplicateUserError(username)
        self._request(
            "INSERT INTO clients (name, passwd) VALUES(?, ?);", (username, encrypted)
        )