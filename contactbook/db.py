import logging
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from contactbook.errors import StoreError

logger = logging.getLogger(__name__)


# =============================================================
# Schema
#   Column names are the camelCase ones the table has always
#   used, so an existing contacts.db keeps working.
# =============================================================
SCHEMA = """
CREATE TABLE IF NOT EXISTS contacts (
    id TEXT PRIMARY KEY,
    firstName TEXT,
    lastName TEXT,
    emailAddress TEXT,
    notes TEXT,
    createdAt TEXT,
    updatedAt TEXT
)
"""


@dataclass
class Contact:
    id: str
    first_name: str
    last_name: str
    email_address: str
    notes: str
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Contact":
        return cls(
            id=row["id"],
            first_name=row["firstName"] or "",
            last_name=row["lastName"] or "",
            email_address=row["emailAddress"] or "",
            notes=row["notes"] or "",
            created_at=row["createdAt"],
            updated_at=row["updatedAt"],
        )

    def form_values(self) -> dict:
        """Field values keyed by their form names, for pre-filling the edit form."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "emailAddress": self.email_address,
            "notes": self.notes,
        }


class ContactStore:
    """
    The record store: one contacts table behind one shared connection.

      • The connection is opened lazily on first use and the schema is
        created then (CREATE TABLE IF NOT EXISTS, so it's idempotent).
      • Every statement uses '?' placeholders with a separate args tuple.
      • Every write is committed before the method returns.
      • sqlite3 and filesystem errors, including a failed first
        connect, are logged and re-raised as StoreError.
    """

    def __init__(self, path):
        self.path = str(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            if self.path != ":memory:":
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            try:
                conn.execute(SCHEMA)
                conn.commit()
            except sqlite3.Error:
                conn.close()
                raise
            self._conn = conn
            logger.info("Connected to the SQLite database at %s", self.path)
        return self._conn

    def _query(self, query: str, args=(), one: bool = False):
        with self._lock:
            try:
                rows = self._connection().execute(query, args).fetchall()
            except (sqlite3.Error, OSError) as exc:
                logger.exception("Error querying database")
                raise StoreError(str(exc)) from exc

        if one:
            return rows[0] if rows else None
        return rows

    def _execute(self, query: str, args=()) -> int:
        """Run one INSERT/UPDATE/DELETE, commit, and return the affected row count."""
        with self._lock:
            conn = None
            try:
                conn = self._connection()
                cur = conn.execute(query, args)
                conn.commit()
            except (sqlite3.Error, OSError) as exc:
                if conn is not None:
                    conn.rollback()
                logger.exception("Error writing to database")
                raise StoreError(str(exc)) from exc
            return cur.rowcount

    def get_all(self) -> List[Contact]:
        return [Contact.from_row(row) for row in self._query("SELECT * FROM contacts")]

    def get_by_id(self, contact_id: str) -> Optional[Contact]:
        row = self._query("SELECT * FROM contacts WHERE id = ?", (contact_id,), one=True)
        return Contact.from_row(row) if row is not None else None

    def insert(self, contact: Contact) -> Contact:
        # A duplicate id violates the primary key and surfaces as StoreError.
        self._execute(
            """
            INSERT INTO contacts
              (id, firstName, lastName, emailAddress, notes, createdAt, updatedAt)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                contact.id,
                contact.first_name,
                contact.last_name,
                contact.email_address,
                contact.notes,
                contact.created_at,
                contact.updated_at,
            ),
        )
        return contact

    def update(self, contact: Contact) -> bool:
        """Overwrite the mutable fields of an existing row. createdAt is never touched."""
        changed = self._execute(
            """
            UPDATE contacts
            SET firstName = ?, lastName = ?, emailAddress = ?, notes = ?, updatedAt = ?
            WHERE id = ?
            """,
            (
                contact.first_name,
                contact.last_name,
                contact.email_address,
                contact.notes,
                contact.updated_at,
                contact.id,
            ),
        )
        return changed > 0

    def delete(self, contact_id: str) -> bool:
        return self._execute("DELETE FROM contacts WHERE id = ?", (contact_id,)) > 0

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Closed the SQLite database at %s", self.path)
