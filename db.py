import sqlite3
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional


class StoreError(Exception):
    """Base class for store failures. ``str(exc)`` is safe to show to callers."""


class ValidationError(StoreError):
    pass


class DuplicateTermError(StoreError):
    pass


class EntryNotFoundError(StoreError):
    pass


def sqlite_path_from_url(url: str) -> Path:
    """Turn ``sqlite:///relative.db`` / ``sqlite:////abs/path.db`` into a Path."""
    scheme, sep, rest = url.partition("://")
    if not sep or scheme.lower() != "sqlite":
        raise RuntimeError(f"Unsupported database URL {scheme or url!r}: only sqlite:/// is supported")
    # sqlite:///foo.db -> "/foo.db" after the scheme; drop exactly one slash
    path = rest[1:] if rest.startswith("/") else rest
    if not path:
        raise RuntimeError("Database URL has no file path")
    return Path(path).expanduser()


def _parse_id(entry_id) -> Optional[int]:
    try:
        row_id = int(entry_id)
    except (TypeError, ValueError):
        return None
    # sqlite INTEGER is signed 64-bit
    if not -2**63 <= row_id < 2**63:
        return None
    return row_id


def _required(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


class Store:
    """sqlite-backed dictionary entries and saved results.

    One instance per process; every call opens its own short-lived connection,
    so the instance is safe to share between request threads.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @classmethod
    def from_url(cls, url: str) -> "Store":
        return cls(sqlite_path_from_url(url))

    @property
    def path(self) -> Path:
        return self._path

    def get_conn(self) -> sqlite3.Connection:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Database directory {self._path.parent} is not usable") from exc
        conn = sqlite3.connect(str(self._path))
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        with self.get_conn() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS dictionary_entries (
                    id              INTEGER PRIMARY KEY AUTOINCREMENT,
                    original_term   TEXT    NOT NULL UNIQUE,
                    simplified_term TEXT    NOT NULL
                );

                CREATE TABLE IF NOT EXISTS saved_results (
                    id              INTEGER PRIMARY KEY AUTOINCREMENT,
                    original_text   TEXT    NOT NULL,
                    simplified_text TEXT    NOT NULL,
                    target_audience TEXT    NOT NULL,
                    output_format   TEXT    NOT NULL,
                    created_at      TEXT    NOT NULL
                );
            """)

    # ── dictionary_entries ────────────────────────────────────────────────────

    def list_entries(self) -> list[dict]:
        with self.get_conn() as conn:
            rows = conn.execute(
                "SELECT id, original_term, simplified_term FROM dictionary_entries ORDER BY id"
            ).fetchall()
        return [dict(r) for r in rows]

    def get_entry(self, entry_id) -> dict:
        row_id = _parse_id(entry_id)
        row = None
        if row_id is not None:
            with self.get_conn() as conn:
                row = conn.execute(
                    "SELECT id, original_term, simplified_term FROM dictionary_entries WHERE id=?",
                    (row_id,),
                ).fetchone()
        if not row:
            raise EntryNotFoundError(f"Entry {entry_id} not found")
        return dict(row)

    def insert_entry(self, original_term, simplified_term) -> dict:
        original_term = _required(original_term, "originalTerm")
        simplified_term = _required(simplified_term, "simplifiedTerm")
        try:
            with self.get_conn() as conn:
                cur = conn.execute(
                    "INSERT INTO dictionary_entries (original_term, simplified_term) VALUES (?,?)",
                    (original_term, simplified_term),
                )
                new_id = cur.lastrowid
        except sqlite3.IntegrityError as exc:
            raise DuplicateTermError(f"originalTerm {original_term!r} already exists") from exc
        return {"id": new_id, "original_term": original_term, "simplified_term": simplified_term}

    def update_entry(self, entry_id, patch: dict) -> dict:
        """Apply a partial update. Keys are ``original_term`` / ``simplified_term``."""
        current = self.get_entry(entry_id)
        updated = dict(current)
        for field, label in (("original_term", "originalTerm"), ("simplified_term", "simplifiedTerm")):
            if field in patch and patch[field] is not None:
                updated[field] = _required(patch[field], label)

        if updated == current:
            return current

        try:
            with self.get_conn() as conn:
                conn.execute(
                    "UPDATE dictionary_entries SET original_term=?, simplified_term=? WHERE id=?",
                    (updated["original_term"], updated["simplified_term"], current["id"]),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateTermError(
                f"originalTerm {updated['original_term']!r} already exists"
            ) from exc
        return updated

    def delete_entry(self, entry_id) -> None:
        row_id = _parse_id(entry_id)
        deleted = 0
        if row_id is not None:
            with self.get_conn() as conn:
                deleted = conn.execute(
                    "DELETE FROM dictionary_entries WHERE id=?", (row_id,)
                ).rowcount
        if not deleted:
            raise EntryNotFoundError(f"Entry {entry_id} not found")

    # ── saved_results ─────────────────────────────────────────────────────────

    def save_result(
        self,
        original_text: str,
        simplified_text: str,
        target_audience: str,
        output_format: str,
    ) -> dict:
        values = {
            "original_text": _required(original_text, "originalText"),
            "simplified_text": _required(simplified_text, "simplifiedText"),
            "target_audience": _required(target_audience, "targetAudience"),
            "output_format": _required(output_format, "outputFormat"),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        with self.get_conn() as conn:
            cur = conn.execute(
                """INSERT INTO saved_results
                   (original_text, simplified_text, target_audience, output_format, created_at)
                   VALUES (?,?,?,?,?)""",
                (
                    values["original_text"], values["simplified_text"],
                    values["target_audience"], values["output_format"],
                    values["created_at"],
                ),
            )
            values["id"] = cur.lastrowid
        return values

    def get_result(self, result_id) -> Optional[dict]:
        row_id = _parse_id(result_id)
        if row_id is None:
            return None
        with self.get_conn() as conn:
            row = conn.execute("SELECT * FROM saved_results WHERE id=?", (row_id,)).fetchone()
        return dict(row) if row else None
