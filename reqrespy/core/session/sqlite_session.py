"""
SQLite credential storage.

Keeps the bearer token in a local SQLite database file so a login
survives process restarts.
"""
import sqlite3
import threading
from pathlib import Path
from datetime import datetime
from typing import Optional, Union
from contextlib import contextmanager

from .protocols import CredentialStore
from .models import Credential, CREDENTIAL_KEY


class SQLiteSession(CredentialStore):
    """
    SQLite-based credential storage.
    
    One row per key in a ``credentials`` table; the token lives under the
    fixed key ``token``. The connection is shared behind a lock.
    
    Example:
        >>> store = SQLiteSession("my_account")
        >>> # Creates my_account.session file
        >>> await store.save(Credential("access-token"))
        >>> loaded = await store.load()
    """
    
    EXTENSION = '.session'
    SCHEMA_VERSION = 1
    
    def __init__(
        self,
        session_name: Union[str, Path],
        base_path: Optional[Path] = None
    ):
        """
        Initialize SQLite credential storage.
        
        Args:
            session_name: Session name (without extension) or full path
            base_path: Optional base directory for session files
        """
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = None
        
        if isinstance(session_name, Path) or session_name.endswith(self.EXTENSION):
            self._path = Path(session_name)
        else:
            if base_path:
                self._path = Path(base_path) / f"{session_name}{self.EXTENSION}"
            else:
                self._path = Path(f"{session_name}{self.EXTENSION}")
        
        self._path.parent.mkdir(parents=True, exist_ok=True)
        
        self._init_db()
    
    @property
    def path(self) -> Path:
        """Get session file path."""
        return self._path
    
    @contextmanager
    def _get_connection(self):
        """Get thread-safe database connection."""
        with self._lock:
            if self._conn is None:
                self._conn = sqlite3.connect(
                    str(self._path),
                    check_same_thread=False
                )
                self._conn.row_factory = sqlite3.Row
            yield self._conn
    
    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS version (
                    version INTEGER PRIMARY KEY
                )
            ''')
            
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS credentials (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            ''')
            
            cursor.execute('SELECT version FROM version LIMIT 1')
            row = cursor.fetchone()
            if row is None:
                cursor.execute(
                    'INSERT INTO version (version) VALUES (?)',
                    (self.SCHEMA_VERSION,)
                )
            
            conn.commit()
    
    def load_sync(self) -> Optional[Credential]:
        """Load the credential without an event loop (used by the CLI)."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                'SELECT value, created_at, updated_at FROM credentials WHERE key = ?',
                (CREDENTIAL_KEY,)
            )
            
            row = cursor.fetchone()
            if row is None:
                return None
            
            return Credential(
                token=row['value'],
                created_at=datetime.fromisoformat(row['created_at']),
                updated_at=datetime.fromisoformat(row['updated_at']),
            )
    
    async def load(self) -> Optional[Credential]:
        return self.load_sync()
    
    async def save(self, credential: Credential) -> None:
        """
        Save the credential, replacing any previous one.
        
        Args:
            credential: Credential to save
        """
        credential.update_timestamp()
        
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('''
                INSERT OR REPLACE INTO credentials (key, value, created_at, updated_at)
                VALUES (?, ?, ?, ?)
            ''', (
                CREDENTIAL_KEY,
                credential.token,
                credential.created_at.isoformat(),
                credential.updated_at.isoformat(),
            ))
            conn.commit()
    
    async def delete(self) -> None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('DELETE FROM credentials WHERE key = ?', (CREDENTIAL_KEY,))
            conn.commit()
    
    async def exists(self) -> bool:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                'SELECT COUNT(*) FROM credentials WHERE key = ?',
                (CREDENTIAL_KEY,)
            )
            return cursor.fetchone()[0] > 0
    
    def close_sync(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
    
    async def close(self) -> None:
        self.close_sync()
    
    def delete_file(self) -> None:
        """Delete the session file completely."""
        self.close_sync()
        if self._path.exists():
            self._path.unlink()
    
    async def __aenter__(self) -> 'SQLiteSession':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    def __del__(self):
        """Destructor - ensure connection is closed."""
        try:
            self.close_sync()
        except Exception:
            pass
