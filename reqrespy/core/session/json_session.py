"""
JSON file credential storage.

Keeps the credential in a small JSON document, read and written with
aiofiles so the event loop never blocks on disk I/O.
"""
import json
import os
from pathlib import Path
from typing import Optional, Union

import aiofiles

from .protocols import CredentialStore
from .models import Credential
from ..logging import get_logger

logger = get_logger('reqrespy.session')


class JSONFileSession(CredentialStore):
    """
    JSON-file credential storage.
    
    Writes go to a temporary sibling file renamed over the target.
    
    Example:
        >>> store = JSONFileSession("my_account")
        >>> # Uses my_account.json
        >>> await store.save(Credential("access-token"))
    """
    
    EXTENSION = '.json'
    
    def __init__(
        self,
        session_name: Union[str, Path],
        base_path: Optional[Path] = None
    ):
        if isinstance(session_name, Path) or session_name.endswith(self.EXTENSION):
            self._path = Path(session_name)
        elif base_path:
            self._path = Path(base_path) / f"{session_name}{self.EXTENSION}"
        else:
            self._path = Path(f"{session_name}{self.EXTENSION}")
        
        self._path.parent.mkdir(parents=True, exist_ok=True)
    
    @property
    def path(self) -> Path:
        return self._path
    
    async def load(self) -> Optional[Credential]:
        """
        Load the credential from disk.
        
        A missing file means no credential. An unreadable document is
        logged and treated the same way.
        """
        if not self._path.exists():
            return None
        
        async with aiofiles.open(self._path, 'r', encoding='utf-8') as f:
            content = await f.read()
        
        try:
            return Credential.from_json(content)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable credential file {self._path}: {e}")
            return None
    
    async def save(self, credential: Credential) -> None:
        credential.update_timestamp()
        
        tmp_path = self._path.with_suffix(self._path.suffix + '.tmp')
        async with aiofiles.open(tmp_path, 'w', encoding='utf-8') as f:
            await f.write(credential.to_json())
        os.replace(tmp_path, self._path)
    
    async def delete(self) -> None:
        if self._path.exists():
            self._path.unlink()
    
    async def exists(self) -> bool:
        return await self.load() is not None
    
    async def close(self) -> None:
        """Close storage (no-op, files are opened per call)."""
        pass
    
    async def __aenter__(self) -> 'JSONFileSession':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
