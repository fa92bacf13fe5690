"""
Unit tests for credential storage.

Tests Credential, MemorySession, SQLiteSession and JSONFileSession.
"""
import pytest
import tempfile
from pathlib import Path
from datetime import datetime

from reqrespy.core.session import (
    CredentialStore,
    Credential,
    CREDENTIAL_KEY,
    SQLiteSession,
    JSONFileSession,
    MemorySession
)


class TestCredential:
    """Tests for Credential model."""

    def test_to_dict_uses_fixed_key(self):
        credential = Credential(token="abc")

        result = credential.to_dict()

        assert CREDENTIAL_KEY == 'token'
        assert result['token'] == "abc"
        assert 'created_at' in result
        assert 'updated_at' in result

    def test_from_dict(self):
        credential = Credential.from_dict({
            'token': 'abc',
            'created_at': '2024-01-01T12:00:00',
            'updated_at': '2024-01-02T12:00:00',
        })

        assert credential.token == 'abc'
        assert credential.created_at == datetime(2024, 1, 1, 12, 0, 0)
        assert credential.updated_at == datetime(2024, 1, 2, 12, 0, 0)

    def test_json_round_trip(self):
        credential = Credential(token="ya29.a0Af")

        loaded = Credential.from_json(credential.to_json())

        assert loaded.token == "ya29.a0Af"

    def test_is_valid(self):
        assert Credential(token="abc").is_valid() is True
        assert Credential(token="").is_valid() is False

    def test_repr_hides_token(self):
        assert 'secret' not in repr(Credential(token="secret"))

    def test_update_timestamp(self):
        credential = Credential(token="abc")
        old_time = credential.updated_at

        credential.update_timestamp()

        assert credential.updated_at >= old_time


class TestMemorySession:
    """Tests for MemorySession storage."""

    def test_implements_protocol(self):
        assert isinstance(MemorySession(), CredentialStore)

    @pytest.mark.asyncio
    async def test_save_and_load(self):
        store = MemorySession()

        await store.save(Credential(token="abc"))
        loaded = await store.load()

        assert loaded is not None
        assert loaded.token == "abc"

    @pytest.mark.asyncio
    async def test_exists_and_delete(self):
        store = MemorySession()
        assert await store.exists() is False

        await store.save(Credential(token="abc"))
        assert await store.exists() is True

        await store.delete()
        assert await store.exists() is False
        assert await store.load() is None

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with MemorySession() as store:
            await store.save(Credential(token="abc"))
            assert await store.exists() is True


class TestSQLiteSession:
    """Tests for SQLiteSession storage."""

    @pytest.fixture
    def temp_store(self):
        """Create a temporary session file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SQLiteSession("test_session", Path(tmpdir))
            yield store
            store.close_sync()

    def test_implements_protocol(self, temp_store):
        assert isinstance(temp_store, CredentialStore)

    def test_creates_session_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SQLiteSession("my_account", Path(tmpdir))

            assert (Path(tmpdir) / "my_account.session").exists()
            assert store.path == Path(tmpdir) / "my_account.session"

            store.close_sync()

    def test_custom_extension_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            full_path = Path(tmpdir) / "custom_name.session"
            store = SQLiteSession(str(full_path))

            assert store.path == full_path

            store.close_sync()

    @pytest.mark.asyncio
    async def test_save_and_load(self, temp_store):
        await temp_store.save(Credential(token="abc"))
        loaded = await temp_store.load()

        assert loaded is not None
        assert loaded.token == "abc"
        assert temp_store.load_sync().token == "abc"

    @pytest.mark.asyncio
    async def test_overwrite(self, temp_store):
        await temp_store.save(Credential(token="first"))
        await temp_store.save(Credential(token="second"))

        loaded = await temp_store.load()

        assert loaded.token == "second"

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, temp_store):
        await temp_store.save(Credential(token="abc"))

        await temp_store.delete()
        await temp_store.delete()

        assert await temp_store.exists() is False
        assert await temp_store.load() is None

    @pytest.mark.asyncio
    async def test_persistence(self):
        """Credential survives closing and reopening the file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store1 = SQLiteSession("persistent", Path(tmpdir))
            await store1.save(Credential(token="persistent-token"))
            await store1.close()

            store2 = SQLiteSession("persistent", Path(tmpdir))
            loaded = await store2.load()
            await store2.close()

            assert loaded is not None
            assert loaded.token == "persistent-token"

    def test_delete_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SQLiteSession("test_session", Path(tmpdir))
            assert store.path.exists()

            store.delete_file()

            assert not store.path.exists()


class TestJSONFileSession:
    """Tests for JSONFileSession storage."""

    def test_implements_protocol(self, tmp_path):
        assert isinstance(JSONFileSession("creds", tmp_path), CredentialStore)

    @pytest.mark.asyncio
    async def test_missing_file_is_absent(self, tmp_path):
        store = JSONFileSession("creds", tmp_path)

        assert store.path == tmp_path / "creds.json"
        assert await store.load() is None
        assert await store.exists() is False

    @pytest.mark.asyncio
    async def test_save_and_load(self, tmp_path):
        store = JSONFileSession("creds", tmp_path)

        await store.save(Credential(token="abc"))

        assert store.path.exists()
        loaded = await JSONFileSession("creds", tmp_path).load()
        assert loaded.token == "abc"

    @pytest.mark.asyncio
    async def test_delete(self, tmp_path):
        store = JSONFileSession("creds", tmp_path)
        await store.save(Credential(token="abc"))

        await store.delete()
        await store.delete()

        assert not store.path.exists()
        assert await store.load() is None

    @pytest.mark.asyncio
    async def test_corrupt_file_is_absent(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text("{not json")

        store = JSONFileSession(path)

        assert await store.load() is None
