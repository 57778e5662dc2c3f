from pathlib import Path

import pytest

from keylic.common.store import FileStore, MemoryStore


def test_memory_store() -> None:
    store = MemoryStore()
    assert not store.exists()
    with pytest.raises(OSError):
        store.read()
    store.write(b"artifact")
    assert store.exists()
    assert store.read() == b"artifact"
    store.delete()
    assert store.data is None
    with pytest.raises(OSError):
        store.delete()


def test_memory_store_copies_input() -> None:
    data = bytearray(b"artifact")
    store = MemoryStore()
    store.write(data)
    data[0] = 0
    assert store.read() == b"artifact"


def test_file_store(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "nested" / "license.key")
    assert not store.exists()
    with pytest.raises(OSError):
        store.read()
    store.write(b"first")
    store.write(b"second")
    assert store.read() == b"second"
    assert sorted(p.name for p in store.path.parent.iterdir()) == ["license.key"]
    store.delete()
    assert not store.exists()
    with pytest.raises(OSError):
        store.delete()
