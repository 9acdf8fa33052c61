from __future__ import annotations

import logging

from pms.core.database import make_engine
from pms.models.enums import PropertyStatus
from pms.services.seed import build_seed_state
from pms.services.store import FileBackend, MemoryBackend, RecordStore, SqlBackend

from conftest import NOW


def _seed():
    return build_seed_state(NOW)


def test_empty_backend_loads_seed():
    store = RecordStore(MemoryBackend(), seed_factory=_seed)
    state = store.load()
    assert [u.id for u in state.users] == ["u1", "u2", "u3", "u4"]
    assert state.find_property("p1").status == PropertyStatus.OCCUPIED
    assert state.applications == []
    assert not store.recovered_from_corruption


def test_saved_record_uses_camel_case_keys():
    backend = MemoryBackend()
    store = RecordStore(backend, seed_factory=_seed)
    store.save(store.load())
    assert '"assignedPropertyId":"p1"' in backend.payload
    assert '"agentId":"u1"' in backend.payload


def test_corrupt_payload_falls_back_to_seed(caplog):
    store = RecordStore(MemoryBackend('{"users": "not a list"'), seed_factory=_seed)
    with caplog.at_level(logging.ERROR, logger="pms.services.store"):
        state = store.load()

    assert state.find_user("u1").name == "Alex Agent"
    assert store.recovered_from_corruption
    assert "unreadable" in store.last_load_error.message
    assert any("corrupt" in r.getMessage() for r in caplog.records)


def test_transaction_discards_changes_on_error():
    store = RecordStore(MemoryBackend(), seed_factory=_seed)
    try:
        with store.transaction() as state:
            state.find_property("p2").status = PropertyStatus.ARCHIVED
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert store.load().find_property("p2").status == PropertyStatus.VACANT


def test_transaction_persists_on_clean_exit():
    store = RecordStore(MemoryBackend(), seed_factory=_seed)
    with store.transaction() as state:
        state.find_property("p2").status = PropertyStatus.ARCHIVED
    assert store.load().find_property("p2").status == PropertyStatus.ARCHIVED


def test_file_backend_roundtrip(tmp_path):
    path = tmp_path / "data" / "prop_lifecycle_data.json"
    store = RecordStore(FileBackend(path), seed_factory=_seed)
    with store.transaction() as state:
        state.find_user("u3").phone = "+1 (555) 000-1111"

    assert path.exists()
    reopened = RecordStore(FileBackend(path), seed_factory=_seed)
    assert reopened.load().find_user("u3").phone == "+1 (555) 000-1111"
    assert list(path.parent.glob(".record-*")) == []


def test_sql_backend_roundtrip(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'pms.db'}")
    store = RecordStore(SqlBackend(engine, key="prop_lifecycle_data"), seed_factory=_seed)
    assert store.backend.read() is None

    with store.transaction() as state:
        state.find_property("p3").name = "Oak Ridge Villa (renovated)"
    with store.transaction() as state:
        state.find_property("p3").rent = 4700

    prop = store.load().find_property("p3")
    assert prop.name == "Oak Ridge Villa (renovated)"
    assert prop.rent == 4700


def test_undecodable_file_falls_back_to_seed(tmp_path):
    path = tmp_path / "prop_lifecycle_data.json"
    path.write_bytes(b'{"users": [\xff\xfe]}')
    store = RecordStore(FileBackend(path), seed_factory=_seed)

    state = store.load()

    assert state.find_user("u2").assigned_property_id == "p1"
    assert store.recovered_from_corruption
    assert "not UTF-8" in store.last_load_error.message

    # The next save replaces the broken file
    with store.transaction() as state:
        state.find_user("u3").phone = "+1 (555) 777-0000"
    assert store.load().find_user("u3").phone == "+1 (555) 777-0000"
    assert not store.recovered_from_corruption
