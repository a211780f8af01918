"""Tests for the JSON file record store."""

import json
from datetime import timedelta

import pytest

from babyfeed.adapters.json_feed_repository import JsonFeedRepository
from babyfeed.adapters.json_medicine_repository import JsonMedicineRepository
from babyfeed.adapters.json_profile_repository import JsonProfileRepository
from babyfeed.adapters.json_stool_repository import JsonStoolRepository
from babyfeed.adapters.json_store import JsonDocumentStore
from babyfeed.domain.models import (
    ActiveSession,
    FeedType,
    Medicine,
    MedicineDoseLog,
    MedicineTarget,
    StoolColor,
)
from babyfeed.errors import StorageError
from helpers import NOW, make_profile, make_session, make_stool


@pytest.fixture
def store(tmp_path) -> JsonDocumentStore:
    return JsonDocumentStore(tmp_path / "data" / "babyfeed.json")


def test_missing_file_reads_as_empty(store: JsonDocumentStore) -> None:
    assert store.load() == {}
    assert JsonProfileRepository(store).get_profile() is None
    assert JsonFeedRepository(store).list_sessions() == []
    assert JsonFeedRepository(store).get_active_session() is None
    assert JsonStoolRepository(store).list_stool_logs() == []
    assert JsonMedicineRepository(store).list_medicines() == []


def test_profile_is_persisted(store: JsonDocumentStore) -> None:
    repo = JsonProfileRepository(store)
    profile = make_profile(10)

    repo.save_profile(profile)

    assert JsonProfileRepository(JsonDocumentStore(store.path)).get_profile() == profile
    repo.clear_profile()
    assert repo.get_profile() is None


def test_sessions_are_kept_newest_insert_first(store: JsonDocumentStore) -> None:
    repo = JsonFeedRepository(store)
    first = make_session(NOW - timedelta(hours=3))
    bottle = make_session(
        NOW - timedelta(hours=1), minutes=0, feed_type=FeedType.BOTTLE, amount_ml=90
    )

    repo.add_session(first)
    repo.add_session(bottle)

    assert repo.list_sessions() == [bottle, first]
    rows = json.loads(store.path.read_text(encoding="utf-8"))["sessions"]
    assert rows[0]["feed_type"] == "bottle"
    assert rows[0]["amount_ml"] == 90
    assert "amount_ml" not in rows[1]


def test_active_session_lifecycle(store: JsonDocumentStore) -> None:
    repo = JsonFeedRepository(store)
    active = ActiveSession(start_time=NOW, feed_type=FeedType.RIGHT_BREAST)

    repo.save_active_session(active)
    assert repo.get_active_session() == active

    repo.clear_active_session()
    assert repo.get_active_session() is None


def test_stool_logs_keep_missing_tags(store: JsonDocumentStore) -> None:
    repo = JsonStoolRepository(store)
    plain = make_stool(NOW - timedelta(hours=2), None, None)
    red = make_stool(NOW, StoolColor.RED)

    repo.add_stool_log(plain)
    repo.add_stool_log(red)

    assert repo.list_stool_logs() == [red, plain]


def test_medicines_and_dose_logs(store: JsonDocumentStore) -> None:
    repo = JsonMedicineRepository(store)
    medicine = Medicine(
        id="vit-d",
        name="Vitamin D",
        target=MedicineTarget.BABY,
        dosage="1 drop",
        notes="",
        active=False,
        created_at=NOW,
    )
    dose = MedicineDoseLog(
        id="dose-1",
        medicine_id="vit-d",
        medicine_name="Vitamin D",
        target=MedicineTarget.BABY,
        dosage="1 drop",
        time=NOW,
    )

    repo.save_medicines([medicine])
    repo.add_medicine_log(dose)
    repo.clear_medicine_logs()

    assert repo.list_medicines() == [medicine]
    assert repo.list_medicine_logs() == []


def test_clearing_one_collection_keeps_the_others(store: JsonDocumentStore) -> None:
    profiles = JsonProfileRepository(store)
    feeds = JsonFeedRepository(store)
    profiles.save_profile(make_profile())
    feeds.add_session(make_session(NOW))

    feeds.clear_sessions()

    assert feeds.list_sessions() == []
    assert profiles.get_profile() is not None


def test_save_replaces_file_without_leftovers(store: JsonDocumentStore) -> None:
    store.put("profile", {"name": "Mia"})

    assert [path.name for path in store.path.parent.iterdir()] == ["babyfeed.json"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_unreadable_document(store: JsonDocumentStore, content: str) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text(content, encoding="utf-8")

    with pytest.raises(StorageError):
        store.load()


def test_unknown_stored_tag_is_a_storage_error(store: JsonDocumentStore) -> None:
    store.put(
        "sessions",
        [
            {
                "id": "x",
                "start_time": NOW.isoformat(),
                "end_time": NOW.isoformat(),
                "duration_ms": 0,
                "feed_type": "formula",
            }
        ],
    )

    with pytest.raises(StorageError):
        JsonFeedRepository(store).list_sessions()
