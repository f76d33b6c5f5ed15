from history_store import HistoryStore, storage_key, job_title_from, new_record
from models import HistoryEntry
from schemas import HistoryRecord

EMAIL = "jane@example.com"


def record(rid, pct=50):
    return HistoryRecord(id=rid, date="2026-10-16", match_percentage=pct, job_title="Role",
                         resume_text="r" * 60, job_description="j" * 60)


def test_key_is_prefixed_email():
    assert storage_key(EMAIL) == "analysisHistory_jane@example.com"


def test_empty_history(store):
    assert store.load(EMAIL) == []


def test_append_prepends_and_persists(store, session_factory):
    store.append(EMAIL, record("1"))
    store.append(EMAIL, record("2"))
    assert [r.id for r in HistoryStore(session_factory).load(EMAIL)] == ["2", "1"]

    with session_factory() as s:
        row = s.get(HistoryEntry, storage_key(EMAIL))
        assert row.version == 2
        assert row.records[0]["matchPercentage"] == 50


def test_histories_are_per_user(store):
    store.append(EMAIL, record("1"))
    assert store.load("other@example.com") == []
    assert store.get(EMAIL, "1").id == "1"
    assert store.get(EMAIL, "missing") is None


def test_same_record_is_not_appended_twice(store):
    store.append(EMAIL, record("1"))
    store.append(EMAIL, record("1"))
    assert len(store.load(EMAIL)) == 1


def test_interleaved_writer_does_not_lose_records(session_factory):
    other = HistoryStore(session_factory)
    other.append(EMAIL, record("1"))
    raced = []

    def racing_factory():
        s = session_factory()
        real_get = s.get

        def get(*args, **kwargs):
            row = real_get(*args, **kwargs)
            if not raced:
                raced.append(True)
                other.append(EMAIL, record("2"))
            return row

        s.get = get
        return s

    HistoryStore(racing_factory).append(EMAIL, record("3"))
    assert [r.id for r in other.load(EMAIL)] == ["3", "2", "1"]


def test_new_record_fields():
    rec = new_record(81, "resume", "Platform Engineer\nDetails follow")
    assert rec.job_title == "Platform Engineer"
    assert rec.match_percentage == 81
    assert rec.resume_text == "resume"
    assert job_title_from("") == "Untitled Position"
