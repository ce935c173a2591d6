from dataclasses import FrozenInstanceError

import pytest

from src.database.memory_store import SummaryStore


def test_create_summary_round_trip():
    store = SummaryStore()
    transcript = "Alice: Let's ship Friday.\n  Bob: ok  "
    summary = store.create_summary(transcript, "List action items", "- Ship Friday")

    fetched = store.get_summary(summary.id)

    assert fetched is summary
    assert fetched.original_transcript == transcript
    assert fetched.custom_prompt == "List action items"
    assert fetched.generated_summary == "- Ship Friday"
    assert fetched.created_at is not None


def test_summary_ids_are_unique():
    store = SummaryStore()
    ids = {store.create_summary("t", "p", "s").id for _ in range(200)}
    assert len(ids) == 200
    assert store.summary_count() == 200


def test_get_unknown_summary_returns_none():
    assert SummaryStore().get_summary("missing") is None


def test_summaries_are_immutable():
    summary = SummaryStore().create_summary("t", "p", "s")
    with pytest.raises(FrozenInstanceError):
        summary.generated_summary = "changed"


def test_email_logs_are_filtered_and_ordered():
    store = SummaryStore()
    first = store.create_summary("t1", "p", "s")
    second = store.create_summary("t2", "p", "s")

    log_a = store.create_email_log(first.id, ["a@x.com", "b@x.com"], "One", "hello")
    store.create_email_log(second.id, ["c@x.com"], "Other")
    log_b = store.create_email_log(first.id, ["d@x.com"], "Two")

    logs = store.get_email_logs_by_summary_id(first.id)

    assert [log.id for log in logs] == [log_a.id, log_b.id]
    assert logs[0].recipients == ("a@x.com", "b@x.com")
    assert logs[0].message == "hello"
    assert logs[1].message is None
    assert store.email_log_count() == 3


def test_email_log_does_not_require_existing_summary():
    store = SummaryStore()
    log = store.create_email_log("not-a-summary", ["a@x.com"], "Subject")
    assert store.get_email_logs_by_summary_id("not-a-summary") == [log]


def test_to_dict_uses_camel_case_keys():
    store = SummaryStore()
    summary = store.create_summary("t", "p", "s")
    log = store.create_email_log(summary.id, ["a@x.com"], "Subject")

    assert set(summary.to_dict()) == {'id', 'originalTranscript', 'customPrompt', 'generatedSummary', 'createdAt'}
    assert log.to_dict()['recipients'] == ["a@x.com"]
    assert log.to_dict()['summaryId'] == summary.id
