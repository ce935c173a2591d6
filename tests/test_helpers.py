from datetime import datetime

from src.utils.helpers import decode_transcript_bytes, describe_size, outbox_filename


def test_outbox_filename_is_safe_and_timestamped():
    name = outbox_filename("Q3 / planning: notes", datetime(2024, 1, 2, 3, 4, 5, 6))
    assert name == "20240102_030405_000006_Q3_planning_notes.eml"


def test_outbox_filename_falls_back_for_empty_subject():
    assert outbox_filename("", datetime(2024, 1, 1)).endswith("_summary.eml")


def test_describe_size():
    assert describe_size(512) == "512 B"
    assert describe_size(2048) == "2.0 KB"
    assert describe_size(10 * 1024 * 1024) == "10.0 MB"


def test_decode_keeps_bom():
    assert decode_transcript_bytes(b"\xef\xbb\xbfhi") == "\ufeffhi"
