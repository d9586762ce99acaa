from datetime import datetime, timedelta, timezone

from webhook_listener.models import WebhookRecord, epoch_millis, iso_timestamp


def test_iso_timestamp_has_millis_and_z_suffix():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert iso_timestamp(now) == "2024-01-01T00:00:00.000Z"


def test_iso_timestamp_converts_to_utc():
    tokyo = timezone(timedelta(hours=9))
    now = datetime(2024, 1, 1, 9, 0, 0, 500000, tzinfo=tokyo)
    assert iso_timestamp(now) == "2024-01-01T00:00:00.500Z"
    assert epoch_millis(now) == 1704067200500


def test_naive_datetime_is_treated_as_utc():
    assert epoch_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000


def test_sub_millisecond_precision_is_truncated():
    now = datetime(2024, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
    assert iso_timestamp(now) == "2024-01-01T00:00:00.999Z"
    assert epoch_millis(now) == 1704067200999


def test_build_record_item_shape():
    record = WebhookRecord.build("abc-123", {"event": "ping"}, datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert record.to_item() == {
        "id": "abc-123",
        "payload": {"event": "ping"},
        "timestamp": "2024-01-01T00:00:00.000Z",
        "receivedAt": 1704067200000,
    }
