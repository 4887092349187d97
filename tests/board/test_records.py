"""
Unit tests for src/board/records.py and src/board/resources.py
"""

from datetime import date, datetime, timezone

import pytest

from src.board.errors import ParseError
from src.board.records import (
    CommunityEvent,
    JobPosting,
    LocalAlert,
    parse_record,
    parse_records,
    parse_timestamp,
    to_form_date,
)
from src.board.resources import ALERTS, EVENTS, JOBS, get_schema


class TestTimestamps:
    @pytest.mark.parametrize(
        "raw",
        ["2025-01-01", "2025-01-01T00:00:00.000Z", "2025-01-01T00:00:00+00:00", date(2025, 1, 1)],
    )
    def test_parse_timestamp_accepts_dates_and_datetimes(self, raw):
        assert parse_timestamp(raw) == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_naive_datetime_is_treated_as_utc(self):
        assert parse_timestamp(datetime(2025, 1, 1, 12)).tzinfo == timezone.utc

    def test_to_form_date(self):
        assert to_form_date(datetime(2025, 6, 30, 22, 0, tzinfo=timezone.utc)) == "2025-06-30"
        assert to_form_date(None) == ""


class TestParsing:
    def test_parse_job(self, job_payload):
        job = parse_record(JobPosting, job_payload)

        assert job.id == job_payload["_id"]
        assert job.poster == "60d5f2f5c7b9e10015f4e2a0"

    def test_populated_owner_is_flattened(self, event_payload):
        event_payload["organizer"] = {"_id": "60d7bbf96e7e8b2e2c5e8b1c", "name": "Ravi"}

        event = parse_record(CommunityEvent, event_payload)

        assert event.organizer == "60d7bbf96e7e8b2e2c5e8b1c"

    def test_bad_date_raises_parse_error(self, alert_payload):
        alert_payload["date"] = "next tuesday"

        with pytest.raises(ParseError):
            parse_record(LocalAlert, alert_payload)

    def test_missing_id_raises_parse_error(self, alert_payload):
        del alert_payload["_id"]

        with pytest.raises(ParseError):
            parse_record(LocalAlert, alert_payload)

    def test_non_object_item_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_records(LocalAlert, ["not a record"])

    def test_dump_by_alias_round_trips(self, event_payload):
        event = parse_record(CommunityEvent, event_payload)

        again = CommunityEvent.model_validate_json(event.model_dump_json(by_alias=True))

        assert again == event


class TestSchemas:
    def test_required_fields_match_data_model(self):
        assert JOBS.required_fields == ("serviceType", "location", "lastDate", "contactName", "contactPhone")
        assert ALERTS.required_fields == ("message", "location", "date")
        assert EVENTS.required_fields == ("title", "description", "date", "location")

    def test_owner_fields(self):
        assert JOBS.owner_field == "poster"
        assert ALERTS.owner_field is None
        assert EVENTS.owner_field == "organizer"

    def test_api_paths(self):
        assert [s.api_path for s in (JOBS, ALERTS, EVENTS)] == ["/hire", "/local-alerts", "/events"]

    def test_get_schema(self):
        assert get_schema("alerts") is ALERTS
        with pytest.raises(KeyError):
            get_schema("unknown")

    def test_form_titles(self):
        assert JOBS.form_title(editing=False) == "Add New Job"
        assert EVENTS.form_title(editing=True) == "Edit Event"

    def test_add_labels_and_empty_hints(self):
        assert [s.add_label for s in (JOBS, ALERTS, EVENTS)] == [
            "Add Job Posting", "Add New Alert", "Add New Event",
        ]
        assert JOBS.empty_hint == 'Click "Add Job Posting" to create a new entry.'
        assert ALERTS.empty_hint == 'Click "Add New Alert" to create one.'
        assert EVENTS.empty_hint == 'Click "Add New Event" to create one.'
