"""
Declarative schemas for the three board resources.

One ResourceSchema carries everything that differs between the job, alert
and event views: wire path, field order, required set, record model, the
owner field injected on save, and every user-facing message. The list,
form and client code is written once against this shape.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type

from src.board.records import BoardRecord, CommunityEvent, JobPosting, LocalAlert


@dataclass(frozen=True)
class FieldSpec:
    """One editable field of a resource form."""
    name: str
    label: str
    input_type: str = "text"  # text, textarea, date, number, tel
    required: bool = False


@dataclass(frozen=True)
class ResourceSchema:
    """Everything the generic CRUD view needs to know about one resource."""
    key: str  # URL segment in the UI: /hiring, /alerts, /events
    api_path: str  # path on the remote API
    record_model: Type[BoardRecord]
    fields: Tuple[FieldSpec, ...]
    title: str
    noun: str  # "job", "alert", "event"
    add_label: str  # button text, rendered after a "+"
    owner_field: Optional[str] = None

    required_message: str = "Please fill out all required fields."
    save_failed_message: str = "Failed to save."
    delete_failed_message: str = "Failed to delete."
    load_failed_message: str = "Could not load items. Please try refreshing the page."
    delete_banner_message: str = "Could not delete the item. Please try again."
    delete_confirm: str = "Are you sure you want to delete this item?"
    empty_title: str = "Nothing here yet"
    empty_hint: str = ""
    loading_message: str = "Loading..."

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    @property
    def date_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.input_type == "date")

    @property
    def numeric_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.input_type == "number")

    def form_title(self, editing: bool) -> str:
        noun = self.noun.capitalize()
        return f"Edit {noun}" if editing else f"Add New {noun}"


JOBS = ResourceSchema(
    key="hiring",
    api_path="/hire",
    record_model=JobPosting,
    fields=(
        FieldSpec("serviceType", "Service Type / Job Title", required=True),
        FieldSpec("location", "Location", required=True),
        FieldSpec("description", "Description", input_type="textarea"),
        FieldSpec("lastDate", "Application Deadline", input_type="date", required=True),
        FieldSpec("contactName", "Contact Name", required=True),
        FieldSpec("contactPhone", "Contact Phone", input_type="tel", required=True),
        FieldSpec("salary", "Salary (Optional)", input_type="number"),
        FieldSpec("imageUrl", "Image URL (Optional)"),
    ),
    title="Hiring Dashboard",
    noun="job",
    add_label="Add Job Posting",
    empty_hint='Click "Add Job Posting" to create a new entry.',
    owner_field="poster",
    required_message=(
        "Please fill out all required fields "
        "(Service Type, Location, Application Deadline, Contact Name, Contact Phone)."
    ),
    save_failed_message="Failed to save job.",
    delete_failed_message="Failed to delete job.",
    load_failed_message="Could not load job postings. Please try refreshing the page.",
    delete_banner_message="Could not delete the job posting. Please try again.",
    delete_confirm="Are you sure you want to delete this job posting?",
    empty_title="No Open Positions",
    loading_message="Loading job postings...",
)

ALERTS = ResourceSchema(
    key="alerts",
    api_path="/local-alerts",
    record_model=LocalAlert,
    fields=(
        FieldSpec("message", "Alert Message", required=True),
        FieldSpec("description", "Description (Optional)", input_type="textarea"),
        FieldSpec("location", "Location", required=True),
        FieldSpec("date", "Date", input_type="date", required=True),
    ),
    title="Local Alerts",
    noun="alert",
    add_label="Add New Alert",
    empty_hint='Click "Add New Alert" to create one.',
    required_message="Please fill out all required fields (Message, Location, Date).",
    save_failed_message="Failed to save alert.",
    delete_failed_message="Failed to delete alert.",
    load_failed_message="Could not load local alerts. Please try refreshing the page.",
    delete_banner_message="Could not delete the alert. Please try again.",
    delete_confirm="Are you sure you want to delete this alert?",
    empty_title="No Local Alerts",
    loading_message="Loading alerts...",
)

EVENTS = ResourceSchema(
    key="events",
    api_path="/events",
    record_model=CommunityEvent,
    fields=(
        FieldSpec("title", "Event Title", required=True),
        FieldSpec("eventType", "Event Type (Optional)"),
        FieldSpec("description", "Description", input_type="textarea", required=True),
        FieldSpec("imageUrl", "Image URL (Optional)"),
        FieldSpec("date", "Date", input_type="date", required=True),
        FieldSpec("location", "Location", required=True),
    ),
    title="Community Events",
    noun="event",
    add_label="Add New Event",
    empty_hint='Click "Add New Event" to create one.',
    owner_field="organizer",
    required_message="Please fill out all required fields.",
    save_failed_message="Failed to save event.",
    delete_failed_message="Failed to delete event.",
    load_failed_message="Could not load events. Please try refreshing the page.",
    delete_banner_message="Could not delete the event. Please try again.",
    delete_confirm="Are you sure you want to delete this event?",
    empty_title="No Upcoming Events",
    loading_message="Loading events...",
)

RESOURCES: Tuple[ResourceSchema, ...] = (JOBS, ALERTS, EVENTS)


def get_schema(key: str) -> ResourceSchema:
    """Look up a schema by its UI key (hiring, alerts, events)."""
    for schema in RESOURCES:
        if schema.key == key:
            return schema
    raise KeyError(f"Unknown resource: {key}")
