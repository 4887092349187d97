"""
Form State Controller.

A FormState is an immutable value: the draft field values, the id of the
record being edited (None when creating) and the message shown above the
form. Every operation returns a new state. `submit` is the only one that
touches the network, and only after the required-field check passes.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple, Union

from src.board.client import ResourceClient
from src.board.errors import BoardError, ValidationFailure
from src.board.records import BoardRecord, to_form_date
from src.board.resources import ResourceSchema

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class FormState:
    """State of one resource's add/edit form."""
    draft: Dict[str, Any] = field(default_factory=dict)
    editing_id: Optional[str] = None
    message: Optional[str] = None
    is_open: bool = False

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of a submit: the next form state and whether the save landed."""
    state: FormState
    saved: bool = False
    record: Optional[BoardRecord] = None


def empty_draft(schema: ResourceSchema) -> Dict[str, Any]:
    return {name: "" for name in schema.field_names}


def open_for_create(schema: ResourceSchema) -> FormState:
    """Blank form in create mode."""
    return FormState(draft=empty_draft(schema), is_open=True)


def open_for_edit(schema: ResourceSchema, record: BoardRecord) -> FormState:
    """Form pre-filled from `record`, with dates as YYYY-MM-DD."""
    draft = empty_draft(schema)
    for name in schema.field_names:
        value = record.get(name)
        # A stored 0 is shown blank, so an untouched form omits it again
        if value is None or (name in schema.numeric_fields and not value):
            continue
        if name in schema.date_fields:
            draft[name] = to_form_date(value)
        else:
            draft[name] = value
    return FormState(draft=draft, editing_id=record.id, is_open=True)


def update_field(schema: ResourceSchema, state: FormState, name: str, value: Any) -> FormState:
    """Set one draft field. No per-field validation happens here."""
    if name not in schema.field_names:
        raise KeyError(f"{schema.noun} form has no field {name!r}")
    draft = dict(state.draft)
    draft[name] = value
    return replace(state, draft=draft)


def close(state: FormState) -> FormState:
    return FormState()


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def missing_fields(schema: ResourceSchema, draft: Dict[str, Any]) -> Tuple[str, ...]:
    """Required fields that are empty in `draft`, in form order."""
    return tuple(name for name in schema.required_fields if _is_empty(draft.get(name)))


def check_required(schema: ResourceSchema, draft: Dict[str, Any]) -> None:
    """Raise ValidationFailure when any required field is empty."""
    missing = missing_fields(schema, draft)
    if missing:
        raise ValidationFailure(schema.required_message, missing)


def validate(schema: ResourceSchema, state: FormState) -> FormState:
    """Required-field check as a transition: failures land in `state.message`."""
    try:
        check_required(schema, state.draft)
    except ValidationFailure as e:
        return replace(state, message=e.message)
    return replace(state, message=None)


def coerce_number(name: str, value: Any) -> Optional[Union[int, float]]:
    """
    Coerce a numeric form value.

    Empty values become None so the field is left out of the payload.
    """
    if _is_empty(value):
        return None
    if isinstance(value, bool):
        raise ValidationFailure(f"{name} must be a number.", (name,))
    if isinstance(value, (int, float)):
        return int(value) if isinstance(value, float) and value.is_integer() else value
    text = str(value).strip()
    if _INT_PATTERN.match(text):
        return int(text)
    try:
        number = float(text)
    except ValueError:
        raise ValidationFailure(f"{name} must be a number.", (name,))
    return int(number) if number.is_integer() else number


def build_payload(
    schema: ResourceSchema, draft: Dict[str, Any], owner_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the outgoing JSON body from a draft.

    All draft fields are sent as-is except numeric ones, which are coerced
    and dropped when empty. The owner field is added when the resource has one.
    """
    payload: Dict[str, Any] = {}
    for name in schema.field_names:
        value = draft.get(name, "")
        if name in schema.numeric_fields:
            number = coerce_number(name, value)
            if number is not None:
                payload[name] = number
            continue
        payload[name] = value

    if schema.owner_field:
        if not owner_id:
            raise ValidationFailure(
                f"No {schema.owner_field} identity is available to save this {schema.noun}.",
                (schema.owner_field,),
            )
        payload[schema.owner_field] = owner_id
    return payload


def submit(
    schema: ResourceSchema,
    state: FormState,
    client: ResourceClient,
    owner_id: Optional[str] = None,
) -> SubmitOutcome:
    """
    Validate the draft and save it.

    Returns:
        SubmitOutcome with a closed form on success. On validation or remote
        failure the form stays open, draft and editing id untouched, with the
        failure message set.
    """
    try:
        check_required(schema, state.draft)
        payload = build_payload(schema, state.draft, owner_id)
    except ValidationFailure as e:
        logger.debug(f"{schema.noun} form rejected locally: missing={e.missing}")
        return SubmitOutcome(state=replace(state, message=e.message))

    try:
        if state.editing_id is not None:
            record = client.update(state.editing_id, payload)
        else:
            record = client.create(payload)
    except BoardError as e:
        logger.error(f"Save {schema.noun} error: {e.message}")
        return SubmitOutcome(state=replace(state, message=e.message))

    saved_id = record.id if record is not None else state.editing_id
    logger.info(
        f"Saved {schema.noun} {saved_id or '(id not returned)'} "
        f"({'update' if state.editing_id is not None else 'create'})"
    )
    return SubmitOutcome(state=close(state), saved=True, record=record)
