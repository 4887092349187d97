"""
Resource CRUD Blueprints.

One blueprint per board resource, all built by `create_resource_blueprint`.
Each request builds a fresh ResourcePage; nothing is cached between
requests, so every list the user sees comes straight from the API.

Routes (prefix /hiring, /alerts or /events):
- GET  ""              page shell in the loading state; the list loads via /list
- GET  /list           HTMX partial: refetched list
- GET  /new            HTMX partial: blank form
- POST /edit           HTMX partial: form pre-filled from the record JSON
- POST /save           create or update; form with message, or refreshed list
- POST /<id>/delete    delete; refreshed list, or only an error banner
"""

import json
import logging
from typing import Callable, Optional

from flask import Blueprint, make_response, render_template, request

from src.board import list_view
from src.board.errors import ParseError
from src.board.forms import FormState
from src.board.list_view import ListState
from src.board.page import ResourcePage
from src.board.records import parse_record
from src.board.resources import ResourceSchema

logger = logging.getLogger(__name__)

PageFactory = Callable[[ResourceSchema], ResourcePage]


def _htmx_retarget(response, target: str):
    """Point an HTMX response at a different element than the trigger's."""
    response.headers["HX-Retarget"] = target
    response.headers["HX-Reswap"] = "innerHTML"
    return response


def _form_state_from_request(schema: ResourceSchema) -> FormState:
    """Rebuild the submitted draft. `_id` is present only when editing."""
    draft = {name: request.form.get(name, "") for name in schema.field_names}
    editing_id = request.form.get("_id") or None
    return FormState(draft=draft, editing_id=editing_id, is_open=True)


def create_resource_blueprint(
    schema: ResourceSchema, page_factory: Optional[PageFactory] = None
) -> Blueprint:
    """
    Build the CRUD blueprint for one resource.

    Args:
        schema: Resource schema
        page_factory: Builds the per-request ResourcePage (defaults to config-backed)

    Returns:
        Blueprint registered under /<schema.key>
    """
    bp = Blueprint(schema.key, __name__, url_prefix=f"/{schema.key}")
    make_page = page_factory or ResourcePage.from_config

    def render_list(page: ResourcePage, **extra):
        # Every refetched list also clears a stale page-level banner
        return render_template(
            "partials/list.html", schema=schema, list_state=page.list_state, clear_banner=True, **extra
        )

    @bp.route("", methods=["GET"])
    def view_page():
        """Render the page shell in the loading state; the list loads itself via /list."""
        loading = list_view.begin_loading(ListState())
        return render_template("resource.html", schema=schema, list_state=loading)

    @bp.route("/list", methods=["GET"])
    def list_partial():
        """HTMX partial: refetch and return the list section."""
        page = make_page(schema)
        page.refresh()
        return render_list(page)

    @bp.route("/new", methods=["GET"])
    def new_form():
        """HTMX partial: blank form in create mode."""
        page = make_page(schema)
        return render_template("partials/form.html", schema=schema, form=page.open_for_create())

    @bp.route("/edit", methods=["POST"])
    def edit_form():
        """
        HTMX partial: form pre-filled from a displayed record.

        Form Data:
            record: The record as JSON, exactly as it was rendered in the list
        """
        page = make_page(schema)
        try:
            record = parse_record(schema.record_model, json.loads(request.form.get("record", "")))
        except (ValueError, ParseError) as e:
            logger.warning(f"Rejected {schema.noun} edit payload: {e}")
            return render_template(
                "partials/banner.html", message=f"Could not open this {schema.noun} for editing."
            ), 400
        return render_template("partials/form.html", schema=schema, form=page.open_for_edit(record))

    @bp.route("/save", methods=["POST"])
    def save():
        """Submit the form. Success swaps in the refetched list and closes the modal."""
        page = make_page(schema)
        page.form_state = _form_state_from_request(schema)

        if not page.submit():
            return render_template("partials/form.html", schema=schema, form=page.form_state)

        response = make_response(render_list(page, close_modal=True))
        return _htmx_retarget(response, "#list-section")

    @bp.route("/<record_id>/delete", methods=["POST"])
    def delete(record_id: str):
        """Delete a record. Failure only shows a banner; the displayed list is untouched."""
        page = make_page(schema)
        if page.delete(record_id):
            return render_list(page)

        response = make_response(
            render_template("partials/banner.html", message=page.list_state.error)
        )
        return _htmx_retarget(response, "#banner")

    return bp
