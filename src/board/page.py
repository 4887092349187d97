"""
Page controller for one CRUD view.

Holds the current ListState and FormState of a resource and wires the pure
transitions to the remote client: fetch on mount, refetch after every
successful mutation, banner on failure.
"""

import logging
from typing import Any, Callable, Optional

from src.board import forms
from src.board import list_view
from src.board.client import ResourceClient
from src.board.errors import BoardError
from src.board.forms import FormState
from src.board.identity import OwnerProvider, PlaceholderOwnerProvider
from src.board.list_view import ListState
from src.board.records import BoardRecord
from src.board.resources import ResourceSchema

logger = logging.getLogger(__name__)


class ResourcePage:
    """
    One resource's list + form, driven through explicit state values.

    Args:
        schema: Resource schema
        client: Remote client for the resource
        owners: Identity collaborator for the owner field
        on_list_change: Optional callback invoked with every new ListState
    """

    def __init__(
        self,
        schema: ResourceSchema,
        client: ResourceClient,
        owners: OwnerProvider,
        on_list_change: Optional[Callable[[ListState], None]] = None,
    ):
        self.schema = schema
        self.client = client
        self.owners = owners
        self.on_list_change = on_list_change
        self.list_state = ListState()
        self.form_state = FormState()

    @classmethod
    def from_config(cls, schema: ResourceSchema, **kwargs: Any) -> "ResourcePage":
        from src.common.config import Config

        client = ResourceClient(schema, Config.COMMUNITY_API_URL, timeout=Config.COMMUNITY_API_TIMEOUT)
        return cls(schema, client, PlaceholderOwnerProvider.from_config(), **kwargs)

    def _set_list(self, state: ListState) -> None:
        self.list_state = state
        if self.on_list_change:
            self.on_list_change(state)

    # ===== List =====

    def refresh(self) -> ListState:
        """Fetch the collection; Loading then Loaded or Failed."""
        self._set_list(list_view.begin_loading(self.list_state))
        try:
            items = self.client.list()
        except BoardError as e:
            logger.error(f"Failed to fetch {self.schema.api_path}: {e.message}")
            self._set_list(list_view.load_failed(self.list_state, self.schema.load_failed_message))
        else:
            self._set_list(list_view.load_succeeded(self.list_state, items))
        return self.list_state

    def delete(self, record_id: str) -> bool:
        """Delete a record, then refetch. On failure the list is left as displayed."""
        try:
            self.client.remove(record_id)
        except BoardError as e:
            logger.error(f"Delete {self.schema.noun} error: {e.message}")
            self._set_list(list_view.delete_failed(self.list_state, self.schema.delete_banner_message))
            return False
        self.refresh()
        return True

    def dismiss_error(self) -> None:
        self._set_list(list_view.dismiss_error(self.list_state))

    # ===== Form =====

    def open_for_create(self) -> FormState:
        self.form_state = forms.open_for_create(self.schema)
        return self.form_state

    def open_for_edit(self, record: BoardRecord) -> FormState:
        self.form_state = forms.open_for_edit(self.schema, record)
        return self.form_state

    def update_field(self, name: str, value: Any) -> FormState:
        self.form_state = forms.update_field(self.schema, self.form_state, name, value)
        return self.form_state

    def close_form(self) -> None:
        self.form_state = forms.close(self.form_state)

    def submit(self) -> bool:
        """Validate and save the open form; refetch the list on success."""
        outcome = forms.submit(
            self.schema,
            self.form_state,
            self.client,
            owner_id=self.owners.owner_id(self.schema),
        )
        self.form_state = outcome.state
        if outcome.saved:
            self.refresh()
        return outcome.saved
