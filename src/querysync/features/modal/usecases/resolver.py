"""
Summary: Map URL query parameters to modal state and rewrite them on open and close.
Why: The URL is the only store of which entity modal is open, so reloads and tabs agree.
"""

from __future__ import annotations

from logging import Logger

from querysync.config.settings import MODAL_PARAM
from querysync.platform.logging import logger as app_logger

from ..domain.models import ModalMode, ModalState
from ..domain.query_string import delete_param, get_param, set_param
from .ports import UrlLocation


class ModalStateResolver:
    """Derive :class:`ModalState` from ``location`` on every read.

    Args:
        id_param: Query parameter carrying the entity id (e.g. ``"locationId"``).
        location: Where the query string lives.
        modal_param: Query parameter carrying the mode. Defaults to the
            configured ``modal_param`` (``"modal"``).
    """

    _id_param: str
    _modal_param: str
    _location: UrlLocation
    _logger: Logger

    def __init__(
        self,
        id_param: str,
        *,
        location: UrlLocation,
        modal_param: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        resolved_modal_param = modal_param or MODAL_PARAM
        if not id_param:
            raise ValueError("id_param must be a non-empty parameter name")
        if id_param == resolved_modal_param:
            raise ValueError("id_param and modal_param must differ")
        self._id_param = id_param
        self._modal_param = resolved_modal_param
        self._location = location
        self._logger = logger or app_logger.getChild("modal")

    @property
    def id_param(self) -> str:
        return self._id_param

    @property
    def modal_param(self) -> str:
        return self._modal_param

    def read(self) -> ModalState:
        search = self._location.search
        return ModalState(
            mode=ModalMode.parse(get_param(search, self._modal_param)),
            entity_id=get_param(search, self._id_param),
        )

    @property
    def modal(self) -> ModalMode | None:
        return self.read().mode

    @property
    def entity_id(self) -> str | None:
        return self.read().entity_id

    @property
    def is_open(self) -> bool:
        return self.read().is_open

    def open(self, entity_id: str | None, mode: ModalMode | str) -> ModalState:
        """Point the URL at ``mode`` for ``entity_id``; a falsy id removes the id parameter."""

        resolved_mode = ModalMode.from_user_input(mode)
        search = self._location.search
        if entity_id:
            search = set_param(search, self._id_param, entity_id)
        else:
            search = delete_param(search, self._id_param)
        search = set_param(search, self._modal_param, resolved_mode.value)
        self._write(search)

        self._logger.debug(
            "Opened %s modal for %s",
            resolved_mode.value,
            entity_id,
            extra={
                "cache_event": "modal.open",
                "modal_mode": resolved_mode.value,
                "entity_id": entity_id,
            },
        )
        return self.read()

    def close(self) -> ModalState:
        """Remove the id and mode parameters, leaving the rest of the URL untouched."""

        previous = self.read()
        self._write(delete_param(self._location.search, self._id_param, self._modal_param))
        if previous.mode is not None or previous.entity_id is not None:
            self._logger.debug(
                "Closed %s modal",
                previous.mode.value if previous.mode else "unknown",
                extra={
                    "cache_event": "modal.close",
                    "modal_mode": previous.mode.value if previous.mode else None,
                    "entity_id": previous.entity_id,
                },
            )
        return self.read()

    def _write(self, search: str) -> None:
        if search != self._location.search:
            self._location.search = search


__all__ = ["ModalStateResolver"]
