"""Interactive hierarchical navigation over table buckets, namespaces and tables.

The navigator is a small state machine driven by an `InteractiveSelector`.
Each level's listing is fetched once per parent context and kept in
`NavigationState`, so moving back to a level already visited never calls the
service again. Choosing a new bucket or namespace clears the deeper caches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from s3t.core.lister import list_namespaces, list_table_buckets, list_tables
from s3t.core.models import Namespace, Table, TableBucket
from s3t.core.ports import TablesPort

logger = logging.getLogger(__name__)


class NavigationLevel(str, Enum):
    """Level of the hierarchy currently being browsed."""

    TABLE_BUCKET = "table-bucket"
    NAMESPACE = "namespace"
    TABLE = "table"


class NavigationAction(str, Enum):
    """
    Outcome of one selection prompt.

    Values:
        SELECT: An item was chosen.
        BACK: The user asked to return to the previous level.
        EXIT: The user aborted the session.
    """

    SELECT = "select"
    BACK = "back"
    EXIT = "exit"


@dataclass(frozen=True)
class SelectionResult:
    """Result of an interactive selection; `selected` is set for SELECT only."""

    action: NavigationAction
    selected: str | None = None


class InteractiveSelector(Protocol):
    """Interface for the interactive picker used by the navigator."""

    def select_with_filter(
        self, label: str, items: list[str], show_back: bool
    ) -> SelectionResult:
        """Present `items` and return what the user did."""
        ...


@dataclass
class NavigationState:
    """
    Mutable state of one browse session.

    A cache left as `None` has not been fetched for the current parent yet;
    an empty list means the parent has no children.
    """

    level: NavigationLevel = NavigationLevel.TABLE_BUCKET
    table_buckets: list[TableBucket] | None = None
    namespaces: list[Namespace] | None = None
    tables: list[Table] | None = None
    selected_bucket: str = ""
    selected_bucket_arn: str = ""
    selected_namespace: str = ""
    selected_table: Table | None = None


class Navigator:
    """Drive one interactive browse session over S3 Tables resources."""

    def __init__(
        self,
        port: TablesPort,
        selector: InteractiveSelector,
        *,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.port = port
        self.selector = selector
        self._notify = notify or logger.info
        self._state = NavigationState()

    @property
    def state(self) -> NavigationState:
        """Current navigation state (read back after `run` for display)."""
        return self._state

    def seed(self, bucket_name: str, bucket_arn: str, namespace: str = "") -> None:
        """Pre-select the parent context so a session can start below the top level."""
        self._state.selected_bucket = bucket_name
        self._state.selected_bucket_arn = bucket_arn
        self._state.selected_namespace = namespace

    def run(
        self, start_level: NavigationLevel = NavigationLevel.TABLE_BUCKET
    ) -> Table | None:
        """
        Run the session until the user exits or selects a table.

        Args:
            start_level: Level to start at. Starting below TABLE_BUCKET needs
                         the parent context supplied through `seed` first.

        Returns:
            The selected table, or None if the session ended without one.

        Raises:
            S3TablesError: On any listing failure; the session ends at once.
        """
        state = self._state
        state.level = start_level
        logger.debug("Navigation started at %s", start_level.value)

        while True:
            if state.level is NavigationLevel.TABLE_BUCKET:
                action = self._browse_table_buckets()
                if action is not NavigationAction.SELECT:
                    return None
                state.level = NavigationLevel.NAMESPACE

            elif state.level is NavigationLevel.NAMESPACE:
                action = self._browse_namespaces()
                if action is NavigationAction.EXIT:
                    return None
                if action is NavigationAction.BACK:
                    state.level = NavigationLevel.TABLE_BUCKET
                    continue
                state.level = NavigationLevel.TABLE

            else:
                action = self._browse_tables()
                if action is NavigationAction.EXIT:
                    return None
                if action is NavigationAction.BACK:
                    state.level = NavigationLevel.NAMESPACE
                    continue
                return state.selected_table

    def _browse_table_buckets(self) -> NavigationAction:
        state = self._state
        if state.table_buckets is None:
            state.table_buckets = list_table_buckets(self.port)

        if not state.table_buckets:
            self._notify("No table buckets found")
            return NavigationAction.EXIT

        names = [b.name for b in state.table_buckets]
        # Nothing above the bucket level, so no back entry.
        result = self.selector.select_with_filter("Select Table Bucket", names, False)
        if result.action is not NavigationAction.SELECT:
            return result.action

        bucket = next(
            (b for b in state.table_buckets if b.name == result.selected), None
        )
        if bucket is None:
            raise ValueError(f"Unknown table bucket selected: {result.selected!r}")

        state.selected_bucket = bucket.name
        state.selected_bucket_arn = bucket.arn
        state.namespaces = None
        state.tables = None
        return NavigationAction.SELECT

    def _browse_namespaces(self) -> NavigationAction:
        state = self._state
        if state.namespaces is None:
            state.namespaces = list_namespaces(self.port, state.selected_bucket_arn)

        if not state.namespaces:
            self._notify(
                f"No namespaces found in table bucket '{state.selected_bucket}'"
            )
            return NavigationAction.BACK

        names = [ns.name for ns in state.namespaces]
        result = self.selector.select_with_filter("Select Namespace", names, True)
        if result.action is not NavigationAction.SELECT:
            return result.action

        state.selected_namespace = result.selected or ""
        state.tables = None
        return NavigationAction.SELECT

    def _browse_tables(self) -> NavigationAction:
        state = self._state
        if state.tables is None:
            state.tables = list_tables(
                self.port, state.selected_bucket_arn, state.selected_namespace
            )

        if not state.tables:
            self._notify(f"No tables found in namespace '{state.selected_namespace}'")
            return NavigationAction.BACK

        names = [t.name for t in state.tables]
        result = self.selector.select_with_filter("Select Table", names, True)
        if result.action is not NavigationAction.SELECT:
            return result.action

        table = next((t for t in state.tables if t.name == result.selected), None)
        if table is None:
            raise ValueError(f"Unknown table selected: {result.selected!r}")
        state.selected_table = table
        return NavigationAction.SELECT
