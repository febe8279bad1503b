"""Terminal UI utilities for s3t."""

from __future__ import annotations

import questionary

from s3t.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from s3t.core.navigator import NavigationAction, SelectionResult

BACK_OPTION = ".. (Back)"

_BACK = object()


class QuestionarySelector:
    """Single-choice picker with type-to-filter and an optional back entry.

    Typing narrows the list to items containing the typed text
    (case-insensitive). Ctrl+C ends the session.
    """

    def select_with_filter(
        self, label: str, items: list[str], show_back: bool
    ) -> SelectionResult:
        """Display a filterable select prompt.

        Args:
            label: Prompt message.
            items: Names to choose from; must not be empty.
            show_back: Prepend a `.. (Back)` entry.

        Returns:
            SELECT with the chosen name, BACK, or EXIT on Ctrl+C.
        """
        if not items:
            raise ValueError("no items to select")

        choices = [questionary.Choice(title=item, value=item) for item in items]
        if show_back:
            choices.insert(0, questionary.Choice(title=BACK_OPTION, value=_BACK))

        answer = questionary.select(
            label,
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            pointer="❯",
            instruction="(type to filter, Enter to select, Ctrl+C to exit)",
            use_search_filter=True,
            use_jk_keys=False,
        ).ask()

        if answer is None:
            return SelectionResult(action=NavigationAction.EXIT)
        if answer is _BACK:
            return SelectionResult(action=NavigationAction.BACK)
        return SelectionResult(action=NavigationAction.SELECT, selected=answer)
