"""Questionary / prompt_toolkit theme for s3t.

Questionary uses prompt_toolkit under the hood. This module defines a single
central style so every interactive prompt looks consistent.
"""

from __future__ import annotations

from prompt_toolkit.styles import Style

QUESTIONARY_STYLE_SELECT = Style.from_dict(
    {
        "qmark": "bold ansicyan",
        "question": "bold ansibrightcyan",
        "answer": "bold ansibrightgreen",
        "pointer": "bold ansibrightgreen",
        "highlighted": "bold ansibrightgreen",
        "selected": "bold ansibrightgreen",
        "separator": "ansibrightblack",
        "instruction": "ansibrightblack",
        "search_text": "bold ansiyellow",
        "search_none": "ansibrightblack",
        "error": "bold ansired",
        "disabled": "ansibrightblack",
    }
)
