"""Conversion of checkbox state into the scoring payload."""

from __future__ import annotations

from collections.abc import Mapping

from quiz_form.core.models import AnswerSelection


def transform_selection_to_payload(selected_answers: Mapping[int, bool]) -> list[AnswerSelection]:
    """Return one ``AnswerSelection`` per mapping entry, in ascending index order.

    Entries with ``checked=False`` are kept: an unchecked box the user
    touched is part of what was submitted. Indices never toggled are not
    added.
    """
    return [
        AnswerSelection(index=index, checked=bool(checked))
        for index, checked in sorted(selected_answers.items())
    ]
