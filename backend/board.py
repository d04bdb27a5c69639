"""Board model: categories, clues and the per-clue reveal state machine.

A board looks like this:

    Board([
        Category("Math", [Clue("2+2", "4"), Clue("1+1", "2"), ...]),
        Category("Literature", [Clue("Hamlet author", "Shakespeare"), ...]),
        ...
    ])

Cells are addressed as (category_index, clue_index) and rendered with the
id "<category_index>-<clue_index>".
"""

import enum
from dataclasses import dataclass, field

from errors import CellNotFound

NUM_CATEGORIES = 6
NUM_CLUES_PER_CATEGORY = 5
PLACEHOLDER = "?"


class RevealState(enum.Enum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    question: str
    answer: str
    state: RevealState = RevealState.HIDDEN

    def reveal(self):
        """Advance one step: hidden -> question -> answer. Answer is terminal."""
        if self.state is RevealState.HIDDEN:
            self.state = RevealState.QUESTION
        elif self.state is RevealState.QUESTION:
            self.state = RevealState.ANSWER
        return self.state

    @property
    def text(self):
        if self.state is RevealState.QUESTION:
            return self.question
        if self.state is RevealState.ANSWER:
            return self.answer
        return PLACEHOLDER

    @property
    def css_class(self):
        # Hidden cells carry no marker
        if self.state is RevealState.HIDDEN:
            return ""
        return self.state.value


@dataclass
class Category:
    title: str
    clues: list = field(default_factory=list)


def cell_id(category_index, clue_index):
    return f"{category_index}-{clue_index}"


def parse_cell_id(value):
    """Split a "<category>-<clue>" cell id into two ints."""
    parts = value.split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise CellNotFound(f"Malformed cell id: {value!r}")
    return int(parts[0]), int(parts[1])


class Board:
    """An ordered set of categories, each a column of clues."""

    def __init__(self, categories):
        self.categories = list(categories)

    def clue_at(self, category_index, clue_index):
        if not 0 <= category_index < len(self.categories):
            raise CellNotFound(f"No category {category_index}")
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            raise CellNotFound(f"No clue {clue_index} in category {category_index}")
        return self.categories[category_index].clues[clue_index]

    def reveal(self, category_index, clue_index):
        clue = self.clue_at(category_index, clue_index)
        clue.reveal()
        return clue

    @property
    def titles(self):
        return [c.title for c in self.categories]

    def rows(self):
        """Yield one row per clue index: [(cell_id, clue), ...] across categories."""
        depth = min((len(c.clues) for c in self.categories), default=0)
        for clue_index in range(depth):
            yield [
                (cell_id(cat_index, clue_index), cat.clues[clue_index])
                for cat_index, cat in enumerate(self.categories)
            ]

    def to_dict(self):
        return [
            {
                "title": cat.title,
                "cells": [
                    cell_to_dict(cat_index, clue_index, clue)
                    for clue_index, clue in enumerate(cat.clues)
                ],
            }
            for cat_index, cat in enumerate(self.categories)
        ]


def cell_to_dict(category_index, clue_index, clue):
    return {
        "id": cell_id(category_index, clue_index),
        "text": clue.text,
        "state": clue.state.value,
        "css_class": clue.css_class,
    }
