"""Composable movie query: predicates are collected first, executed once"""
from sqlalchemy import select

from database.models import Movie


class MovieQuery:
    """
    Unconstrained query over all movies that narrows as predicates are added.

    Empty or missing filter values are ignored, so callers can pass request
    parameters through untouched.
    """

    def __init__(self):
        self._predicates = []

    @property
    def predicates(self):
        return list(self._predicates)

    def title_contains(self, text):
        if text:
            # autoescape makes % and _ in user input match literally
            self._predicates.append(Movie.title.contains(text, autoescape=True))
        return self

    def genre_equals(self, genre):
        if genre:
            self._predicates.append(Movie.genre == genre)
        return self

    def statement(self):
        stmt = select(Movie)
        if self._predicates:
            stmt = stmt.where(*self._predicates)
        return stmt

    def __len__(self):
        return len(self._predicates)
