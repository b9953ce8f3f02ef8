import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.query import MovieQuery


def test_new_query_is_unconstrained():
    query = MovieQuery()

    assert query.predicates == []
    assert 'WHERE' not in str(query.statement())


def test_empty_values_are_ignored():
    query = MovieQuery().title_contains('').genre_equals('')
    query.title_contains(None).genre_equals(None)

    assert len(query) == 0
    assert 'WHERE' not in str(query.statement())


def test_predicates_are_appended_in_order():
    query = MovieQuery().title_contains('Ghost').genre_equals('Comedy')

    assert len(query) == 2
    sql = str(query.statement())
    assert 'WHERE' in sql
    assert 'LIKE' in sql
    assert 'movies.genre =' in sql
    assert ' AND ' in sql


def test_title_predicate_escapes_wildcards():
    sql = str(MovieQuery().title_contains('100%').statement())

    assert 'ESCAPE' in sql


def test_predicates_returns_copy():
    query = MovieQuery().genre_equals('Western')

    query.predicates.clear()

    assert len(query) == 1
