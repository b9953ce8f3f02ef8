import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from database import db
from database.models import Movie
from listing import ListingHandler


SCENARIO_MOVIES = [
    ('Alien', 'Sci-Fi'),
    ('Amelie', 'Romance'),
    ('Avatar', 'Sci-Fi'),
]


@pytest.fixture
def engine():
    engine = db.configure_engine(
        'sqlite://',
        poolclass=StaticPool,
        connect_args={'check_same_thread': False}
    )
    db.create_schema()
    yield engine
    db.Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    session = db.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def scenario_movies(session):
    movies = [Movie(title=title, genre=genre) for title, genre in SCENARIO_MOVIES]
    session.add_all(movies)
    session.commit()
    return movies


@pytest.fixture
def client(engine):
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class FailingRepository:
    def distinct_genres(self):
        raise OperationalError("SELECT DISTINCT genre", {}, Exception("connection refused"))

    def find_movies(self, query):
        raise AssertionError("find_movies called after a failed genre query")


@pytest.fixture
def failing_handler():
    return ListingHandler(FailingRepository())
