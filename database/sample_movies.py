import logging
from datetime import date
from decimal import Decimal

from database.movies_db import MovieRepository

logger = logging.getLogger(__name__)


SAMPLE_MOVIES = [
    {
        'title': 'When Harry Met Sally',
        'release_date': date(1989, 2, 12),
        'genre': 'Romantic Comedy',
        'price': Decimal('7.99'),
        'rating': 'R'
    },
    {
        'title': 'Ghostbusters',
        'release_date': date(1984, 3, 13),
        'genre': 'Comedy',
        'price': Decimal('8.99'),
        'rating': 'PG'
    },
    {
        'title': 'Ghostbusters 2',
        'release_date': date(1986, 2, 23),
        'genre': 'Comedy',
        'price': Decimal('9.99'),
        'rating': 'PG'
    },
    {
        'title': 'Rio Bravo',
        'release_date': date(1959, 4, 15),
        'genre': 'Western',
        'price': Decimal('3.99'),
        'rating': 'NA'
    },
    {
        'title': 'The Matrix',
        'release_date': date(1999, 3, 31),
        'genre': 'Sci-Fi',
        'price': Decimal('9.99'),
        'rating': 'R'
    },
    {
        'title': 'Alien',
        'release_date': date(1979, 5, 25),
        'genre': 'Sci-Fi',
        'price': Decimal('6.99'),
        'rating': 'R'
    },
    {
        'title': 'Amelie',
        'release_date': date(2001, 4, 25),
        'genre': 'Romance',
        'price': Decimal('5.99'),
        'rating': 'R'
    },
]


def seed_movies(session, movies=None):
    """
    Insert sample movies when the table is empty

    Returns:
        int: number of movies inserted (0 if data already present)
    """
    repo = MovieRepository(session)

    count = repo.count_movies()
    if count:
        logger.info("Movies table already has %d records", count)
        return 0

    movies = SAMPLE_MOVIES if movies is None else movies
    for movie_data in movies:
        repo.insert_movie(movie_data)

    logger.info("Inserted %d movies", len(movies))
    return len(movies)
