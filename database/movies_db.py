import logging

from sqlalchemy import select, func

from database.models import Movie

logger = logging.getLogger(__name__)


class MovieRepository:
    """Read access to the movies table (plus the inserts used for seeding)"""

    def __init__(self, session):
        self.session = session

    def distinct_genres(self):
        """All genres present, each once, in the order the database returns them"""
        stmt = select(Movie.genre).distinct()
        return list(self.session.execute(stmt).scalars().all())

    def find_movies(self, query):
        """
        Execute a MovieQuery

        Args:
            query: database.query.MovieQuery

        Returns:
            list: Movie rows matching every predicate of the query
        """
        return list(self.session.execute(query.statement()).scalars().all())

    def get_movie_by_id(self, movie_id):
        return self.session.get(Movie, movie_id)

    def count_movies(self):
        stmt = select(func.count()).select_from(Movie)
        return self.session.execute(stmt).scalar_one()

    def insert_movie(self, movie_data):
        movie = Movie(
            title=movie_data['title'],
            genre=movie_data['genre'],
            release_date=movie_data.get('release_date'),
            price=movie_data.get('price'),
            rating=movie_data.get('rating'),
        )
        self.session.add(movie)
        self.session.commit()

        logger.debug("Inserted movie %s (%s)", movie.id, movie.title)
        return movie.id
