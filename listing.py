"""Movie listing: title search + genre filter + genre dropdown"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from database.query import MovieQuery

logger = logging.getLogger(__name__)

SEARCH_PARAM = 'SearchString'
GENRE_PARAM = 'MovieGenre'


@dataclass
class ListingRequest:
    search_string: Optional[str] = None
    movie_genre: Optional[str] = None

    @classmethod
    def from_args(cls, args):
        """Build from a query-string mapping (e.g. flask.request.args)"""
        return cls(
            search_string=args.get(SEARCH_PARAM),
            movie_genre=args.get(GENRE_PARAM),
        )


@dataclass
class ListingResult:
    genres: List[str] = field(default_factory=list)
    movies: list = field(default_factory=list)
    search_string: Optional[str] = None
    movie_genre: Optional[str] = None

    def to_dict(self):
        return {
            'genres': list(self.genres),
            'movies': [movie.to_dict() for movie in self.movies],
            'count': len(self.movies),
        }


class ListingHandler:
    """
    Lists movies for the index page.

    The genre dropdown is always built from the whole table, not from the
    filtered movies.
    """

    def __init__(self, repository):
        self.repository = repository

    def list(self, search_string=None, movie_genre=None):
        query = MovieQuery()
        query.title_contains(search_string).genre_equals(movie_genre)

        genres = self.repository.distinct_genres()
        movies = self.repository.find_movies(query)

        logger.debug(
            "Listing search=%r genre=%r: %d predicates, %d movies, %d genres",
            search_string, movie_genre, len(query), len(movies), len(genres)
        )

        return ListingResult(
            genres=genres,
            movies=movies,
            search_string=search_string,
            movie_genre=movie_genre,
        )

    def handle(self, request):
        return self.list(request.search_string, request.movie_genre)
