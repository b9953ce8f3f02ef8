from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from database import db
from database.movies_db import MovieRepository


def check_database():
    try:
        engine = db.engine

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        session = db.SessionLocal()
        try:
            repo = MovieRepository(session)
            movies_count = repo.count_movies()
            genres_count = len(repo.distinct_genres())
        finally:
            session.close()

        pool = engine.pool

        return {
            'status': 'healthy',
            'service': 'database',
            'message': f'Successfully connected to {engine.dialect.name}',
            'details': {
                'connection': {
                    'dialect': engine.dialect.name,
                    'driver': engine.dialect.driver,
                    'database': engine.url.database
                },
                'pool': {
                    'class': type(pool).__name__,
                    'status': pool.status()
                },
                'data': {
                    'movies_count': movies_count,
                    'genres_count': genres_count
                }
            }
        }

    except OperationalError as e:
        return {
            'status': 'unhealthy',
            'service': 'database',
            'message': f'Connection error: {str(e)}'
        }
    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'database',
            'message': f'Unexpected error: {str(e)}'
        }
