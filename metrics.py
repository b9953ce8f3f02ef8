from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'flask_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'flask_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


LISTING_FILTER_COUNT = Counter(
    'flask_listing_filters_total',
    'Filters applied to movie listings',
    ['filter']
)

LISTING_RESULTS_COUNT = Histogram(
    'flask_listing_results',
    'Number of movies returned by a listing',
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000)
)


MOVIE_VIEWS = Counter(
    'flask_movie_views_total',
    'Total movie page views',
    ['movie_id']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
        except Exception as e:
            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=getattr(e, 'code', 500)
            ).inc()
            raise
        finally:
            REQUEST_DURATION.labels(
                method=f.__name__,
                endpoint=f.__name__
            ).observe(time.time() - start_time)

        if isinstance(response, tuple):
            status_code = response[1]
        else:
            status_code = getattr(response, 'status_code', 200)

        REQUEST_COUNT.labels(
            method=f.__name__,
            endpoint=f.__name__,
            http_status=status_code
        ).inc()

        return response

    return wrapper


def track_listing(result):
    """Record which filters a listing used and how many movies it returned"""
    if result.search_string:
        LISTING_FILTER_COUNT.labels(filter='title').inc()
    if result.movie_genre:
        LISTING_FILTER_COUNT.labels(filter='genre').inc()

    LISTING_RESULTS_COUNT.observe(len(result.movies))


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
