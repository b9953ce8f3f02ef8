from flask import Flask, jsonify, request, render_template, redirect, url_for, abort
from config import Config
import logging

from services.database_check import check_database

from database.db import get_db, close_db
from database.movies_db import MovieRepository
from listing import ListingHandler, ListingRequest

from metrics import (
    metrics_endpoint, track_request, track_listing,
    MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(Config)
app.teardown_appcontext(close_db)


def listing_handler():
    return ListingHandler(MovieRepository(get_db()))


@app.route('/')
def home():
    return redirect(url_for('movies_list'))


@app.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-listing',
        'version': '1.0.0'
    }), 200


@app.route('/check/database')
def check_database_endpoint():
    result = check_database()
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@app.route('/movies')
@track_request
def movies_list():
    listing_request = ListingRequest.from_args(request.args)

    result = listing_handler().handle(listing_request)
    track_listing(result)

    return render_template('movies.html', listing=result)


@app.route('/api/movies')
@track_request
def api_movies():
    listing_request = ListingRequest.from_args(request.args)

    try:
        result = listing_handler().handle(listing_request)
    except Exception as e:
        logger.exception("Listing failed for %s", listing_request)
        return jsonify({'error': 'Listing failed', 'details': str(e)}), 500

    track_listing(result)

    return jsonify(result.to_dict())


@app.route('/movie/<int:movie_id>')
@track_request
def movie_detail(movie_id):
    movie = MovieRepository(get_db()).get_movie_by_id(movie_id)

    if movie is None:
        abort(404)

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()

    return render_template('movie_detail.html', movie=movie)


@app.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
