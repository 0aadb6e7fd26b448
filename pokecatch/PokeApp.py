import logging
import os

from flask import Blueprint, Flask, current_app, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .auth import require_token
from .config import Config, get_config
from .di import Container, build_container
from .errors import CatchError, DuplicateEmail
from .logging_config import setup_logging
from .schemas import Credentials, CatchRequest, load

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__)
protected = Blueprint('protected', __name__, url_prefix='/protected')
protected.before_request(require_token)


def _container() -> Container:
    return current_app.extensions['pokecatch']


def _json_body():
    return request.get_json(force=True, silent=True)


@api.route('/ping')
def ping():
    return jsonify(message="pong")


@api.route('/register', methods=['POST'])
def register():
    body = load(Credentials, _json_body(), 'email and password are required')
    try:
        _container().credentials.register(body.email, body.password)
    except DuplicateEmail as e:
        logger.info('registration refused: email already exists')
        return jsonify(message=e.message), _container().cfg.DUPLICATE_EMAIL_STATUS
    return jsonify(message=f'{body.email} created successfully')


@api.route('/login', methods=['POST'])
def login():
    body = load(Credentials, _json_body(), 'email and password are required')
    c = _container()
    user_id = c.credentials.verify(body.email, body.password)
    return jsonify(message='Login successful', token=c.tokens.issue(user_id))


@api.route('/pokemon/<string:name>')
def pokemon_lookup(name):
    return jsonify(data=_container().species_lookup.lookup(name))


@protected.route('/catch', methods=['POST'])
def catch():
    body = load(CatchRequest, _json_body(), 'Pokemon name is required')
    record = _container().ledger.catch(g.user_id, body.name)
    return jsonify(message='Pokemon caught', data=record.to_dict())


@protected.route('/release/<string:record_id>', methods=['DELETE'])
def release(record_id):
    _container().ledger.release(g.user_id, record_id)
    return jsonify(message='Pokemon is released')


@protected.route('/caught')
def caught():
    records = _container().ledger.list_caught(g.user_id)
    if not records:
        return jsonify(message='No Pokémon found.')
    return jsonify(data=[r.to_dict() for r in records])


def _handle_catch_error(e: CatchError):
    if e.status_code >= 500:
        logger.error('%s on %s %s: %s', type(e).__name__, request.method, request.path, e.message, exc_info=e)
    return jsonify(message=e.message), e.status_code


def _handle_http_error(e: HTTPException):
    return jsonify(message=e.description), e.code


def _handle_unexpected(e: Exception):
    logger.exception('unhandled error on %s %s', request.method, request.path)
    return jsonify(message='Internal Server Error'), 500


def create_app(config: Config = None, container: Container = None) -> Flask:
    """Build the Flask app around an explicitly constructed container.

    Tests pass their own `container` (in-memory database, fake PokeAPI);
    otherwise one is built from `config` or the environment.
    """
    cfg = container.cfg if container is not None else (config or get_config())
    setup_logging(cfg.LOG_LEVEL)
    if cfg.DATABASE_URL.startswith('sqlite:///') and cfg.DATA_DIR in cfg.DATABASE_URL:
        os.makedirs(cfg.DATA_DIR, exist_ok=True)
    if container is None:
        container = build_container(cfg)

    app = Flask(__name__)
    app.json.ensure_ascii = False
    CORS(app)
    app.extensions['pokecatch'] = container

    app.register_blueprint(api)
    app.register_blueprint(protected)

    app.register_error_handler(CatchError, _handle_catch_error)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected)
    return app


if __name__ == '__main__':
    create_app().run(debug=True)
