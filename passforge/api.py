import logging

from flask import Flask, jsonify, request

from passforge.charsets import parse_classes, select_classes, CharacterClass
from passforge.config import load_config
from passforge.errors import PassforgeError
from passforge.generator import generate
from passforge.scorer import describe

logger = logging.getLogger(__name__)

app = Flask(__name__)

_FLAGS = (
    ("upper", CharacterClass.UPPERCASE),
    ("lower", CharacterClass.LOWERCASE),
    ("digits", CharacterClass.NUMBER),
    ("symbols", CharacterClass.SYMBOL),
)


class BadRequest(PassforgeError):
    pass


@app.errorhandler(PassforgeError)
def handle_passforge_error(e):
    logger.info("rejected request: %s", e)
    return jsonify({'error': str(e)}), 400


def _json_body() -> dict:
    if not request.get_data():
        return {}
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise BadRequest("request body must be valid JSON")
    if not isinstance(data, dict):
        raise BadRequest("request body must be a JSON object")
    return data


@app.route('/')
def home():
    return jsonify({
        "message": "passforge API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    cfg = load_config()
    length = data.get('length', cfg['default_length'])
    defaults = parse_classes(cfg['default_classes'])
    options = {}
    for key, cls in _FLAGS:
        value = data.get(key, cls in defaults)
        if not isinstance(value, bool):
            raise BadRequest(f"'{key}' must be true or false")
        options[key] = value
    password = generate(length, select_classes(**options))
    return jsonify({'password': password, 'strength': describe(password)})

@app.route('/score', methods=['POST'])
def score_route():
    data = _json_body()
    password = data.get('password', '')
    if not isinstance(password, str):
        raise BadRequest("'password' must be a string")
    return jsonify(describe(password))

if __name__ == "__main__":
    app.run(debug=True)
