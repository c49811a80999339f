import logging
import os
import sys

from flask import Flask, request, jsonify

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from phrase_compare.config import ComparisonConfig
from phrase_compare.engine import PhraseComparer
from phrase_compare.phrase_data import get_pair_by_id, get_random_pair
from phrase_compare.renderer import to_markup

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Stateless: safe to share between request threads
COMPARER = PhraseComparer(ComparisonConfig.from_env())

# Optional override of the bundled phrase pairs
PHRASE_DATA_FILE = os.getenv("PHRASE_DATA_FILE") or None


class InvalidRequest(ValueError):
    """Request body does not have the expected shape."""


# ============================================================================
# UTILITY
# ============================================================================
def read_json_body():
    """Return the JSON object posted with the request."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Expected a JSON object body")
    return data


def text_field(data, key):
    """Return a text field of the body; missing or null means empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidRequest(f"Field '{key}' must be a string")
    return value


@app.errorhandler(InvalidRequest)
def handle_bad_request(e):
    logger.warning("Rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"error": str(e)}), 400


# ============================================================================
# ROUTES - COMPARISON
# ============================================================================
@app.route('/api/analyze', methods=['POST'])
def analyze():
    """Full analysis of a submission against a reference phrase."""
    data = read_json_body()
    analysis = COMPARER.analyze(text_field(data, 'submission'), text_field(data, 'reference'))
    return jsonify(analysis.to_dict())


@app.route('/api/render', methods=['POST'])
def render():
    """Display diff as inline-styled markup, or as structured segments."""
    data = read_json_body()
    analysis = COMPARER.analyze(text_field(data, 'submission'), text_field(data, 'reference'))
    fmt = text_field(data, 'format') or 'markup'

    if fmt == 'segments':
        return jsonify({"segments": analysis.to_dict()["display_segments"]})
    if fmt != 'markup':
        raise InvalidRequest(f"Unknown format '{fmt}' (expected 'markup' or 'segments')")
    return jsonify({"markup": to_markup(analysis)})


@app.route('/api/accuracy', methods=['POST'])
def accuracy():
    """Legacy character-position accuracy."""
    data = read_json_body()
    score = COMPARER.accuracy(text_field(data, 'submission'), text_field(data, 'reference'))
    return jsonify({"accuracy": score})


# ============================================================================
# ROUTES - PHRASE PAIRS
# ============================================================================
@app.route('/api/phrases/random', methods=['GET'])
def get_phrase_task():
    pair = get_random_pair(path=PHRASE_DATA_FILE)
    if not pair:
        return jsonify({"error": "No phrases available"}), 404
    return jsonify({
        "pair_id": pair.id,
        "topic": pair.topic,
        "flawed_variant": pair.flawed_variant
    })


@app.route('/api/phrases/<pair_id>/check', methods=['POST'])
def check_phrase(pair_id):
    """Score a corrected phrase against the reference of a known pair."""
    pair = get_pair_by_id(pair_id, path=PHRASE_DATA_FILE)
    if not pair:
        return jsonify({"error": "Phrase not found"}), 404

    data = read_json_body()
    analysis = COMPARER.analyze(text_field(data, 'submission'), pair.reference)
    logger.info("Checked phrase %s: %d vote(s)", pair_id, analysis.total_votes)
    return jsonify({
        "pair_id": pair.id,
        "analysis": analysis.to_dict(),
        "markup": to_markup(analysis)
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host='0.0.0.0', port=5000)
