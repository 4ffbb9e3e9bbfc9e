"""Flask backend serving the Countdown letters solver as JSON."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `countdown.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, current_app, jsonify, request

from countdown.dictionary import Dictionary, load_default_dictionary
from countdown.display import group_by_length
from countdown.solver import InvalidLettersError, find_words, validate_letters

app = Flask(__name__)

# Longest letter bag accepted by /solve.
MAX_LETTERS = 26


def get_dictionary() -> Dictionary:
    """Dictionary shared by all requests, loaded without a length limit on first use."""
    dictionary = current_app.config.get("DICTIONARY")
    if dictionary is None:
        dictionary = load_default_dictionary(max_word_length=None, on_duplicate="ignore")
        current_app.config["DICTIONARY"] = dictionary
    return dictionary


def words_to_json(letters: str, words: set[str]) -> dict:
    """Serialize found words to the JSON format expected by the frontend."""
    return {
        "letters": letters,
        "count": len(words),
        "groups": [
            {"length": length, "words": group}
            for length, group in group_by_length(words)
        ],
    }


@app.route("/solve", methods=["POST"])
def solve_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        letters = validate_letters(str(data.get("letters", "")))
    except InvalidLettersError as e:
        return jsonify({"error": str(e)}), 400
    if len(letters) > MAX_LETTERS:
        return jsonify({"error": f"At most {MAX_LETTERS} letters may be provided"}), 400

    try:
        min_len = int(data.get("min_len", 3))
    except (TypeError, ValueError):
        return jsonify({"error": "min_len must be an integer"}), 400
    if min_len < 1:
        return jsonify({"error": "min_len must be at least 1"}), 400

    reuse = data.get("reuse", False)
    if not isinstance(reuse, bool):
        return jsonify({"error": "reuse must be true or false"}), 400

    words = find_words(letters, get_dictionary(), min_length=min_len, reuse_letters=reuse)
    return jsonify(words_to_json(letters, words))


@app.route("/stats")
def stats():
    dictionary = get_dictionary()
    return jsonify({
        "word_count": dictionary.word_count,
        "node_count": dictionary.node_count,
        "mem_usage": dictionary.mem_usage,
    })


if __name__ == "__main__":
    with app.app_context():
        print(f"Dictionary loaded: {get_dictionary().word_count:,} words")
    app.run(debug=True, host="0.0.0.0", port=8080)
