# Flask server — REST API over the lexicon
#
# endpoints:
#   GET  /api/health          — is the reference data loaded?
#   GET  /api/resolve?word=   — one word's frequency and affect record
#   GET  /api/search?q=       — ranked prefix/substring matches
#   POST /api/analyze         — bulk word list + coverage summary

import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from lexicon_pipeline import AFFECT_PATH, FREQUENCY_PATH, Lexicon
from lexicon_pipeline.config import API_HOST, API_PORT, SEARCH_RESULT_CAP
from lexicon_pipeline.errors import DataUnavailableError, ReferenceDataError
from lexicon_pipeline.evaluation import coverage_summary

log = logging.getLogger(__name__)


def create_app(lexicon: Lexicon) -> Flask:
    app = Flask(__name__)
    CORS(app)

    @app.errorhandler(DataUnavailableError)
    def unavailable(exc):
        return jsonify({"error": "data unavailable", "detail": str(exc)}), 503

    @app.get("/api/health")
    def health():
        """Report whether both reference tables are loaded."""
        if not lexicon.is_loaded:
            return jsonify({"status": "unavailable"}), 503
        payload = {"status": "ok", "words": len(lexicon.index)}
        report = lexicon.report
        if report is not None:
            payload["frequency_rows"] = report.frequency.rows
            payload["affect_rows"]    = report.affect.rows
            payload["skipped_rows"]   = report.frequency.skipped + report.affect.skipped
        return jsonify(payload)

    @app.get("/api/resolve")
    def resolve():
        word = (request.args.get("word") or "").strip()
        if not word:
            return jsonify({"error": "word must not be empty"}), 400
        return jsonify(lexicon.resolve(word).to_dict())

    @app.get("/api/search")
    def search():
        """
        Ranked search.

        query string:
            q      — search text (required)
            limit  — result cap (default: SEARCH_RESULT_CAP)
        """
        query = (request.args.get("q") or "").strip()
        if not query:
            return jsonify({"error": "q must not be empty"}), 400
        try:
            limit = int(request.args.get("limit", SEARCH_RESULT_CAP))
        except ValueError:
            return jsonify({"error": "limit must be an integer"}), 400

        results = lexicon.search(query, limit=limit)
        return jsonify({
            "query":   query,
            "count":   len(results),
            "results": [e.to_dict() for e in results],
        })

    @app.post("/api/analyze")
    def analyze():
        """
        Bulk analysis.

        body (JSON):
            words — list of words, or
            text  — one pasted block (split on newlines, commas, tabs, ...)
            fast  — use the lean key set (default: true)
        """
        body = request.get_json(force=True, silent=True) or {}
        words = body.get("words")
        if words is None:
            words = body.get("text") or ""
        if not isinstance(words, (list, str)):
            return jsonify({"error": "words must be a list or text a string"}), 400

        fast = body.get("fast", True)
        if not isinstance(fast, bool):
            return jsonify({"error": "fast must be true or false"}), 400

        entries = lexicon.analyze(words, fast=fast)
        return jsonify({
            "summary": coverage_summary(entries),
            "results": [e.to_dict() for e in entries],
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    lexicon = Lexicon()
    print("Loading reference data...")
    try:
        lexicon.load(FREQUENCY_PATH, AFFECT_PATH)
        print("✅ Server ready.\n")
    except ReferenceDataError as exc:
        log.error("Serving without data: %s", exc)
    create_app(lexicon).run(host=API_HOST, port=API_PORT, debug=False)
