"""Flask web app - diary entry form and range query endpoint."""

import logging

from flask import Flask, jsonify, render_template, request

from .core.entries import InvalidInputError
from .service import DiaryService

logger = logging.getLogger(__name__)


def create_app(service: DiaryService) -> Flask:
    """Build the web app around a DiaryService."""
    app = Flask(__name__)

    @app.get("/")
    def diary_input():
        return render_template("diary_input.html", title="Diary")

    @app.post("/diary")
    def save_diary():
        if request.is_json:
            payload = request.get_json(silent=True)
            text = payload.get("text") if isinstance(payload, dict) else None
        else:
            text = request.form.get("text")

        try:
            saved = service.save(text)
        except InvalidInputError as e:
            return jsonify({"error": str(e)}), 400

        if not saved:
            sheet_name = service.repository.sheet_name
            return jsonify({"error": f"Sheet '{sheet_name}' not found. Nothing was saved."}), 503
        return jsonify({"status": "saved"}), 201

    @app.get("/diary")
    def get_between():
        since = request.args.get("since")
        until = request.args.get("until")
        if not since or not until:
            return jsonify({"error": "Both 'since' and 'until' are required."}), 400

        logger.debug(f"Range query {since}..{until}")
        return jsonify(service.get_between(since, until))

    return app
