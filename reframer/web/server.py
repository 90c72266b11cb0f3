"""
Reframer Web API — Flask backend for the reframe screen.

Provides REST endpoints for:
- /api/rewrite — Rewrite a statement in the first person
- /api/reframe — Compose a reframe from emotions and a support statement
- /api/reframes — List/save/delete saved reframes
- /api/catalog — Suggested thoughts, emotions and grounding activities
"""

import os
from pathlib import Path
from typing import Optional, Union

from flask import Flask, jsonify, request
from flask_cors import CORS

from reframer.catalog import get_catalog
from reframer.core.context import RewriteRequest
from reframer.core.engine import RewriteError, get_engine
from reframer.core.logging import LogChannel, get_logger
from reframer.formatting.compose import reframe
from reframer.formatting.emotions import EmotionSelection
from reframer.ir.enums import TransformStatus
from reframer.store.reframes import ReframeStore

log = get_logger(LogChannel.SYSTEM)


def _emotions_from(data: dict) -> Optional[EmotionSelection]:
    """
    Accept emotions as a list of labels or a comma-separated string.

    Returns None for any other shape.
    """
    emotions = data.get("emotions") or []
    if isinstance(emotions, str):
        return EmotionSelection.from_input(emotions)
    if not isinstance(emotions, list) or not all(isinstance(e, str) for e in emotions):
        return None
    return EmotionSelection(labels=set(emotions))


def create_app(data_dir: Union[str, Path, None] = None) -> Flask:
    """Build the Flask app around a reframe store."""
    app = Flask(__name__)
    CORS(app)
    store = ReframeStore(data_dir)
    app.config["REFRAME_STORE"] = store

    @app.route('/api/rewrite', methods=['POST'])
    def rewrite_text():
        """Rewrite text; returns the full result with trace."""
        data = request.get_json(silent=True) or {}
        text = data.get('text')
        if not isinstance(text, str):
            return jsonify({'error': 'No text provided'}), 400

        result = get_engine().transform(RewriteRequest(text=text, ruleset=data.get('ruleset')))
        status = 200 if result.status == TransformStatus.SUCCESS else 500
        return jsonify(result.model_dump(mode='json')), status

    @app.route('/api/reframe', methods=['POST'])
    def compose_reframe():
        """Compose a reframe. An empty reframe means nothing to show."""
        data = request.get_json(silent=True) or {}
        support_text = data.get('support_text', '')
        if not isinstance(support_text, str):
            return jsonify({'error': 'support_text must be a string'}), 400

        emotions = _emotions_from(data)
        if emotions is None:
            return jsonify({'error': 'emotions must be a string or a list of strings'}), 400

        try:
            text = reframe(emotions, support_text, ruleset=data.get('ruleset'))
        except RewriteError as e:
            log.error("reframe_failed", error=str(e))
            return jsonify({
                'error': 'Rewrite failed',
                'diagnostics': [d.model_dump(mode='json') for d in e.diagnostics],
            }), 500

        saved = None
        if text and data.get('save'):
            saved = store.create(text).model_dump(mode='json')

        return jsonify({
            'reframe': text,
            'producible': bool(text),
            'emotions': list(emotions),
            'saved': saved,
        })

    @app.route('/api/reframes', methods=['GET'])
    def list_reframes():
        """Saved reframes, oldest first."""
        return jsonify([r.model_dump(mode='json') for r in store.list()])

    @app.route('/api/reframes', methods=['POST'])
    def save_reframe():
        """Save a reframe."""
        data = request.get_json(silent=True) or {}
        text = data.get('text')
        if not isinstance(text, str) or not text:
            return jsonify({'error': 'No text provided'}), 400

        record = store.create(text)
        return jsonify(record.model_dump(mode='json')), 201

    @app.route('/api/reframes/<item_id>', methods=['DELETE'])
    def delete_reframe(item_id):
        """Delete a saved reframe."""
        if not store.delete(item_id):
            return jsonify({'error': 'Not found'}), 404
        return jsonify({'deleted': True})

    @app.route('/api/catalog', methods=['GET'])
    def catalog():
        """Suggested prompts."""
        return jsonify(get_catalog().to_dict())

    return app


def run(port: Optional[int] = None) -> None:
    """Run the development server."""
    port = port or int(os.environ.get("REFRAMER_PORT", "5050"))
    log.info("web_starting", port=port)
    create_app().run(debug=False, port=port, use_reloader=False)


if __name__ == '__main__':
    run()
