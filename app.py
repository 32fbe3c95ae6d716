#!/usr/bin/env python3
"""
VibeShare Web API

Flask app serving the prompt catalog.
"""

import os
from flask import Flask, jsonify

from config import WEB_PORT
from catalog import get_service
from routes import catalog_bp

app = Flask(__name__)
app.register_blueprint(catalog_bp)


@app.route("/")
def index():
    """Service summary."""
    service = get_service()
    entries = service.list_entries()
    return jsonify({
        "name": "VibeShare",
        "entries": len(entries),
        "enrichment": service.adapter.is_configured(),
    })


def main():
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    app.run(host="127.0.0.1", port=WEB_PORT, debug=debug, threaded=True)


if __name__ == "__main__":
    main()
