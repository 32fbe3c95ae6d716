"""
Catalog API routes.

Thin layer over CatalogService: list/search, detail, create, enrich.
"""

from flask import jsonify, request
from pydantic import ValidationError as PydanticValidationError

import config
from catalog import (
    AnalysisParseError,
    EnrichmentRequestError,
    MissingCredential,
    PreconditionError,
    ValidationError,
    get_service,
)
from models import EntryInput
from . import catalog_bp


def _field_names(error: PydanticValidationError) -> list[str]:
    return sorted({str(err["loc"][0]) for err in error.errors() if err.get("loc")})


@catalog_bp.route("/api/me")
def current_user():
    """The mock signed-in user."""
    return jsonify(config.MOCK_USER.to_json_dict())


@catalog_bp.route("/api/entries")
def list_entries():
    """List entries, most recent first. ?q= filters by title, tag or author."""
    service = get_service()
    entries = service.list_entries()

    query = request.args.get("q", "")
    if query:
        entries = service.search_entries(entries, query)

    payload = {
        "entries": [e.to_json_dict() for e in entries],
        "count": len(entries),
    }
    if service.last_warning:
        payload["warning"] = str(service.last_warning)
    return jsonify(payload)


@catalog_bp.route("/api/entries/<entry_id>")
def get_entry(entry_id):
    """Get a single entry."""
    entry = get_service().get_entry(entry_id)
    if not entry:
        return jsonify({"error": "Not found"}), 404
    return jsonify(entry.to_json_dict())


@catalog_bp.route("/api/entries", methods=["POST"])
def create_entry():
    """Create an entry authored by the current user."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No data provided"}), 400

    try:
        entry_input = EntryInput.model_validate(data)
        entry = get_service().create_entry(entry_input, config.MOCK_USER)
    except PydanticValidationError as e:
        return jsonify({"error": "Invalid entry", "fields": _field_names(e)}), 400
    except ValidationError as e:
        return jsonify({"error": str(e), "fields": e.fields}), 400

    return jsonify(entry.to_json_dict()), 201


@catalog_bp.route("/api/enrich", methods=["POST"])
def enrich():
    """Suggest title, summary, tags and complexity for a prompt."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No data provided"}), 400

    prompt = data.get("prompt", "")
    if not isinstance(prompt, str):
        return jsonify({"error": "prompt must be a string"}), 400

    try:
        result = get_service().enrich(prompt)
    except PreconditionError as e:
        return jsonify({"error": str(e)}), 400
    except MissingCredential as e:
        return jsonify({"error": str(e)}), 503
    except (AnalysisParseError, EnrichmentRequestError) as e:
        return jsonify({"error": str(e)}), 502

    return jsonify(result.to_json_dict())
