"""
api.errors - JSON error handlers for the API blueprint.
"""

import logging

from flask import jsonify

from api import api_bp
from import_engine import (
    InvalidPolicySelector, ParseError, StoreFailure, UnsupportedFormat,
)

logger = logging.getLogger(__name__)


@api_bp.errorhandler(InvalidPolicySelector)
def api_invalid_mode(exc):
    logger.warning("Rejected import: %s", exc)
    return jsonify({"error": "Invalid import mode"}), 400


@api_bp.errorhandler(UnsupportedFormat)
@api_bp.errorhandler(ParseError)
def api_unreadable_file(exc):
    logger.warning("Rejected import: %s", exc)
    return jsonify({"error": str(exc)}), 400


@api_bp.errorhandler(StoreFailure)
def api_store_failure(exc):
    logger.error("Import failed: %s", exc)
    return jsonify({"error": str(exc)}), 500


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(413)
def api_too_large(_e):
    return jsonify({"error": "file too large"}), 413


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
