"""
api.routes_import - /api/import endpoint.

Accepts a CSV or XLSX file via multipart upload together with the
import mode selector.
"""

import logging

from flask import request, jsonify

import config
from api import api_bp
from db import get_session_factory
from import_engine import ImportPolicy, ImportSession
from services.company_service import SqlCompanyStore

logger = logging.getLogger(__name__)


@api_bp.route("/import", methods=["POST"])
async def api_import():
    """
    POST /api/import

    Multipart: field 'file' (.csv / .xlsx) and field 'importType' ("1".."5").
    The mode is checked before the file is read.
    """
    policy = ImportPolicy.from_selector(request.form.get(config.IMPORT_TYPE_FIELD))

    f = request.files.get(config.UPLOAD_FIELD)
    if not f or not f.filename:
        logger.warning("Rejected import: no file")
        return jsonify({"error": "no file in upload"}), 400

    store = SqlCompanyStore(get_session_factory())
    report = await ImportSession(store, policy).run(f.read(), f.filename)
    return jsonify(report.to_dict())
