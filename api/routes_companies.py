"""
api.routes_companies - /api/companies listing.
"""

import logging

from flask import request, jsonify

import config
from api import api_bp
from db import get_session
from services.company_service import CompanyService

logger = logging.getLogger(__name__)


@api_bp.route("/companies")
async def list_companies():
    """
    GET /api/companies?page=1

    Up to config.PAGE_SIZE companies per page, in insertion order.
    A missing, non-numeric or < 1 page means page 1.
    """
    page = request.args.get("page", 1, type=int) or 1
    page = max(page, 1)

    try:
        async with get_session() as session:
            companies = await CompanyService.list_page(session, page, config.PAGE_SIZE)
    except Exception:
        logger.exception("Error fetching companies")
        return jsonify({"status": "error", "message": "Server Error"}), 500

    return jsonify({
        "status": "success",
        "data": [c.to_dict() for c in companies],
    })
