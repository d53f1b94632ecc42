"""
Health check endpoints for the AI Site Generator.
"""

from datetime import datetime
from flask import Blueprint, jsonify, current_app

from ...utils.health import process_uptime, readiness_issues


health_bp = Blueprint('health', __name__, url_prefix='/api/v1')

SERVICE_NAME = "ai-site-generator"


@health_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": current_app.config['API_VERSION'],
        "service": SERVICE_NAME
    }), 200


@health_bp.route('/health/ready', methods=['GET'])
def readiness_check():
    """
    Readiness check endpoint.

    Returns:
        200 when runs can be submitted, 503 with the failed checks otherwise
    """
    issues = readiness_issues(
        current_app.config.get('GEMINI_API_KEY'),
        current_app.config['CELERY_BROKER_URL']
    )

    if issues:
        return jsonify({
            "status": "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "issues": issues
        }), 503

    return jsonify({
        "status": "ready",
        "timestamp": datetime.utcnow().isoformat()
    }), 200


@health_bp.route('/health/live', methods=['GET'])
def liveness_check():
    return jsonify({
        "status": "alive",
        "timestamp": datetime.utcnow().isoformat(),
        "uptime": process_uptime()
    }), 200
