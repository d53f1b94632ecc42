"""
Site generation API endpoints for the AI Site Generator.

This module provides the endpoints for submitting a generation run,
polling its progress and downloading the finished site bundle.
"""

import io
import logging
import time
from datetime import datetime
from flask import Blueprint, request, jsonify, current_app, send_file
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pydantic import ValidationError as PydanticValidationError

from ..middleware.logging import LoggingMiddleware
from ...core.bundle import build_bundle, write_archive
from ...core.models.errors import (
    ErrorResponse,
    ValidationErrorResponse,
    RunStateError
)
from ...core.models.run import GenerationRun, RunStatus
from ...core.models.site import SiteRequest, SiteResponse


logger = logging.getLogger(__name__)

# Create blueprint
sites_bp = Blueprint('sites', __name__, url_prefix='/api/v1')

# Create rate limiter, bound to the app in create_app
limiter = Limiter(key_func=get_remote_address)


def _submit_limit():
    return current_app.config.get('SUBMIT_RATE_LIMIT', '10 per minute')


def _not_found(task_id: str):
    return jsonify(ErrorResponse(
        error="task_not_found",
        message="Generation task not found",
        error_code="TASK_NOT_FOUND",
        status=404,
        task_id=task_id
    ).to_json()), 404


@sites_bp.route('/sites', methods=['POST'])
@limiter.limit(_submit_limit)
def create_site():
    """
    Submit a new generation run.

    Expected JSON body:
    {
        "topic": "Article topic / page title",
        "redirect_url": "https://... (optional)"
    }
    """
    if not request.is_json:
        return jsonify(ErrorResponse(
            error="invalid_content_type",
            message="Content-Type must be application/json",
            error_code="INVALID_CONTENT_TYPE",
            status=400
        ).to_json()), 400

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify(ErrorResponse(
            error="invalid_request",
            message="Request body is required",
            error_code="INVALID_REQUEST",
            status=400
        ).to_json()), 400

    try:
        site_request = SiteRequest(**data)
    except PydanticValidationError as e:
        response = ValidationErrorResponse()
        for error in e.errors():
            field = ".".join(str(part) for part in error.get("loc", ())) or "request_data"
            response.add_validation_error(field, error.get("msg", "Invalid value"))
        return jsonify(response.to_json()), 400

    redirect_url = site_request.redirect_url or current_app.config['DEFAULT_REDIRECT_URL']

    # Import here to avoid circular imports
    from ...tasks.generation import generate_site_task

    task = generate_site_task.delay(site_request.topic, redirect_url)

    response = SiteResponse(
        task_id=task.id,
        status=RunStatus.IDLE,
        topic=site_request.topic,
        redirect_url=redirect_url
    )

    logger.info(f"Generation task created: {task.id} for {request.remote_addr}")

    return jsonify(response.model_dump(mode="json")), 202


@sites_bp.route('/sites/<task_id>', methods=['GET'])
def get_site_status(task_id):
    """
    Get the status of a generation run.

    Args:
        task_id: Generation task ID

    Returns:
        Celery state plus the run record, with images as data URIs
    """
    from ...tasks.generation import get_task_status

    task_status = get_task_status(task_id)
    run = task_status.get("run")

    response = {
        "task_id": task_id,
        "state": task_status["state"],
        "status": run.status.value if run else _status_without_run(task_status),
        "timestamp": datetime.utcnow().isoformat()
    }

    if run:
        response["run"] = run.to_payload()

    if task_status.get("error"):
        response["error"] = task_status["error"]

    return jsonify(response), 200


def _status_without_run(task_status) -> str:
    if task_status["state"] == 'FAILURE':
        return RunStatus.ERROR.value
    return RunStatus.IDLE.value


@sites_bp.route('/sites/<task_id>/download', methods=['GET'])
def download_site(task_id):
    """
    Download the site bundle of a finished run.

    Args:
        task_id: Generation task ID

    Returns:
        ``<slug>.zip`` as an attachment
    """
    from ...tasks.generation import get_task_status

    task_status = get_task_status(task_id)
    run: GenerationRun = task_status.get("run")

    if run is None and task_status["state"] == 'PENDING':
        return _not_found(task_id)

    if run is None or run.status != RunStatus.DONE or run.content is None:
        current = run.status.value if run else _status_without_run(task_status)
        raise RunStateError(
            "Site bundle is only available once generation is done",
            current=current,
            requested="download"
        )

    start_time = time.time()
    bundle = build_bundle(
        run.topic,
        run.redirect_url,
        run.content,
        run.images,
        license_holder=current_app.config['LICENSE_HOLDER'],
        lang=current_app.config['SITE_LANG']
    )
    archive = write_archive(bundle)

    LoggingMiddleware.log_performance(
        "bundle_packaging",
        time.time() - start_time,
        {"archive_name": bundle.archive_name, "files": len(bundle.files)}
    )

    logger.info(f"Bundle {bundle.archive_name} served for task {task_id}")

    return send_file(
        io.BytesIO(archive),
        mimetype='application/zip',
        as_attachment=True,
        download_name=bundle.archive_name
    )
