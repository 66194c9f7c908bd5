"""
Flask application exposing print job submission over HTTP.
"""
import logging

import requests
from flask import Flask, jsonify, request

from printing.backend_client import BackendClient
from printing.errors import (
    ContentNotFoundError,
    PrintJobError,
    PrinterNotFoundError,
    PrinterNotOnlineError,
)
from printing.print_job import PrintJob
from printing.printer_directory import BackendPrinterDirectory
from printing.storage import Storage

logger = logging.getLogger(__name__)


def _status_for(error: PrintJobError) -> int:
    if isinstance(error, (PrinterNotFoundError, ContentNotFoundError)):
        return 404
    if isinstance(error, PrinterNotOnlineError):
        return 409
    # InvalidCredentialsError, InvalidPrinterSettingError, PrinterNotDefinedError
    return 400


def build_job(data: dict, *, client, directory, storage) -> PrintJob:
    job = PrintJob(
        {"options": data["options"]} if "options" in data else None,
        client=client,
        directory=directory,
        storage=storage,
    )
    raw = bool(data.get("raw", False))

    if "uri" in data:
        job.set_uri(data["uri"], raw=raw)
    elif "file" in data:
        job.set_file(data["file"], disk=data.get("disk", "local"), raw=raw)
    elif "content" in data:
        job.set_content(data["content"].encode("utf-8"), raw=raw)

    if "credentials" in data:
        job.set_authentication(data["credentials"], basic=not data.get("digest", False))
    if "source" in data:
        job.set_source(data["source"])
    if "copies" in data:
        job.set_copies(int(data["copies"]))
    if "qty" in data:
        job.set_quantity(int(data["qty"]))
    if "expire_after" in data:
        job.set_expire_after(int(data["expire_after"]))

    return job


def create_app(client=None, directory=None, storage=None):
    app = Flask(__name__)

    if client is None:
        client = BackendClient.from_settings()
    if directory is None:
        directory = BackendPrinterDirectory(client)
    if storage is None:
        storage = Storage.from_settings()

    app.client = client
    app.directory = directory
    app.storage = storage

    @app.errorhandler(PrintJobError)
    def print_job_error(error: PrintJobError):
        return jsonify({"ok": False, "error": error.code, "message": str(error)}), _status_for(error)

    @app.errorhandler(requests.RequestException)
    def backend_error(error: requests.RequestException):
        logger.error("Backend request failed: %s", error)
        return jsonify({"ok": False, "error": "backend_error", "message": str(error)}), 502

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/printers/<printer_id>", methods=["GET"])
    def printer(printer_id: str):
        return jsonify(app.directory.get(printer_id).to_dict())

    @app.route("/print-jobs", methods=["POST"])
    def print_jobs():
        data = request.get_json(silent=True) or {}

        job = build_job(data, client=app.client, directory=app.directory, storage=app.storage)
        response = job.print(data.get("printer"))

        overflow = job.overflow_job.to_dict() if job.overflow_job else None
        if overflow:
            logger.info("Overflow job for printer %s left for the caller", job.attributes.printer_id)

        return jsonify({"ok": True, "response": response, "overflow": overflow})

    return app
