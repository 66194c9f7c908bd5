# printing/printer_directory.py

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests

from printing.backend_client import BackendClient
from printing.errors import PrinterNotFoundError
from printing.printer import Printer

logger = logging.getLogger(__name__)


class PrinterDirectory(ABC):
    """
    Looks printers up by id.

    Implementations raise PrinterNotFoundError for ids they do not know.
    """

    @abstractmethod
    def get(self, printer_id: int | str) -> Printer:
        raise NotImplementedError


class BackendPrinterDirectory(PrinterDirectory):
    """Reads printers from the backend's `printers/{id}` endpoint."""

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    def get(self, printer_id: int | str) -> Printer:
        try:
            data = self._client.get(f"printers/{printer_id}")
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise PrinterNotFoundError(f"Printer {printer_id!r} does not exist") from e
            raise

        # The API answers id lookups with a list
        if isinstance(data, list):
            data = data[0] if data else None

        if not data:
            raise PrinterNotFoundError(f"Printer {printer_id!r} does not exist")

        printer = Printer.from_dict(data)
        logger.debug("Resolved printer %s (%s), online=%s", printer.id, printer.name, printer.online)
        return printer
