"""
Print job configuration, capability validation and submission.

A PrintJob is built up through chained setters, bound to an online printer and sent to the
backend with print(). Validation happens once, right before submission:

- copies are re-batched against the printer's per-job maximum, which can leave an overflow job
  holding the remainder (never submitted automatically, see `overflow_job`)
- paper, media and dpi must be in the printer's capability set
- color is switched off for printers without color support
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Mapping, Optional

from printing.backend_client import BackendClient
from printing.config import settings
from printing.errors import (
    InvalidCredentialsError,
    PrinterNotDefinedError,
    PrinterNotOnlineError,
    UnsupportedDpiError,
    UnsupportedMediaError,
    UnsupportedPaperError,
)
from printing.job_attributes import (
    Authentication,
    AuthType,
    ContentType,
    JobAttributes,
    JobOptions,
)
from printing.printer import Printer
from printing.printer_directory import BackendPrinterDirectory, PrinterDirectory
from printing.printer_ref import PrinterRef
from printing.storage import Storage

logger = logging.getLogger(__name__)


class PrintJob:
    URI = "printjobs"

    def __init__(
            self,
            attributes: "JobAttributes | Mapping[str, Any] | None" = None,
            printer: "PrinterRef | Printer | int | str | None" = None,
            *,
            client: Optional[BackendClient] = None,
            directory: Optional[PrinterDirectory] = None,
            storage: Optional[Storage] = None,
            default_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._client = client
        self._directory = directory
        self._storage = storage

        if isinstance(attributes, JobAttributes):
            self.attributes = attributes
        else:
            raw = attributes or {}
            self.attributes = JobAttributes.from_dict(raw)
            if "options" not in raw:
                defaults = settings.default_options if default_options is None else default_options
                self.attributes.options = JobOptions.from_dict(defaults)

        # A new job is always sent once, whatever quantity the attributes carried
        self.set_quantity(1)

        self.printer: Optional[Printer] = None
        self.overflow_job: Optional[PrintJob] = None

        if printer is not None:
            self.set_printer(printer)

    # ---------- Collaborators ----------

    @property
    def client(self) -> BackendClient:
        if self._client is None:
            self._client = BackendClient.from_settings()
        return self._client

    @property
    def directory(self) -> PrinterDirectory:
        if self._directory is None:
            self._directory = BackendPrinterDirectory(self.client)
        return self._directory

    @property
    def storage(self) -> Storage:
        if self._storage is None:
            self._storage = Storage.from_settings()
        return self._storage

    # ---------- Submission ----------

    def print(self, printer: "PrinterRef | Printer | int | str | None" = None) -> Any:
        """
        Validate this job against its printer and submit it.

        Returns the backend response unchanged. If validation split the copies, the remainder
        is left on `overflow_job` for the caller to submit.
        """
        if printer is not None:
            self.set_printer(printer)

        if self.printer is None:
            raise PrinterNotDefinedError()

        self.check_settings()

        logger.info(
            "Submitting print job to printer %s: qty=%s options=%s",
            self.attributes.printer_id,
            self.attributes.qty,
            self.attributes.options.to_dict(),
        )
        return self.client.post(self.URI, self.to_dict())

    def check_settings(self) -> None:
        if self.printer is None:
            raise PrinterNotDefinedError()

        capabilities = self.printer.capabilities
        options = self.attributes.options

        if options.is_set("copies"):
            # Batches only when the printer maximum is above the requested copies
            max_copies = capabilities.max_copies
            if max_copies > options.copies:
                copies = self.attributes.qty * options.copies

                remainder = copies % max_copies
                if remainder > 0:
                    self.overflow_job = self._overflow(remainder)
                    copies -= remainder

                self.set_quantity(copies // max_copies)
                self.set_options({"copies": max_copies})

                logger.info(
                    "Split copies for printer %s: qty=%s x %s copies, overflow=%s",
                    self.printer.id,
                    self.attributes.qty,
                    max_copies,
                    remainder,
                )

        if options.is_set("paper") and not capabilities.supports_paper(options.paper):
            raise UnsupportedPaperError("This Paper selection is not supported by the printer.")

        if options.is_set("media") and not capabilities.supports_media(options.media):
            raise UnsupportedMediaError("This Media selection is not supported by the printer.")

        if options.is_set("dpi") and not capabilities.supports_dpi(options.dpi):
            raise UnsupportedDpiError("This DPI selection is not supported by the printer.")

        if options.color and not capabilities.color:
            logger.warning("Printer %s has no color support, printing in monochrome", self.printer.id)
            self.set_options({"color": False})

    def _overflow(self, copies: int) -> "PrintJob":
        job = PrintJob(
            self.attributes.clone(),
            client=self._client,
            directory=self._directory,
            storage=self._storage,
        )
        return job.set_quantity(1).set_options({"copies": copies})

    # ---------- Content ----------

    def set_file(self, path: str, disk: str = "local", raw: bool = False) -> "PrintJob":
        return self.set_content(self.storage.read(disk, path), raw=raw)

    def set_content(self, data: bytes, raw: bool = False) -> "PrintJob":
        self.attributes.content_type = ContentType.for_base64(raw)
        self.attributes.content = base64.b64encode(data).decode("ascii")
        return self

    def set_uri(
            self,
            uri: str,
            credentials: Optional[Mapping[str, str]] = None,
            raw: bool = False,
    ) -> "PrintJob":
        self.attributes.content_type = ContentType.for_uri(raw)
        self.attributes.content = uri

        if credentials:
            self.set_authentication(credentials)

        return self

    def set_authentication(self, credentials: Mapping[str, str], basic: bool = True) -> "PrintJob":
        if (
                not isinstance(credentials, Mapping)
                or "username" not in credentials
                or "password" not in credentials
        ):
            raise InvalidCredentialsError("Credentials do not contain either the username or password.")

        self.attributes.authentication = Authentication(
            type=AuthType.BASIC if basic else AuthType.DIGEST,
            user=credentials["username"],
            password=credentials["password"],
        )
        return self

    # ---------- Options ----------

    def set_source(self, source: str) -> "PrintJob":
        self.attributes.source = source
        return self

    def set_copies(self, copies: int) -> "PrintJob":
        return self.set_options({"copies": copies if copies > 0 else 1})

    def set_expire_after(self, expire_after: int) -> "PrintJob":
        self.attributes.expire_after = expire_after
        return self

    def set_quantity(self, quantity: int) -> "PrintJob":
        """Number of times this job is sent to the printer. Not range checked."""
        self.attributes.qty = quantity
        return self

    def set_options(self, options: "Mapping[str, Any] | JobOptions") -> "PrintJob":
        self.attributes.options.merge(options)
        return self

    # ---------- Printer ----------

    def set_printer(self, printer: "PrinterRef | Printer | int | str") -> "PrintJob":
        resolved = PrinterRef.coerce(printer).resolve(self.directory)

        if not resolved.is_online():
            raise PrinterNotOnlineError(f"Printer {resolved.id} ({resolved.name}) is not online.")

        self.printer = resolved
        self.attributes.printer_id = resolved.id
        return self

    @property
    def printer_name(self) -> Optional[str]:
        if self.printer is None:
            return None
        return self.printer.name

    # ---------- Serialization ----------

    @property
    def quantity(self) -> int:
        return self.attributes.qty

    @property
    def options(self) -> JobOptions:
        return self.attributes.options

    def to_dict(self) -> dict:
        return self.attributes.to_dict()
