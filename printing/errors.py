# printing/errors.py

from __future__ import annotations


class PrintJobError(RuntimeError):
    """Raised when a print job cannot be configured or submitted."""

    code = "print_job_error"


class PrinterNotDefinedError(PrintJobError):
    code = "printer_not_defined"

    def __init__(self, message: str = "No printer is bound to this print job.") -> None:
        super().__init__(message)


class PrinterNotOnlineError(PrintJobError):
    code = "printer_offline"

    def __init__(self, message: str = "The selected printer is not online.") -> None:
        super().__init__(message)


class PrinterNotFoundError(PrintJobError):
    code = "printer_not_found"


class InvalidCredentialsError(PrintJobError):
    code = "invalid_credentials"


class InvalidPrinterSettingError(PrintJobError):
    """A requested option is not in the printer's capability set."""

    code = "invalid_printer_setting"


class UnsupportedPaperError(InvalidPrinterSettingError):
    code = "unsupported_paper"


class UnsupportedMediaError(InvalidPrinterSettingError):
    code = "unsupported_media"


class UnsupportedDpiError(InvalidPrinterSettingError):
    code = "unsupported_dpi"


class ContentNotFoundError(PrintJobError):
    code = "content_not_found"


class InvalidOptionError(PrintJobError):
    """An option value has the wrong type, e.g. non numeric copies."""

    code = "invalid_option"
