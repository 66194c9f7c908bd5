from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from printing.printer import Printer

if TYPE_CHECKING:  # pragma: no cover
    from printing.printer_directory import PrinterDirectory


@dataclass(frozen=True)
class PrinterRef:
    """Either an already resolved printer or an id the printer directory has to look up."""

    printer: Optional[Printer] = None
    printer_id: Optional[int | str] = None

    def __post_init__(self) -> None:
        if (self.printer is None) == (self.printer_id is None):
            raise ValueError("PrinterRef needs exactly one of printer or printer_id")

    @staticmethod
    def of(printer: Printer) -> "PrinterRef":
        return PrinterRef(printer=printer)

    @staticmethod
    def by_id(printer_id: int | str) -> "PrinterRef":
        return PrinterRef(printer_id=printer_id)

    @staticmethod
    def coerce(value: "PrinterRef | Printer | int | str") -> "PrinterRef":
        if isinstance(value, PrinterRef):
            return value
        if isinstance(value, Printer):
            return PrinterRef.of(value)
        return PrinterRef.by_id(value)

    def resolve(self, directory: Optional["PrinterDirectory"]) -> Printer:
        if self.printer is not None:
            return self.printer
        if directory is None:
            raise ValueError(f"Cannot look up printer {self.printer_id!r} without a printer directory")
        return directory.get(self.printer_id)
