from .json_file_reservation_repository import (
    JsonFileReservationRepository,
    ReservationRecord,
    ReservationSnapshot,
)
from .text_report_exporter import TextReportExporter, render_report

__all__ = [
    "JsonFileReservationRepository",
    "ReservationRecord",
    "ReservationSnapshot",
    "TextReportExporter",
    "render_report",
]
