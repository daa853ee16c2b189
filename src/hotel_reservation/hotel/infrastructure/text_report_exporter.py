from pathlib import Path
from typing import Sequence

from hotel_reservation.hotel.domain.entity import Reservation
from hotel_reservation.hotel.domain.repository import ReservationReportExporter
from hotel_reservation.shared.utils import get_logger

logger = get_logger()

RULE_WIDTH = 70
REPORT_TITLE = "HOTEL RESERVATION REPORT"


def _row(reservation: Reservation) -> str:
    total = reservation.total_amount
    return (
        f"{str(reservation.id):<10} "
        f"{str(reservation.guest_name):<18} "
        f"{reservation.room_number:<6d} "
        f"{reservation.stay_period.check_in.isoformat():<12} "
        f"{reservation.stay_period.check_out.isoformat():<12} "
        f"{total.currency.symbol}{total.amount:<11.2f} "
        f"{reservation.status.value:<10}"
    ).rstrip()


def render_report(reservations: Sequence[Reservation]) -> str:
    """Render the fixed-width report text"""
    header = (
        f"{'ID':<10} {'Guest':<18} {'Room':<6} {'Check-In':<12} "
        f"{'Check-Out':<12} {'Total':<12} {'Status':<10}"
    ).rstrip()
    lines = [
        REPORT_TITLE,
        "=" * RULE_WIDTH,
        header,
        "-" * RULE_WIDTH,
        *(_row(r) for r in reservations),
        "=" * RULE_WIDTH,
    ]
    return "\n".join(lines) + "\n"


class TextReportExporter(ReservationReportExporter):
    """Writes the human-readable booking report"""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def export(self, reservations: Sequence[Reservation]) -> Path | None:
        """Write the report; returns None when the file could not be written"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(render_report(reservations), encoding="utf-8")
        except OSError:
            logger.exception("Export failed", extra={"path": str(self.path)})
            return None

        logger.info(
            "Report exported",
            extra={"path": str(self.path), "count": len(reservations)},
        )
        return self.path
