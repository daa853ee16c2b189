from __future__ import annotations

import argparse
from typing import Sequence

from pydantic import ValidationError

from hotel_reservation.config import Settings
from hotel_reservation.hotel.applications import BookingManager
from hotel_reservation.hotel.domain.factory import ReservationFactory
from hotel_reservation.hotel.domain.repository import RoomRegistry
from hotel_reservation.hotel.handlers import ReservationConsole
from hotel_reservation.hotel.infrastructure import (
    JsonFileReservationRepository,
    TextReportExporter,
)
from hotel_reservation.shared.utils import set_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotel-reservation",
        description="Menu-driven hotel reservation desk",
    )
    parser.add_argument("--data-file", help="reservation snapshot (JSON)")
    parser.add_argument("--report-file", help="where option 7 writes the report")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def build_manager(settings: Settings) -> BookingManager:
    """Wire the registry, repository and exporter from settings"""
    return BookingManager(
        registry=RoomRegistry.seeded(),
        repository=JsonFileReservationRepository(settings.data_file),
        factory=ReservationFactory(),
        exporter=TextReportExporter(settings.report_file),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env().with_overrides(
            data_file=args.data_file,
            report_file=args.report_file,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}")
        return 2

    set_log_level(settings.log_level)
    console = ReservationConsole(build_manager(settings))
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n  Goodbye!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
