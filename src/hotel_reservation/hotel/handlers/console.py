from __future__ import annotations

import sys
from typing import Callable, TextIO

from pydantic import ValidationError

from hotel_reservation.hotel.applications import BookingManager
from hotel_reservation.hotel.domain.enum import PaymentMethod, RoomCategory
from hotel_reservation.hotel.handlers.formatters import (
    format_payment_receipt,
    format_reservation,
    format_reservation_table,
    format_room,
    format_statistics,
)
from hotel_reservation.hotel.handlers.request_models import (
    BookingIdRequest,
    BookRoomRequest,
)
from hotel_reservation.shared.domain import Currency, DomainException
from hotel_reservation.shared.utils import get_logger

logger = get_logger()

BANNER = """
  ==========================================
       GRAND AZURE HOTEL SYSTEM v1.0
  ==========================================
"""

MENU = """+-------------------------------------+
|      GRAND AZURE HOTEL SYSTEM       |
+-------------------------------------+
|  1. Search Available Rooms          |
|  2. Make a Reservation              |
|  3. View Booking Details            |
|  4. Cancel Reservation              |
|  5. List All Bookings               |
|  6. Hotel Statistics                |
|  7. Export Report to File           |
|  0. Exit                            |
+-------------------------------------+"""

CATEGORY_FILTERS: dict[str, RoomCategory] = {
    "2": RoomCategory.STANDARD,
    "3": RoomCategory.DELUXE,
    "4": RoomCategory.SUITE,
}


def _describe(error: ValidationError) -> str:
    """First validation problem as a one-line message"""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"{field}: {first['msg']}" if field else first["msg"]


class ReservationConsole:
    """Menu-driven console over the BookingManager"""

    def __init__(
        self,
        manager: BookingManager,
        currency: Currency | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._manager = manager
        self._currency = currency or Currency.php()
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.search_rooms,
            "2": self.make_booking,
            "3": self.view_booking,
            "4": self.cancel_booking,
            "5": self.list_bookings,
            "6": self.show_statistics,
            "7": self.export_report,
        }

    def run(self) -> None:
        """Load saved reservations, then serve the menu until 0 or end of input"""
        self._print(BANNER)
        loaded = self._manager.load()
        if loaded:
            self._print(f"  Loaded {loaded} reservation(s) from file.\n")

        while True:
            self._print(MENU)
            try:
                choice = self._input("Choice").strip()
                if choice == "0":
                    self._print("\n  Goodbye!\n")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self._print("\n  Invalid choice.\n")
                    continue
                action()
            except EOFError:
                self._print("\n  Goodbye!\n")
                return
            except Exception:
                logger.exception("Unexpected error in console action")
                self._print("\n  Something went wrong. Returning to the menu.\n")

    # 1. Search rooms
    def search_rooms(self) -> None:
        self._print("\n  Filter: [1] All  [2] Standard  [3] Deluxe  [4] Suite")
        category = CATEGORY_FILTERS.get(self._input("Filter").strip())
        rooms = self._manager.search_rooms(category)
        self._print("")
        if not rooms:
            self._print("  No available rooms.\n")
            return
        for room in rooms:
            self._print(format_room(room, self._currency))
        self._print(f"\n  {len(rooms)} room(s) available.\n")

    # 2. Make booking
    def make_booking(self) -> None:
        self._print("\n--- New Reservation ---")
        name = self._input("Guest name")
        if not name.strip():
            self._print("  Name required.\n")
            return
        email = self._input("Email")

        self.search_rooms()

        room_number = self._input("Room number")
        check_in = self._input("Check-in  (yyyy-MM-dd)")
        check_out = self._input("Check-out (yyyy-MM-dd)")
        self._print("  Payment: [1] Card  [2] GCash  [3] Cash")
        method = PaymentMethod.from_menu_choice(self._input("Choose"))

        try:
            request = BookRoomRequest(
                guest_name=name,
                guest_email=email,
                room_number=room_number.strip(),
                check_in_date=check_in,
                check_out_date=check_out,
                payment_method=method,
            )
        except ValidationError as e:
            self._print(f"  Invalid input: {_describe(e)}\n")
            return

        try:
            reservation = self._manager.book(
                guest_name=request.guest_name,
                guest_email=request.guest_email,
                room_number=request.room_number,
                check_in=request.check_in_date,
                check_out=request.check_out_date,
                payment_method=request.payment_method,
            )
        except (DomainException, ValueError) as e:
            self._print(f"\n  Booking failed: {e}\n")
            return

        self._print("\n  Processing payment...")
        self._print(
            format_payment_receipt(reservation.payment_method, reservation.total_amount)
            + "\n"
        )
        self._print(format_reservation(reservation))

    # 3. View booking
    def view_booking(self) -> None:
        booking_id = self._read_booking_id("Booking ID")
        if booking_id is None:
            return
        reservation = self._manager.find(booking_id)
        if reservation is None:
            self._print("\n  Booking not found.\n")
            return
        self._print(format_reservation(reservation))

    # 4. Cancel booking
    def cancel_booking(self) -> None:
        booking_id = self._read_booking_id("Booking ID to cancel")
        if booking_id is None:
            return
        reservation = self._manager.find(booking_id)
        if reservation is None:
            self._print("\n  Booking not found.\n")
            return
        if not reservation.is_confirmed():
            self._print("\n  Already cancelled.\n")
            return

        self._write(
            f"\n  Cancel booking for {reservation.guest_name} "
            f"(Room {reservation.room_number})? Type YES to confirm: "
        )
        if self._readline().strip().lower() != "yes":
            self._print("  Cancellation aborted.\n")
            return

        self._manager.cancel(booking_id)
        self._print(f"  Booking {booking_id} cancelled. Room is now available.\n")

    # 5. List all bookings
    def list_bookings(self) -> None:
        reservations = self._manager.reservations()
        if not reservations:
            self._print("\n  No reservations found.\n")
            return
        self._print(format_reservation_table(reservations))

    # 6. Statistics
    def show_statistics(self) -> None:
        self._print(format_statistics(self._manager.statistics()))

    # 7. Export report
    def export_report(self) -> None:
        path = self._manager.export_report()
        if path is None:
            self._print("  Export failed. See the log for details.\n")
            return
        self._print(f"  Report exported to {path}\n")

    def _read_booking_id(self, label: str) -> str | None:
        try:
            return BookingIdRequest(booking_id=self._input(label)).booking_id
        except ValidationError as e:
            self._print(f"\n  Invalid booking id: {_describe(e)}\n")
            return None

    def _input(self, label: str) -> str:
        self._write(f"  > {label}: ")
        return self._readline()

    def _readline(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _print(self, text: str) -> None:
        self._write(text + "\n")
