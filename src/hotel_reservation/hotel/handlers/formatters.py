from datetime import date
from typing import Sequence

from hotel_reservation.hotel.applications import HotelStatistics
from hotel_reservation.hotel.domain.entity import Reservation, Room
from hotel_reservation.hotel.domain.enum import PaymentMethod
from hotel_reservation.shared.domain import Currency, Money

CARD_RULE = "  +--------------------------------------------------+"
STATS_RULE = "  +---------------------------------+"
GUEST_COLUMN_WIDTH = 18


def _long_date(d: date) -> str:
    """e.g. Jan 1, 2025"""
    return f"{d:%b} {d.day}, {d.year}"


def format_room(room: Room, currency: Currency) -> str:
    state = "[Available]" if room.available else "[Occupied] "
    rate = f"{currency.symbol}{room.category.nightly_rate:.0f}/night"
    return (
        f"  Room {room.room_number:03d} | {room.category.label:<8} | "
        f"{room.description:<20} | {rate} | {state}"
    )


def format_reservation(reservation: Reservation) -> str:
    """Booking confirmation card"""
    stay = reservation.stay_period
    total = reservation.total_amount
    rate = Money(
        amount=reservation.room_category.nightly_rate, currency=total.currency
    )
    room = f"{reservation.room_number:03d} ({reservation.room_category.label})"
    lines = [
        "",
        CARD_RULE,
        "  |            BOOKING CONFIRMATION                  |",
        CARD_RULE,
        f"  | Booking ID   : {str(reservation.id):<33}|",
        f"  | Status       : {reservation.status.value:<33}|",
        CARD_RULE,
        f"  | Guest Name   : {str(reservation.guest_name):<33}|",
        f"  | Email        : {reservation.guest_email:<33}|",
        CARD_RULE,
        f"  | Room         : {room:<33}|",
        f"  | Check-In     : {_long_date(stay.check_in):<33}|",
        f"  | Check-Out    : {_long_date(stay.check_out):<33}|",
        f"  | Nights       : {reservation.nights():<33d}|",
        CARD_RULE,
        f"  | Rate/Night   : {rate.format():<33}|",
        f"  | TOTAL AMOUNT : {total.format():<33}|",
        f"  | Payment      : {reservation.payment_method.value:<33}|",
        CARD_RULE,
        "",
    ]
    return "\n".join(lines)


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 1] + "…"
    return text


def format_reservation_table(reservations: Sequence[Reservation]) -> str:
    lines = [
        "",
        f"  {'ID':<10} {'Guest':<18} {'Room':<6} {'Check-In':<12} "
        f"{'Check-Out':<12} {'Total':<12} {'Status':<10}",
        "  " + "-" * 82,
    ]
    for r in reservations:
        guest = _truncate(str(r.guest_name), GUEST_COLUMN_WIDTH)
        total = r.total_amount
        lines.append(
            f"  {str(r.id):<10} {guest:<18} {r.room_number:<6d} "
            f"{r.stay_period.check_in.isoformat():<12} "
            f"{r.stay_period.check_out.isoformat():<12} "
            f"{total.currency.symbol}{total.amount:<11.2f} {r.status.value:<10}"
        )
    lines.append("")
    lines.append(f"  Total: {len(reservations)} booking(s)")
    lines.append("")
    return "\n".join(lines)


def format_statistics(stats: HotelStatistics) -> str:
    revenue = f"{stats.revenue.currency.symbol}{stats.revenue.amount:<11.2f}"
    lines = [
        "",
        STATS_RULE,
        "  |       HOTEL STATISTICS          |",
        STATS_RULE,
        f"  | Total Rooms     : {stats.total_rooms:<12d}  |",
        f"  | Available       : {stats.available_rooms:<12d}  |",
        f"  | Occupied        : {stats.occupied_rooms:<12d}  |",
        f"  | Total Bookings  : {stats.total_bookings:<12d}  |",
        f"  | Confirmed       : {stats.confirmed_bookings:<12d}  |",
        f"  | Cancelled       : {stats.cancelled_bookings:<12d}  |",
        f"  | Total Revenue   : {revenue}  |",
        STATS_RULE,
        "",
    ]
    return "\n".join(lines)


def format_payment_receipt(method: PaymentMethod, amount: Money) -> str:
    messages = {
        PaymentMethod.CARD: "Payment of {amount} charged to card. APPROVED.",
        PaymentMethod.GCASH: "GCash payment of {amount} confirmed.",
        PaymentMethod.CASH: "Cash payment of {amount} accepted.",
    }
    return "  " + messages[method].format(amount=amount.format())
