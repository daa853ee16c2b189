from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_reservation.hotel.domain.enum import PaymentMethod

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class BookRoomRequest(BaseModel):
    """Booking request collected from the console"""

    model_config = ConfigDict(str_strip_whitespace=True)

    guest_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Guest name",
    )
    guest_email: str = Field(default="", max_length=254)
    room_number: int = Field(..., gt=0)
    check_in_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="Check-in date (YYYY-MM-DD)",
        examples=["2025-12-25"],
    )
    check_out_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="Check-out date (YYYY-MM-DD)",
        examples=["2025-12-27"],
    )
    payment_method: PaymentMethod = PaymentMethod.CASH

    @field_validator("check_in_date", "check_out_date")
    @classmethod
    def validate_calendar_date(cls, v: str) -> str:
        date.fromisoformat(v)
        return v


class BookingIdRequest(BaseModel):
    """Request naming an existing booking"""

    model_config = ConfigDict(str_strip_whitespace=True)

    booking_id: str = Field(..., min_length=1, max_length=32)

    @field_validator("booking_id")
    @classmethod
    def normalize(cls, v: str) -> str:
        return v.upper()
