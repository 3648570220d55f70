"""Module A: Booking inquiry enumerations."""
import enum


class ContactMethod(str, enum.Enum):
    email = "email"
    phone = "phone"
