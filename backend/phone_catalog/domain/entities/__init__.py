from .phone import MUTABLE_FIELDS, Phone, PhoneSummary
from .query import Pagination, PhoneCollection, PhoneFilter, PhoneQuery

__all__ = [
    "MUTABLE_FIELDS",
    "Phone",
    "PhoneSummary",
    "Pagination",
    "PhoneCollection",
    "PhoneFilter",
    "PhoneQuery",
]
