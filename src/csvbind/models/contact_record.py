"""Contact Record — a ready-made target for mailing-list style CSV files.

Header names vary between list vendors, so the binding patterns are loose and
case-insensitive. Name and postal fields are completed by post-processing.
"""

from __future__ import annotations

from datetime import datetime

from csvbind.models.schema import ZERO_TIMESTAMP, CsvRecord, csv_field


class ContactRecord(CsvRecord):
    """Single contact row in canonical format."""

    # --- Name Fields ---
    fullname: str = csv_field(r"(?i)^(full ?name|name)$", "tc")
    firstname: str = csv_field(r"(?i)^first ?name$", "tc")
    mi: str = csv_field(r"(?i)^(mi|middle ?name)$", "uc")
    lastname: str = csv_field(r"(?i)^last ?name$", "tc")

    # --- Address Fields ---
    address: str = csv_field(r"(?i)^(address|street)", "tc")
    city: str = csv_field(r"(?i)^city$", "tc")
    state: str = csv_field(r"(?i)^(state|st)$", "uc")
    zip: str = csv_field(r"(?i)^(zip|postal ?code)$", "-")
    zip4: str = csv_field(r"(?i)^(zip ?4|plus ?4)$", "-")

    # --- Contact Fields ---
    phone: str = csv_field(r"(?i)phone", "fp")
    email: str = csv_field(r"(?i)e-?mail", "lc")

    # --- Dates ---
    dob: datetime = csv_field(r"(?i)^(dob|birth ?date)$", default=ZERO_TIMESTAMP)
    last_contact: datetime = csv_field(r"(?i)^last ?contact", default=ZERO_TIMESTAMP)

    @property
    def has_address(self) -> bool:
        """True when the record carries a mailable address."""
        return bool(self.address and self.city and self.state and self.zip)
