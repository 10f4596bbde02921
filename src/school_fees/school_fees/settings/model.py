from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SchoolSettings:
    """Singleton school-wide settings; defaults are the demo school's."""

    school_name: str = "Krishnaveni Talent School Ramannapet"
    address: str = "Near Old Bus stand, Ramannapet, 508113"
    phone: str = "+91-7386685333"
    email: str = "ktsramannapet@gmail.com"
    website: str = "www.globalexcellence.edu"
    principal_name: str = "Dr. Rajendra Kumar"
    logo: Optional[str] = None
    receipt_prefix: str = "GES"
    academic_year: str = "2025-2026"
    current_term: str = "Quarter 1"
    enable_email_notifications: bool = False
    enable_sms_notifications: bool = False
    enable_automatic_reminders: bool = False
    reminder_days: int = 5
    tax_percentage: float = 0
    receipt_footer_text: str = "Thank you for your payment. This receipt is system generated."
    receipt_copies: int = 2
    theme: str = "light"
