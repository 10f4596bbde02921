"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

GRADES = ("Nursery", "KG", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12")
SECTIONS = ("A", "B", "C")

DEFAULT_RECENT_RECEIPTS_LIMIT = 5
UNKNOWN = "Unknown"
