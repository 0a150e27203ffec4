"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MAX_REPORT_DAYS = 366

MIN_NAME_LENGTH = 2
MIN_STUDENT_CODE_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

DEFAULT_CLASSES = (
    ("Class 10-A", "Secondary School - Section A"),
    ("Class 10-B", "Secondary School - Section B"),
    ("Class 11-A", "Higher Secondary - Section A"),
    ("Class 11-B", "Higher Secondary - Section B"),
    ("Class 12-A", "Higher Secondary - Final Year"),
)
