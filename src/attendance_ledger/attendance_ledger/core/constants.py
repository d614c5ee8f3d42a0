"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STUDENT_ID_HEADER = "Student ID"
STUDENT_NAME_HEADER = "Student Name"
ATTENDED_DAYS_HEADER = "Attended Days"
PERCENTAGE_HEADER = "Percentage"

HEADER_BACKGROUND = "#E0E0E0"
PERCENTAGE_NUMBER_FORMAT = "0.0%"
NOT_APPLICABLE = "N/A"

DEFAULT_MARKER = "present"
DAY_KEY_FORMAT = "%m/%d/%Y"

# Cosmetic column auto-resize is skipped once a sheet is this wide.
AUTO_RESIZE_MAX_COLUMNS = 20
BATCH_PROGRESS_EVERY = 10

DEFAULT_SHEET_NAME = "Attendance"
