"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import AttendanceStatus, DayOfWeek

WEEKEND_DAYS = frozenset({DayOfWeek.SAT, DayOfWeek.SUN})

LEAVE_SEPARATOR = ","
DAY_KEY_WIDTH = 2

STATUS_MARKERS = {
    AttendanceStatus.PRESENT: "P",
    AttendanceStatus.ABSENT: "A",
    AttendanceStatus.NON_WORKING: "-",
}

STATUS_CSS = {
    AttendanceStatus.PRESENT: "",
    AttendanceStatus.ABSENT: "bg-danger bg-opacity-75 text-white",
    AttendanceStatus.NON_WORKING: "bg-secondary bg-opacity-50 text-white",
}

WEEKEND_HEADER_CSS = "bg-secondary"

DEFAULT_TABLE_NAME = "Attendance Table"
