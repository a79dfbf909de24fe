"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CYCLE_LENGTH_DAYS = 8
ON_DAYS_PER_CYCLE = 4
GRID_CELLS = 42

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

DEFAULT_STORAGE_KEY = "shiftCalendar.vacations"

DEFAULT_ROLE_A_NAME = "Daniel"
DEFAULT_ROLE_B_NAME = "Michael"
DEFAULT_ROLE_A_HOURS = "12h shift"
DEFAULT_ROLE_B_HOURS = "Rest"
VACATION_CAPTION = "Vacation"
