import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local JSON file holding the vacation list (key-value area)
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/shift_calendar.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "shiftCalendar.vacations")

ROLE_A_NAME = os.getenv("ROLE_A_NAME", "Daniel")
ROLE_B_NAME = os.getenv("ROLE_B_NAME", "Michael")
ROLE_A_HOURS = os.getenv("ROLE_A_HOURS", "12h shift")
ROLE_B_HOURS = os.getenv("ROLE_B_HOURS", "Rest")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
