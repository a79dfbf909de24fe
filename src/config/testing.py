import os

SECRET_KEY = "test-secret"

# Empty path -> in-memory storage
STORAGE_PATH = os.getenv("STORAGE_PATH", "")
STORAGE_KEY = "shiftCalendar.vacations"

ROLE_A_NAME = "Daniel"
ROLE_B_NAME = "Michael"
ROLE_A_HOURS = "12h shift"
ROLE_B_HOURS = "Rest"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
