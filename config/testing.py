import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

SECRET_KEY = "test-secret"

EMPLOYEES_PATH = os.getenv("EMPLOYEES_PATH", str(BASE_DIR / "data" / "employees.json"))

TABLE_NAME = "Attendance Table"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
