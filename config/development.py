import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Static fixture standing in for a real employee data source
EMPLOYEES_PATH = os.getenv("EMPLOYEES_PATH", str(BASE_DIR / "data" / "employees.json"))

TABLE_NAME = os.getenv("TABLE_NAME", "Attendance Table")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
