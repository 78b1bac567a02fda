import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

EMPLOYEES_PATH = os.getenv("EMPLOYEES_PATH", str(BASE_DIR / "data" / "employees.json"))

TABLE_NAME = os.getenv("TABLE_NAME", "Attendance Table")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
