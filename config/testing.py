import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

OT_RATE_PER_HOUR = 70.0
SUNDAY_ALLOWANCE_STAFF = 500.0
OVERTIME_MODE = "slab"
NON_WORKING_POLICY = "zero_all"
LEAVE_POLICY = "deduct"
