import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Engine rules; see core/engine_config.py for the accepted values
OT_RATE_PER_HOUR = float(os.getenv("OT_RATE_PER_HOUR", "70"))
SUNDAY_ALLOWANCE_STAFF = float(os.getenv("SUNDAY_ALLOWANCE_STAFF", "500"))
OVERTIME_MODE = os.getenv("OVERTIME_MODE", "slab")
NON_WORKING_POLICY = os.getenv("NON_WORKING_POLICY", "zero_all")
LEAVE_POLICY = os.getenv("LEAVE_POLICY", "deduct")
