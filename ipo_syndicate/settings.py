import os

# Section locator settings
SECTION_WINDOW_CHARS = int(os.getenv("SYNDICATE_SECTION_WINDOW", "2000"))
TOC_LEADER_SCAN_CHARS = 200
MIN_SECTION_BODY_CHARS = int(os.getenv("SYNDICATE_MIN_SECTION_BODY", "80"))
MIN_SECTION_END_OFFSET = 100
MAX_SECTION_CHARS = int(os.getenv("SYNDICATE_MAX_SECTION", "20000"))

# Appointment extractor settings
MAX_SKIPPED_LINES = int(os.getenv("SYNDICATE_MAX_SKIPPED_LINES", "12"))
MIN_BANK_NAME_LENGTH = 10
MAX_BANK_NAME_LENGTH = 120
MAX_HEADING_LENGTH = 160

# Orchestrator settings
RAW_SECTION_TEXT_LIMIT = int(os.getenv("SYNDICATE_RAW_SECTION_LIMIT", "5000"))
USE_KNOWN_BANK_FALLBACK = os.getenv("SYNDICATE_USE_FALLBACK", "false").lower() in ("1", "true", "yes")

# Logging settings
LOG_LEVEL = os.getenv("SYNDICATE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}
