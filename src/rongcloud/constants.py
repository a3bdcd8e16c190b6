"""Default configuration constants for RongCloud chatroom SDK."""

USER_AGENT = "rongcloud-chatroom-python/0.1.0"

DEFAULT_BASE_URL = "https://api.rong-api.com"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 10_000

# Status code the service reports for a successful call
SUCCESS_CODE = 200

# Code carried by locally raised parameter errors
PARAMETER_ERROR_CODE = 1002

# Chatroom option defaults
DEFAULT_DESTROY_TYPE = 0
DEFAULT_DESTROY_TIME_MINUTES = 60

# Documented list caps
MAX_ENTRY_QUERY_KEYS = 100
MAX_BAN_WHITE_USER_IDS = 20
MAX_GLOBAL_BAN_MEMBERS = 20
MAX_PRIORITY_OBJECT_NAMES = 20
MAX_USERS_EXIST_MEMBERS = 1000
MAX_USER_WHITELIST_MEMBERS = 5
