"""
Duo Web Configuration
=====================
Protocol constants and environment variable names.
"""

# Role tags
APP_PREFIX = "APP"
AUTH_PREFIX = "AUTH"
DUO_PREFIX = "TX"

# Token lifetimes
APP_EXPIRE_SECONDS = 3600  # 1 hour
DUO_EXPIRE_SECONDS = 300  # 5 minutes

# Required key lengths
APPLICATION_KEY_LENGTH = 40
INTEGRATION_KEY_LENGTH = 20
SECRET_KEY_LENGTH = 40

# Wire framing
FIELD_DELIMITER = "|"
TOKEN_DELIMITER = ":"

# Environment variables read by Credentials.from_env()
APPLICATION_KEY_ENV = "DUO_APPLICATION_KEY"
INTEGRATION_KEY_ENV = "DUO_INTEGRATION_KEY"
SECRET_KEY_ENV = "DUO_SECRET_KEY"
