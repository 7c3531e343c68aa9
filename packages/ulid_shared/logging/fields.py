"""Canonical structured-log field names."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# CLI invocation fields.
COMMAND = "command"
ERROR_CODE = "error_code"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
