"""
User-facing messages shared across commands and parsers.
"""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_MEETING_DISPLAYED_INDEX = "The meeting index provided is invalid"
MESSAGE_MEETINGS_LISTED_OVERVIEW = "{} meetings listed!"
MESSAGE_MODULES_LISTED_OVERVIEW = "{} modules listed!"
MESSAGE_INVALID_MODULE_DISPLAYED_INDEX = "The module index provided is invalid"
