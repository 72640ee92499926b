"""Errors raised while parsing or executing a command. Messages are shown to the user as-is."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


class ParseError(ValueError):
    """User input does not conform to the expected format."""


class CommandError(Exception):
    """A parsed command could not be executed against the current model."""
