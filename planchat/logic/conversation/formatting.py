"""Bot-turn text for command outcomes."""
from planchat.domain.CommandResult import CommandResult
from planchat.utilities.constants import (
    CONNECTION_ERROR_PREFIX, ERROR_PREFIX, HISTORY_HEADER, SCHEDULE_NOTICE,
    SUBJECT_COUNT_TEMPLATE, SUCCESS_PREFIX
)

__all__ = ['compose_success_message', 'compose_error_message', 'compose_connection_error',
           'is_clear_acknowledgement']


def is_clear_acknowledgement(result: CommandResult) -> bool:
    """True when the service reports that the plan was cleared.

    The service only says so in free text; swap this for a structured flag
    once the response carries one.
    """
    return bool(result.message) and "cleared" in result.message.lower()


def compose_success_message(result: CommandResult) -> str:
    message = f"{SUCCESS_PREFIX}{result.message}"

    if result.command_history is not None:
        message += HISTORY_HEADER
        for i, entry in enumerate(result.command_history, start=1):
            message += f"\n{i}. [{entry.formatted_timestamp}] {entry.command}"

    if result.schedule is not None:
        message += SCHEDULE_NOTICE

    if result.updated_plan is not None:
        message += SUBJECT_COUNT_TEMPLATE.format(count=len(result.updated_plan.courses))

    return message


def compose_error_message(message: str) -> str:
    return f"{ERROR_PREFIX}{message}"


def compose_connection_error(reason: str) -> str:
    return f"{CONNECTION_ERROR_PREFIX}{reason}"
