"""Input sanitization utilities."""
import re

from event_checkin.core.constants import (
    EMPLOYEE_ID_PATTERN,
    MAX_EVENT_NAME_LENGTH,
    RESERVED_EMPLOYEE_ID,
)


def sanitize_event_name(name: str) -> str:
    """
    Trim an event name and check it is usable.

    The name is otherwise stored exactly as submitted: markup and inner
    whitespace are left alone because the frontend escapes output when
    rendering, and by-name lookups must match what the organizer typed.

    Raises:
        ValueError: If the name is blank or too long
    """
    if not isinstance(name, str):
        raise ValueError("Event name must be a string")

    sanitized = name.strip()

    if not sanitized:
        raise ValueError("Event name cannot be blank")

    if len(sanitized) > MAX_EVENT_NAME_LENGTH:
        raise ValueError(f"Event name exceeds maximum length of {MAX_EVENT_NAME_LENGTH} characters")

    return sanitized


def validate_employee_id(employee_id: str) -> str:
    """
    Validate an employee identifier.

    Employee IDs are exactly six digits. ``000000`` is reserved and rejected.

    Returns:
        The employee ID with surrounding whitespace removed

    Raises:
        ValueError: If the format is invalid
    """
    if not isinstance(employee_id, str):
        raise ValueError("Employee ID must be a string")

    employee_id = employee_id.strip()

    if not re.match(EMPLOYEE_ID_PATTERN, employee_id):
        raise ValueError("Employee ID must be exactly 6 digits")

    if employee_id == RESERVED_EMPLOYEE_ID:
        raise ValueError("Employee ID cannot be 000000")

    return employee_id
