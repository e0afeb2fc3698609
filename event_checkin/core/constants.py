"""Application constants.

Values shared by validation, storage and export code live here so the
rules stay in one place.
"""

# Employee identifiers are exactly six ASCII digits
EMPLOYEE_ID_PATTERN = r"^[0-9]{6}$"
# Placeholder value printed on blank badges; never a real employee
RESERVED_EMPLOYEE_ID = "000000"

# Event names
MAX_EVENT_NAME_LENGTH = 200
MAX_ADMIN_PASSWORD_LENGTH = 200

# Events dated within this many days count as "recent" on the dashboard
RECENT_EVENT_DAYS = 7

# CSV export
EXPORT_HEADER = ("Employee ID", "Check-in Time", "Event Name")

# Storage backends selectable via STORAGE_BACKEND
STORAGE_MEMORY = "memory"
STORAGE_DATABASE = "database"
STORAGE_BACKENDS = (STORAGE_MEMORY, STORAGE_DATABASE)
