import time
import uuid

EMPLOYEE_CODE_PREFIX = "EMP"


def generate_employee_code() -> str:
    """
    Build a human-facing employee identifier such as ``EMP1704067200000A3F9``.

    Millisecond timestamp keeps codes roughly ordered by creation; the random
    hex suffix keeps two employees created in the same millisecond apart.
    """
    millis = int(time.time() * 1000)
    suffix = uuid.uuid4().hex[:4].upper()
    return f"{EMPLOYEE_CODE_PREFIX}{millis}{suffix}"
