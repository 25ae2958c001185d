from .exceptions import InvariantViolation

MAX_NAME_LENGTH = 255


def assert_name(name):
    if not isinstance(name, str) or not name.strip():
        raise InvariantViolation("name must be a non-empty string.")
    if len(name) > MAX_NAME_LENGTH:
        raise InvariantViolation(f"name must be at most {MAX_NAME_LENGTH} characters.")
