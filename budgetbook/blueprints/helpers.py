from flask import request

from ..errors import InvalidInput


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Expected a JSON object body")
    return data


def require(data, key):
    value = data.get(key)
    if value is None or value == "":
        raise InvalidInput(f"Missing field: {key}")
    return value


def as_int(value, field):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid {field}: {value!r}")


def optional_int(value, field):
    if value is None or value == "":
        return None
    return as_int(value, field)


def as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "on", "yes")
    return bool(value)
