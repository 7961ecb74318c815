"""Request checks shared by the resource handlers.

A check is a plain function that takes a ``CheckContext`` and returns ``None``
when it passes or an ``ApiError`` when it fails. ``run_checks`` runs a chain in
order and raises the first error it gets back.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from errors import ApiError, ConflictError, NotFoundError, ValidationError


@dataclass
class CheckContext:
    data: Dict[str, Any]
    route_id: Optional[str] = None
    record: Optional[Dict[str, Any]] = None


Check = Callable[[CheckContext], Optional[ApiError]]


def run_checks(checks: Iterable[Check], context: CheckContext) -> None:
    for check in checks:
        error = check(context)
        if error is not None:
            raise error


def request_data(payload: Any) -> Dict[str, Any]:
    """Return the ``data`` object of a ``{"data": {...}}`` request body."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    data = payload.get("data")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body data must be a JSON object")
    return data


def is_present(value: Any) -> bool:
    # Empty lists and objects count as present; "dishes": [] is reported by
    # the dish array check instead.
    if value is None or isinstance(value, bool) and not value:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def body_data_has(resource: str, field: str, expected_type: Optional[type] = None) -> Check:
    def check(context: CheckContext) -> Optional[ApiError]:
        value = context.data.get(field)
        if is_present(value) and (expected_type is None or isinstance(value, expected_type)):
            return None
        return ValidationError(f"{resource} must include a {field}")

    return check


def record_exists(resource: str) -> Check:
    def check(context: CheckContext) -> Optional[ApiError]:
        if context.record is not None:
            return None
        return NotFoundError(f"{resource} does not exist: {context.route_id}.")

    return check


def body_id_matches_route(resource: str) -> Check:
    def check(context: CheckContext) -> Optional[ApiError]:
        body_id = context.data.get("id")
        if not is_present(body_id) or body_id == context.route_id:
            return None
        return ConflictError(
            f"{resource} id does not match route id. "
            f"{resource}: {body_id}, Route: {context.route_id}."
        )

    return check
