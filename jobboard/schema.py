from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

JOB_NEW_FIELDS = ["title", "salary", "equity", "company_handle"]
JOB_UPDATE_FIELDS = ["title", "salary", "equity"]
JOB_SEARCH_FIELDS = ["title", "min_salary", "has_equity"]
COMPANY_SEARCH_FIELDS = ["name", "min_employees", "max_employees"]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _is_non_negative_int(v: Any) -> bool:
    # bool is an int subclass; True is not a salary
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0


def _is_fraction(v: Any) -> bool:
    if isinstance(v, bool):
        return False
    try:
        d = Decimal(str(v)) if isinstance(v, (int, float, str)) else v
    except InvalidOperation:
        return False
    return isinstance(d, Decimal) and d.is_finite() and Decimal(0) <= d <= Decimal(1)


def _unknown_fields(data: Dict[str, Any], allowed: List[str]) -> List[str]:
    return [f"Unknown field: {k}" for k in data if k not in allowed]


def _check_job_values(data: Dict[str, Any], errors: List[str]) -> None:
    if "title" in data and not _is_non_empty_str(data["title"]):
        errors.append("Field 'title' must be a non-empty string")
    if data.get("salary") is not None and not _is_non_negative_int(data["salary"]):
        errors.append("Field 'salary' must be a non-negative integer")
    if data.get("equity") is not None and not _is_fraction(data["equity"]):
        errors.append("Field 'equity' must be a number between 0 and 1")


def validate_job_new(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    errors: List[str] = _unknown_fields(data, JOB_NEW_FIELDS)

    for f in ("title", "company_handle"):
        if data.get(f) is None:
            errors.append(f"Missing required field: {f}")
        elif not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string")

    _check_job_values({k: v for k, v in data.items() if k != "title"}, errors)
    return errors


def validate_job_update(data: Dict[str, Any]) -> List[str]:
    """
    Only title, salary and equity are editable; id and company_handle
    are rejected like any other unknown field.
    """
    errors: List[str] = _unknown_fields(data, JOB_UPDATE_FIELDS)
    _check_job_values(data, errors)
    return errors


def validate_job_search(filters: Dict[str, Any]) -> List[str]:
    errors: List[str] = _unknown_fields(filters, JOB_SEARCH_FIELDS)

    if filters.get("title") is not None and not isinstance(filters["title"], str):
        errors.append("Filter 'title' must be a string")
    if filters.get("min_salary") is not None and not _is_non_negative_int(filters["min_salary"]):
        errors.append("Filter 'min_salary' must be a non-negative integer")
    if filters.get("has_equity") is not None and not isinstance(filters["has_equity"], bool):
        errors.append("Filter 'has_equity' must be a boolean")

    return errors


def validate_company_search(filters: Dict[str, Any]) -> List[str]:
    errors: List[str] = _unknown_fields(filters, COMPANY_SEARCH_FIELDS)

    if filters.get("name") is not None and not isinstance(filters["name"], str):
        errors.append("Filter 'name' must be a string")
    for f in ("min_employees", "max_employees"):
        if filters.get(f) is not None and not _is_non_negative_int(filters[f]):
            errors.append(f"Filter '{f}' must be a non-negative integer")

    if not errors:
        lo = filters.get("min_employees")
        hi = filters.get("max_employees")
        if lo is not None and hi is not None and lo > hi:
            errors.append("Filter 'min_employees' cannot be greater than 'max_employees'")

    return errors
