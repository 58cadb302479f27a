"""
Tests for schema.py - input validation.
"""

from decimal import Decimal

import pytest

from jobboard.schema import (
    validate_company_search,
    validate_job_new,
    validate_job_search,
    validate_job_update,
)


class TestValidateJobNew:
    """Test validation of new jobs."""

    def test_valid_job(self):
        data = {"title": "Engineer", "salary": 100, "equity": Decimal("0.5"), "company_handle": "c1"}

        assert validate_job_new(data) == []

    def test_optional_fields_may_be_none(self):
        data = {"title": "Engineer", "salary": None, "equity": None, "company_handle": "c1"}

        assert validate_job_new(data) == []

    def test_missing_required_fields(self):
        errors = validate_job_new({"salary": 1})

        assert "Missing required field: title" in errors
        assert "Missing required field: company_handle" in errors

    def test_blank_title(self):
        errors = validate_job_new({"title": "   ", "company_handle": "c1"})

        assert any("title" in e for e in errors)

    @pytest.mark.parametrize("salary", [-1, 1.5, "100", True])
    def test_bad_salary(self, salary):
        errors = validate_job_new({"title": "T", "salary": salary, "company_handle": "c1"})

        assert any("salary" in e for e in errors)

    @pytest.mark.parametrize("equity", [-0.1, 1.01, "abc", True, float("nan")])
    def test_bad_equity(self, equity):
        errors = validate_job_new({"title": "T", "equity": equity, "company_handle": "c1"})

        assert any("equity" in e for e in errors)

    @pytest.mark.parametrize("equity", [0, 1, 0.25, "0.5", Decimal("1.0")])
    def test_good_equity(self, equity):
        assert validate_job_new({"title": "T", "equity": equity, "company_handle": "c1"}) == []


class TestValidateJobUpdate:
    """Test validation of partial updates."""

    def test_editable_fields(self):
        assert validate_job_update({"title": "T", "salary": 1, "equity": 0.1}) == []

    def test_empty_is_not_a_validation_error(self):
        assert validate_job_update({}) == []

    @pytest.mark.parametrize("field", ["id", "company_handle", "bogus"])
    def test_non_editable_fields(self, field):
        assert validate_job_update({field: "x"}) == [f"Unknown field: {field}"]

    def test_null_title_rejected(self):
        assert validate_job_update({"title": None}) != []


class TestValidateSearch:
    """Test validation of search filters."""

    def test_job_filters(self):
        assert validate_job_search({"title": "a", "min_salary": 0, "has_equity": False}) == []

    def test_job_filter_types(self):
        errors = validate_job_search({"title": 1, "min_salary": "x", "has_equity": 1})

        assert len(errors) == 3

    def test_company_filters(self):
        assert validate_company_search({"name": "a", "min_employees": 1, "max_employees": 1}) == []

    def test_company_min_above_max(self):
        errors = validate_company_search({"min_employees": 5, "max_employees": 1})

        assert len(errors) == 1
        assert "min_employees" in errors[0]

    def test_unknown_company_filter(self):
        assert validate_company_search({"title": "x"}) == ["Unknown field: title"]
