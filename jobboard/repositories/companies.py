"""
Companies Repository.

Read-only access to the companies table: filtered listing and a detail
view that lists the company's jobs.
"""

from typing import Any, Dict, List, Optional, TypedDict

from ..errors import BadRequestError, NotFoundError
from ..logger import get_logger
from ..schema import validate_company_search
from ..sql import WhereClause

logger = get_logger()

COMPANY_FIELDS = """handle,
                    name,
                    description,
                    num_employees,
                    logo_url"""


class CompanySearchFilters(TypedDict, total=False):
    name: str
    min_employees: int
    max_employees: int


class CompanyRepository:
    """Company lookups over a store exposing ``query(sql, params)``."""

    def __init__(self, db):
        self.db = db

    def find_all(self, search_filters: Optional[CompanySearchFilters] = None) -> List[Dict[str, Any]]:
        """
        Find all companies, optionally filtered, ordered by name.

        search_filters (all optional):
        - name: case-insensitive substring of the company name
        - min_employees / max_employees: inclusive bounds on head count

        Raises:
            BadRequestError: If a filter is malformed or min exceeds max
        """
        search_filters = dict(search_filters or {})
        errors = validate_company_search(search_filters)
        if errors:
            raise BadRequestError("; ".join(errors))

        where = WhereClause()
        if search_filters.get("min_employees") is not None:
            where.add_predicate("num_employees >= {}", search_filters["min_employees"])
        if search_filters.get("max_employees") is not None:
            where.add_predicate("num_employees <= {}", search_filters["max_employees"])
        if search_filters.get("name") is not None:
            where.add_predicate("lower(name) LIKE lower({})", f"%{search_filters['name']}%")

        return self.db.query(
            f"""SELECT {COMPANY_FIELDS}
                FROM companies{where.sql}
                ORDER BY name""",
            where.values,
        )

    def get(self, handle: str) -> Dict[str, Any]:
        """
        Given a company handle, return the company and its jobs.

        Returns:
            {handle, name, description, num_employees, logo_url, jobs}
            where jobs is [{id, title, salary, equity}, ...]

        Raises:
            NotFoundError: If no company has this handle
        """
        rows = self.db.query(
            f"""SELECT {COMPANY_FIELDS}
                FROM companies
                WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}", ident=handle)
        company = rows[0]

        company["jobs"] = self.db.query(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )

        logger.debug("Fetched company", handle=handle, jobs=len(company["jobs"]))
        return company
