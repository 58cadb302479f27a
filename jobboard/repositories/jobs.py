"""
Jobs Repository.

Responsibilities:
- CRUD operations for the jobs table.
- Search over jobs with optional filters.
- Embedding the owning company in the detail view.

Non-Responsibilities:
- No HTTP status handling.
- No company writes.

Invariant:
Every ``$n`` placeholder in a statement matches the n-th bound value.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, TypedDict, Union

from ..errors import BadRequestError, NotFoundError
from ..logger import get_logger
from ..schema import validate_job_new, validate_job_search, validate_job_update
from ..sql import WhereClause, sql_for_partial_update

logger = get_logger()

# Editable fields map onto identically named columns.
JOB_COLUMNS: Dict[str, str] = {}

JOB_FIELDS = """id,
                title,
                salary,
                equity,
                company_handle"""


class JobSearchFilters(TypedDict, total=False):
    title: str
    min_salary: int
    has_equity: bool


class JobRepository:
    """Job persistence over a store exposing ``query(sql, params)``."""

    def __init__(self, db):
        self.db = db

    def create(
        self,
        title: str,
        salary: Optional[int],
        equity: Optional[Union[Decimal, float]],
        company_handle: str,
    ) -> Dict[str, Any]:
        """
        Create a job and return it as stored.

        The company handle is not checked here; a dangling handle fails
        with the store's foreign key error.

        Returns:
            {id, title, salary, equity, company_handle}
        """
        data = {
            "title": title,
            "salary": salary,
            "equity": equity,
            "company_handle": company_handle,
        }
        errors = validate_job_new(data)
        if errors:
            raise BadRequestError("; ".join(errors))

        rows = self.db.query(
            f"""INSERT INTO jobs
                (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_FIELDS}""",
            [title, salary, equity, company_handle],
        )
        job = rows[0]

        logger.info("Created job", id=job["id"], company_handle=company_handle)
        return job

    def find_all(self, search_filters: Optional[JobSearchFilters] = None) -> List[Dict[str, Any]]:
        """
        Find all jobs, optionally filtered, ordered by title.

        search_filters (all optional):
        - title: case-insensitive substring of the job title
        - min_salary: inclusive lower bound on salary
        - has_equity: True keeps only jobs with equity > 0

        Returns:
            [{id, title, salary, equity, company_handle, company_name}, ...]
        """
        search_filters = dict(search_filters or {})
        errors = validate_job_search(search_filters)
        if errors:
            raise BadRequestError("; ".join(errors))

        title = search_filters.get("title")
        min_salary = search_filters.get("min_salary")
        has_equity = search_filters.get("has_equity")

        where = WhereClause()
        if min_salary is not None:
            where.add_predicate("j.salary >= {}", min_salary)
        if has_equity is True:
            where.add_predicate("j.equity > 0")
        if title is not None:
            where.add_predicate("lower(j.title) LIKE lower({})", f"%{title}%")

        query = f"""SELECT j.id,
                           j.title,
                           j.salary,
                           j.equity,
                           j.company_handle,
                           c.name AS company_name
                    FROM jobs AS j
                      LEFT JOIN companies AS c ON c.handle = j.company_handle{where.sql}
                    ORDER BY j.title"""

        jobs = self.db.query(query, where.values)
        logger.debug("Searched jobs", filters=search_filters, matches=len(jobs))
        return jobs

    def get(self, id: int) -> Dict[str, Any]:
        """
        Given a job id, return the job with its company embedded.

        Returns:
            {id, title, salary, equity, company}
            where company is {handle, name, description, num_employees, logo_url}
            or None when the referenced company no longer exists

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.db.query(
            f"""SELECT {JOB_FIELDS}
                FROM jobs
                WHERE id = $1""",
            [id],
        )
        if not rows:
            raise NotFoundError(f"No job: {id}", ident=id)
        job = rows[0]

        company_rows = self.db.query(
            """SELECT handle,
                      name,
                      description,
                      num_employees,
                      logo_url
               FROM companies
               WHERE handle = $1""",
            [job["company_handle"]],
        )

        company_handle = job.pop("company_handle")
        job["company"] = company_rows[0] if company_rows else None
        if job["company"] is None:
            logger.warning("Job references missing company", id=id, company_handle=company_handle)

        return job

    def update(self, id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partially update a job; only the provided fields change.

        data can include: {title, salary, equity}

        Returns:
            {id, title, salary, equity, company_handle}

        Raises:
            BadRequestError: If data is empty or names a non-editable field
            NotFoundError: If no job has this id
        """
        errors = validate_job_update(data)
        if errors:
            raise BadRequestError("; ".join(errors))

        set_cols, values = sql_for_partial_update(data, JOB_COLUMNS)
        where = WhereClause(values)
        where.add_predicate("id = {}", id)

        rows = self.db.query(
            f"""UPDATE jobs
                SET {set_cols}{where.sql}
                RETURNING {JOB_FIELDS}""",
            where.values,
        )
        if not rows:
            raise NotFoundError(f"No job: {id}", ident=id)

        logger.info("Updated job", id=id, fields=list(data))
        return rows[0]

    def remove(self, id: int) -> None:
        """
        Delete a job.

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.db.query(
            """DELETE
               FROM jobs
               WHERE id = $1
               RETURNING id""",
            [id],
        )
        if not rows:
            raise NotFoundError(f"No job: {id}", ident=id)

        logger.info("Removed job", id=id)
