"""
CRUD operations for jobs.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from jobly.core.database import execute
from jobly.core.exceptions import NotFoundError
from jobly.helpers.sql import FilteredQuery, WhereClause, sql_for_partial_update
from jobly.schemas.job import JobCreate, JobFilter, JobRecord, JobUpdate

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def create(db: Session, job_data: JobCreate) -> JobRecord:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created job with its generated id
    """
    rows = execute(
        db,
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [job_data.title, job_data.salary, job_data.equity, job_data.company_handle]
    )
    db.commit()

    job = JobRecord.model_validate(rows[0])
    logger.info(f"Created job {job.id}: {job.title} at {job.company_handle}")
    return job


def build_find_all_query(filters: Optional[JobFilter] = None) -> FilteredQuery:
    """
    Build the listing statement for the supplied filters.

    `min_salary` is an inclusive lower bound, `title` a case-insensitive
    substring match, and `has_equity=True` keeps only jobs with equity
    above zero. Results are ordered by title.
    """
    filters = filters or JobFilter()
    where = WhereClause()

    if filters.min_salary is not None:
        where.add("salary >= {param}", filters.min_salary)

    if filters.title is not None:
        where.add_substring("title", filters.title)

    if filters.has_equity is True:
        where.add("CAST(equity AS FLOAT) > 0")

    where_sql, values = where.render()
    return FilteredQuery(
        text=f"SELECT {JOB_COLUMNS} FROM jobs{where_sql} ORDER BY title",
        values=values
    )


def find_all(db: Session, filters: Optional[JobFilter] = None) -> List[JobRecord]:
    """
    List jobs matching every supplied filter.

    Args:
        db: Database session
        filters: Optional job filters

    Returns:
        Matching jobs ordered by title
    """
    query = build_find_all_query(filters)
    logger.debug(f"Listing jobs: {query.text} {query.values}")

    rows = execute(db, query.text, query.values)
    return [JobRecord.model_validate(row) for row in rows]


def get(db: Session, job_id: int) -> JobRecord:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = execute(db, f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    return JobRecord.model_validate(rows[0])


def update(db: Session, job_id: int, data: JobUpdate) -> JobRecord:
    """
    Partially update a job's title, salary or equity.

    Raises:
        EmptyUpdateError: If `data` sets no field
        NotFoundError: If the job does not exist
    """
    update_sql = sql_for_partial_update(data.model_dump(exclude_unset=True))

    rows = execute(
        db,
        f"""UPDATE jobs
            SET {update_sql.set_cols}
            WHERE id = {update_sql.next_param}
            RETURNING {JOB_COLUMNS}""",
        [*update_sql.values, job_id]
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()

    logger.info(f"Updated job {job_id}")
    return JobRecord.model_validate(rows[0])


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = execute(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
