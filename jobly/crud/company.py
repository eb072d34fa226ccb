"""
CRUD operations for companies.

Statements are written with positional placeholders and run through
`jobly.core.database.execute`. Rows come back labelled with the external
camelCase names and are converted to company schemas.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from jobly.core.database import execute
from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.helpers.sql import FilteredQuery, WhereClause, sql_for_partial_update
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyRecord,
    CompanyUpdate,
)

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# Logical field name -> column, for fields whose names differ
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreate) -> CompanyRecord:
    """
    Create a new company in the database.

    Args:
        db: Database session
        company_data: Validated company creation data

    Returns:
        The created company

    Raises:
        BadRequestError: If a company with the same handle exists
    """
    duplicate_check = execute(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [company_data.handle]
    )
    if duplicate_check:
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    rows = execute(
        db,
        f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}""",
        [
            company_data.handle,
            company_data.name,
            company_data.description,
            company_data.num_employees,
            company_data.logo_url,
        ]
    )
    db.commit()

    logger.info(f"Created company {company_data.handle}")
    return CompanyRecord.model_validate(rows[0])


def build_find_all_query(filters: Optional[CompanyFilter] = None) -> FilteredQuery:
    """
    Build the listing statement for the supplied filters.

    Employee bounds are inclusive, `name` is a case-insensitive substring
    match. Filters that were not supplied add no predicate. Results are
    ordered by name.
    """
    filters = filters or CompanyFilter()
    where = WhereClause()

    if filters.min_employees is not None:
        where.add("num_employees >= {param}", filters.min_employees)

    if filters.max_employees is not None:
        where.add("num_employees <= {param}", filters.max_employees)

    if filters.name is not None:
        where.add_substring("name", filters.name)

    where_sql, values = where.render()
    return FilteredQuery(
        text=f"SELECT {COMPANY_COLUMNS} FROM companies{where_sql} ORDER BY name",
        values=values
    )


def find_all(db: Session, filters: Optional[CompanyFilter] = None) -> List[CompanyRecord]:
    """
    List companies matching every supplied filter.

    Args:
        db: Database session
        filters: Optional company filters

    Returns:
        Matching companies ordered by name
    """
    query = build_find_all_query(filters)
    logger.debug(f"Listing companies: {query.text} {query.values}")

    rows = execute(db, query.text, query.values)
    return [CompanyRecord.model_validate(row) for row in rows]


def get(db: Session, handle: str) -> CompanyDetail:
    """
    Retrieve a company and its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    rows = execute(
        db,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [handle]
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    job_rows = execute(
        db,
        """SELECT id, title, salary, equity, company_handle AS "companyHandle"
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle]
    )

    return CompanyDetail.model_validate({**rows[0], "jobs": job_rows})


def update(db: Session, handle: str, data: CompanyUpdate) -> CompanyRecord:
    """
    Partially update a company. Only fields set on `data` change.

    Args:
        db: Database session
        handle: Handle of the company to update
        data: Fields to change

    Returns:
        The updated company

    Raises:
        EmptyUpdateError: If `data` sets no field
        NotFoundError: If no company has this handle
    """
    update_sql = sql_for_partial_update(
        data.model_dump(by_alias=True, exclude_unset=True),
        JS_TO_SQL
    )

    rows = execute(
        db,
        f"""UPDATE companies
            SET {update_sql.set_cols}
            WHERE handle = {update_sql.next_param}
            RETURNING {COMPANY_COLUMNS}""",
        [*update_sql.values, handle]
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()

    logger.info(f"Updated company {handle}")
    return CompanyRecord.model_validate(rows[0])


def remove(db: Session, handle: str) -> None:
    """
    Delete a company by handle. Its jobs go with it.

    Raises:
        NotFoundError: If no company has this handle
    """
    rows = execute(
        db,
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        [handle]
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
