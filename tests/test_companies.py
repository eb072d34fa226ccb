"""
Test suite for company CRUD operations.

Tests cover:
- Listing statement construction
- Filtered listing
- Creation, retrieval, partial update and deletion
"""

import pytest
from pydantic import ValidationError

from jobly.core.exceptions import BadRequestError, EmptyUpdateError, NotFoundError
from jobly.crud import company as company_crud
from jobly.crud import job as job_crud
from jobly.schemas.company import CompanyCreate, CompanyFilter, CompanyUpdate


def names(companies):
    return [c.name for c in companies]


class TestBuildFindAllQuery:
    """Tests for the company listing statement"""

    def test_no_filters(self):
        query = company_crud.build_find_all_query()

        assert "WHERE" not in query.text
        assert query.text.endswith("FROM companies ORDER BY name")
        assert 'num_employees AS "numEmployees"' in query.text
        assert query.values == []

    def test_all_filters_in_documented_order(self):
        query = company_crud.build_find_all_query(
            CompanyFilter(name="Inc", max_employees=50, min_employees=10)
        )

        assert query.text.endswith(
            " WHERE num_employees >= $1 AND num_employees <= $2 AND LOWER(name) LIKE $3 ORDER BY name"
        )
        assert query.values == [10, 50, "%inc%"]

    def test_zero_bound_is_applied(self):
        query = company_crud.build_find_all_query(CompanyFilter(min_employees=0))

        assert " WHERE num_employees >= $1 " in query.text
        assert query.values == [0]

    def test_name_alone_takes_first_param(self):
        query = company_crud.build_find_all_query(CompanyFilter(name="hoo"))

        assert " WHERE LOWER(name) LIKE $1 " in query.text
        assert query.values == ["%hoo%"]


class TestCompanyFilter:
    """Tests for the company filter struct"""

    def test_accepts_external_names(self):
        filters = CompanyFilter.model_validate({"minEmployees": "10", "maxEmployees": 50, "nameLike": "net"})

        assert filters.min_employees == 10
        assert filters.max_employees == 50
        assert filters.name == "net"

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CompanyFilter(min_employees=50, max_employees=10)

        assert "minEmployees cannot be greater than maxEmployees" in str(exc_info.value)

    def test_equal_bounds_allowed(self):
        filters = CompanyFilter(min_employees=10, max_employees=10)
        assert filters.min_employees == filters.max_employees

    def test_unknown_filter_rejected(self):
        with pytest.raises(ValidationError):
            CompanyFilter.model_validate({"color": "red"})


class TestFindAll:
    """Tests for listing companies"""

    def test_no_filter(self, seeded_db):
        companies = company_crud.find_all(seeded_db)

        assert names(companies) == [
            "Acme Inc",
            "Globex Incorporated",
            "Hooli",
            "IncTech Labs",
            "Umbrella Inc",
        ]
        assert companies[0].model_dump(by_alias=True) == {
            "handle": "acme",
            "name": "Acme Inc",
            "description": "Anvils and rockets",
            "numEmployees": 25,
            "logoUrl": "http://acme.example/logo.png",
        }

    def test_min_employees(self, seeded_db):
        companies = company_crud.find_all(seeded_db, CompanyFilter(min_employees=30))

        assert names(companies) == ["Globex Incorporated", "Hooli"]

    def test_max_employees(self, seeded_db):
        companies = company_crud.find_all(seeded_db, CompanyFilter(max_employees=10))

        assert names(companies) == ["IncTech Labs", "Umbrella Inc"]

    def test_name_is_case_insensitive_substring(self, seeded_db):
        companies = company_crud.find_all(seeded_db, CompanyFilter(name="INC"))

        assert names(companies) == ["Acme Inc", "Globex Incorporated", "IncTech Labs", "Umbrella Inc"]

    def test_range_and_name_intersect(self, seeded_db):
        companies = company_crud.find_all(
            seeded_db,
            CompanyFilter(min_employees=10, max_employees=50, name="inc")
        )

        assert names(companies) == ["Acme Inc", "IncTech Labs"]

    def test_no_match(self, seeded_db):
        assert company_crud.find_all(seeded_db, CompanyFilter(name="nope")) == []


class TestCreate:
    """Tests for company creation"""

    new_company = CompanyCreate(
        handle="new",
        name="New Co",
        description="Brand new",
        num_employees=1,
        logo_url="http://new.img",
    )

    def test_create(self, seeded_db):
        company = company_crud.create(seeded_db, self.new_company)

        assert company.model_dump(by_alias=True) == {
            "handle": "new",
            "name": "New Co",
            "description": "Brand new",
            "numEmployees": 1,
            "logoUrl": "http://new.img",
        }
        assert company_crud.get(seeded_db, "new").name == "New Co"

    def test_duplicate_handle(self, seeded_db):
        company_crud.create(seeded_db, self.new_company)

        with pytest.raises(BadRequestError) as exc_info:
            company_crud.create(seeded_db, self.new_company)

        assert exc_info.value.message == "Duplicate company: new"

    def test_negative_employees_rejected(self):
        with pytest.raises(ValidationError):
            CompanyCreate(handle="bad", name="Bad", description="x", num_employees=-1)


class TestGet:
    """Tests for company retrieval"""

    def test_get_includes_jobs(self, seeded_db):
        company = company_crud.get(seeded_db, "acme")

        assert company.name == "Acme Inc"
        assert [job.title for job in company.jobs] == ["Data Engineer"]
        assert company.jobs[0].company_handle == "acme"

    def test_get_without_jobs(self, seeded_db):
        assert company_crud.get(seeded_db, "globex").jobs == []

    def test_not_found(self, seeded_db):
        with pytest.raises(NotFoundError) as exc_info:
            company_crud.get(seeded_db, "nope")

        assert exc_info.value.status_code == 404


class TestUpdate:
    """Tests for partial company updates"""

    def test_update_some_fields(self, seeded_db):
        company = company_crud.update(
            seeded_db,
            "acme",
            CompanyUpdate(name="Acme Corporation", num_employees=40)
        )

        assert company.model_dump(by_alias=True) == {
            "handle": "acme",
            "name": "Acme Corporation",
            "description": "Anvils and rockets",
            "numEmployees": 40,
            "logoUrl": "http://acme.example/logo.png",
        }

    def test_update_from_external_names(self, seeded_db):
        data = CompanyUpdate.model_validate({"logoUrl": None, "numEmployees": 0})
        company = company_crud.update(seeded_db, "acme", data)

        assert company.logo_url is None
        assert company.num_employees == 0
        assert company.name == "Acme Inc"

    def test_empty_update(self, seeded_db):
        with pytest.raises(EmptyUpdateError):
            company_crud.update(seeded_db, "acme", CompanyUpdate())

    def test_not_found(self, seeded_db):
        with pytest.raises(NotFoundError):
            company_crud.update(seeded_db, "nope", CompanyUpdate(name="Nope"))

    def test_handle_cannot_be_updated(self):
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({"handle": "other"})

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_required_column_cannot_be_cleared(self, field):
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({field: None})


class TestRemove:
    """Tests for company deletion"""

    def test_remove(self, seeded_db):
        company_crud.remove(seeded_db, "umbrella")

        with pytest.raises(NotFoundError):
            company_crud.get(seeded_db, "umbrella")

    def test_remove_takes_jobs_with_it(self, seeded_db):
        company_crud.remove(seeded_db, "acme")

        jobs = job_crud.find_all(seeded_db)
        assert [j.company_handle for j in jobs] == ["hooli", "inctech"]

    def test_not_found(self, seeded_db):
        with pytest.raises(NotFoundError):
            company_crud.remove(seeded_db, "nope")
