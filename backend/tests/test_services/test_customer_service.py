"""
Unit tests for CustomerService

Run against the in-memory repository; no database required.
"""
from uuid import uuid4

import pytest

from kiosk.core.exceptions import ConflictError, NotFoundError, ValidationError


class TestCreateCustomer:
    """Test create_customer"""

    def test_create_assigns_id_and_created_at(self, customer_service, sample_customer_data):
        customer = customer_service.create_customer(**sample_customer_data)

        assert customer.id is not None
        assert customer.created_at is not None
        assert customer.created_at.tzinfo is not None
        assert customer.updated_at is None

    def test_round_trip(self, customer_service, sample_customer_data):
        created = customer_service.create_customer(**sample_customer_data)
        fetched = customer_service.get_customer_by_id(created.id)

        assert fetched == created

    def test_duplicate_email_raises_conflict(self, customer_service, customer_repository, sample_customer_data):
        customer_service.create_customer(**sample_customer_data)

        with pytest.raises(ConflictError) as exc_info:
            customer_service.create_customer("Janet", "Other", "jane@x.com")

        assert exc_info.value.field == "email"
        assert exc_info.value.value == "jane@x.com"
        assert "jane@x.com" in str(exc_info.value)
        assert customer_repository.adds == 1

    @pytest.mark.parametrize("field,kwargs", [
        ("first_name", {"first_name": "   "}),
        ("last_name", {"last_name": ""}),
        ("email", {"email": "not-an-email"}),
        ("email", {"email": ""}),
        ("first_name", {"first_name": "x" * 101}),
        ("phone", {"phone": "1" * 21}),
    ])
    def test_invalid_fields_raise_validation_error(self, customer_service, customer_repository,
                                                   sample_customer_data, field, kwargs):
        data = {**sample_customer_data, **kwargs}

        with pytest.raises(ValidationError) as exc_info:
            customer_service.create_customer(**data)

        assert exc_info.value.field == field
        assert customer_repository.writes == 0

    def test_non_string_name_is_a_validation_error(self, customer_service, customer_repository):
        with pytest.raises(ValidationError) as exc_info:
            customer_service.create_customer(None, "Doe", "jane@x.com")

        assert exc_info.value.field == "first_name"
        assert customer_repository.writes == 0


class TestUpdateCustomer:
    """Test update_customer"""

    def test_update_refreshes_updated_at(self, customer_service, sample_customer_data):
        customer = customer_service.create_customer(**sample_customer_data)
        customer.phone = "555-0100"

        customer_service.update_customer(customer)

        stored = customer_service.get_customer_by_id(customer.id)
        assert stored.phone == "555-0100"
        assert stored.updated_at is not None

    def test_update_keeps_own_email(self, customer_service, sample_customer_data):
        customer = customer_service.create_customer(**sample_customer_data)
        customer.first_name = "Janet"

        customer_service.update_customer(customer)

        assert customer_service.get_customer_by_id(customer.id).first_name == "Janet"

    def test_update_to_another_customers_email_conflicts(self, customer_service, sample_customer_data):
        customer_service.create_customer(**sample_customer_data)
        other = customer_service.create_customer("Bob", "Roe", "bob@x.com")
        other.email = "jane@x.com"

        with pytest.raises(ConflictError):
            customer_service.update_customer(other)

    def test_update_missing_customer_raises_not_found(self, customer_service, customer_repository,
                                                      sample_customer_data):
        customer = customer_service.create_customer(**sample_customer_data)
        customer.id = uuid4()

        with pytest.raises(NotFoundError):
            customer_service.update_customer(customer)

        assert customer_repository.updates == 0


class TestDeleteAndQueries:
    """Test delete, counts and search"""

    def test_delete_is_idempotent(self, customer_service, sample_customer_data):
        customer = customer_service.create_customer(**sample_customer_data)

        customer_service.delete_customer(customer.id)
        customer_service.delete_customer(customer.id)
        customer_service.delete_customer(uuid4())

        assert customer_service.get_customer_by_id(customer.id) is None
        assert not customer_service.customer_exists(customer.id)
        assert customer_service.get_customer_count() == 0

    @pytest.mark.parametrize("term", ["JOHN", "john"])
    def test_search_is_case_insensitive(self, customer_service, term):
        customer_service.create_customer("John", "Doe", "jd@example.com")
        customer_service.create_customer("Alice", "Smith", "alice@example.com")

        results = customer_service.search_customers(term)

        assert [c.full_name for c in results] == ["John Doe"]

    def test_search_matches_email(self, customer_service):
        customer_service.create_customer("Alice", "Smith", "alice@example.com")
        assert len(customer_service.search_customers("EXAMPLE")) == 1

    def test_blank_search_returns_everyone(self, customer_service):
        customer_service.create_customer("John", "Doe", "jd@example.com")
        customer_service.create_customer("Alice", "Smith", "alice@example.com")

        assert len(customer_service.search_customers("  ")) == 2

    def test_get_all_is_ordered_by_last_then_first_name(self, customer_service):
        customer_service.create_customer("Zed", "Adams", "z@x.com")
        customer_service.create_customer("Amy", "Brown", "amy@x.com")
        customer_service.create_customer("Al", "Adams", "al@x.com")

        names = [c.full_name for c in customer_service.get_all_customers()]

        assert names == ["Al Adams", "Zed Adams", "Amy Brown"]
