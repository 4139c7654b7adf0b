"""Tests for ResourceService orchestration."""

import asyncio

import pytest

from order_management_api.app.core.errors import DuplicateKey, RecordNotFound, ValidationFailed
from order_management_api.app.services.entities import ORDER, PAYMENT, SUPPLIER
from order_management_api.app.services.resource_service import ResourceService


def run(coro):
    return asyncio.run(coro)


class TestResourceService:
    def test_create_assigns_id(self, db_path, supplier_data):
        service = ResourceService(SUPPLIER)

        record = run(service.create(supplier_data))

        assert len(record["id"]) == 32
        assert run(service.get(record["id"])) == record

    def test_invalid_input_writes_nothing(self, db_path, payment_data):
        service = ResourceService(PAYMENT)
        payment_data["PaymentAmount"] = -5

        with pytest.raises(ValidationFailed):
            run(service.create(payment_data))

        assert run(service.list()) == []

    def test_invalid_update_leaves_record_alone(self, db_path, order_data):
        service = ResourceService(ORDER)
        record = run(service.create(order_data))

        with pytest.raises(ValidationFailed):
            run(service.update(record["id"], {"OrderID": "ORD-2"}))

        assert run(service.get(record["id"])) == record

    def test_get_missing(self, db_path):
        with pytest.raises(RecordNotFound) as exc_info:
            run(ResourceService(ORDER).get("nope"))

        assert str(exc_info.value) == "Order not found"

    def test_update_missing(self, db_path, order_data):
        service = ResourceService(ORDER)

        with pytest.raises(RecordNotFound):
            run(service.update("nope", order_data))

        assert run(service.list()) == []

    def test_delete_twice(self, db_path, supplier_data):
        service = ResourceService(SUPPLIER)
        record = run(service.create(supplier_data))

        run(service.delete(record["id"]))
        with pytest.raises(RecordNotFound):
            run(service.delete(record["id"]))

    def test_duplicate_leaves_one_record(self, db_path, supplier_data):
        service = ResourceService(SUPPLIER)
        run(service.create(supplier_data))

        with pytest.raises(DuplicateKey):
            run(service.create(supplier_data))

        assert len(run(service.list())) == 1

    def test_lookup_by_business_key(self, db_path, supplier_data):
        service = ResourceService(SUPPLIER)
        record = run(service.create(supplier_data))

        assert run(service.get_by_business_key("S1")) == record
        with pytest.raises(RecordNotFound):
            run(service.get_by_business_key("S2"))

    def test_entity_without_business_key(self, db_path, order_data):
        service = ResourceService(ORDER)
        run(service.create(order_data))

        with pytest.raises(RecordNotFound):
            run(service.get_by_business_key("ORD-1"))


class TestReferenceChecks:
    def test_references_unchecked_by_default(self, db_path, payment_data):
        record = run(ResourceService(PAYMENT).create(payment_data))

        assert record["OrderID"] == "ORD-1"

    def test_unknown_reference_rejected_when_enforced(self, db_path, payment_data):
        service = ResourceService(PAYMENT, enforce_references=True)

        with pytest.raises(ValidationFailed) as exc_info:
            run(service.create(payment_data))

        assert exc_info.value.violations == [
            {"field": "OrderID", "message": "Order 'ORD-1' does not exist"}
        ]
        assert run(service.list()) == []

    def test_known_reference_accepted_when_enforced(self, db_path, order_data, payment_data):
        run(ResourceService(ORDER).create(order_data))
        service = ResourceService(PAYMENT, enforce_references=True)

        record = run(service.create(payment_data))

        assert record["PaymentID"] == "PAY-1"
