"""
Tests for the category, client and phone services.
"""
import pytest

from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.modules.categories.schemas import CategoryCreate
from boutique.modules.categories.service import CategoryService
from boutique.modules.clients.schemas import ClientCreate
from boutique.modules.clients.service import ClientService
from boutique.modules.phones.schemas import PhoneCreate
from boutique.modules.phones.service import PhoneService
from boutique.modules.sales.service import SellService


class TestCategoryService:

    def test_insert_and_find(self, db):
        service = CategoryService(db)

        category = service.insert(CategoryCreate(description="  Saias "))

        assert service.find_by_id(category.id).description == "Saias"

    def test_blank_description_is_rejected(self, db):
        with pytest.raises(IntegrityViolationError) as exc:
            CategoryService(db).insert(CategoryCreate(description="   "))

        assert exc.value.message == "Invalid description"

    def test_list_all_empty(self, db):
        with pytest.raises(NotFoundError) as exc:
            CategoryService(db).list_all()

        assert exc.value.message == "No category registered"

    def test_update_missing_category(self, db):
        with pytest.raises(NotFoundError) as exc:
            CategoryService(db).update(7, CategoryCreate(description="Casacos"))

        assert exc.value.message == "Category 7 not found"

    def test_update_replaces_description(self, seeded_db):
        category = CategoryService(seeded_db).update(2, CategoryCreate(description="Camisas"))

        assert category.id == 2
        assert category.description == "Camisas"

    def test_delete(self, seeded_db):
        service = CategoryService(seeded_db)

        service.delete(1)

        assert len(service.list_all()) == 2

    def test_description_search_is_case_insensitive(self, seeded_db):
        categories = CategoryService(seeded_db).find_by_description_containing_ignore_case("BLUS")

        assert [c.description for c in categories] == ["Blusas"]

    def test_description_search_not_found(self, seeded_db):
        with pytest.raises(NotFoundError) as exc:
            CategoryService(seeded_db).find_by_description_containing_ignore_case("sapato")

        assert exc.value.message == "No category found"

    def test_description_search_treats_wildcards_literally(self, seeded_db):
        service = CategoryService(seeded_db)

        for text in ("%", "_"):
            with pytest.raises(NotFoundError):
                service.find_by_description_containing_ignore_case(text)

    def test_description_search_matches_literal_percent(self, seeded_db):
        service = CategoryService(seeded_db)
        service.insert(CategoryCreate(description="Linho 100%"))

        categories = service.find_by_description_containing_ignore_case("0%")

        assert [c.description for c in categories] == ["Linho 100%"]


class TestClientService:

    def test_insert(self, db):
        client = ClientService(db).insert(ClientCreate(name="Maria", address="Rua A, 1"))

        assert client.id is not None
        assert client.address == "Rua A, 1"

    def test_blank_name_is_rejected(self, db):
        with pytest.raises(IntegrityViolationError) as exc:
            ClientService(db).insert(ClientCreate(name=""))

        assert exc.value.message == "Invalid name"

    def test_find_missing_client(self, db):
        with pytest.raises(NotFoundError) as exc:
            ClientService(db).find_by_id(5)

        assert exc.value.message == "Client 5 not found"

    def test_name_prefix_search(self, seeded_db):
        clients = ClientService(seeded_db).find_by_name_starting_with_ignore_case("cliente")

        assert len(clients) == 3

    def test_name_prefix_search_does_not_match_middle(self, seeded_db):
        with pytest.raises(NotFoundError) as exc:
            ClientService(seeded_db).find_by_name_starting_with_ignore_case("ente")

        assert exc.value.message == "No client found"

    def test_name_prefix_search_treats_wildcards_literally(self, seeded_db):
        service = ClientService(seeded_db)

        for prefix in ("%", "C_iente"):
            with pytest.raises(NotFoundError):
                service.find_by_name_starting_with_ignore_case(prefix)

    def test_update(self, seeded_db):
        client = ClientService(seeded_db).update(3, ClientCreate(name="Cliente Três"))

        assert client.name == "Cliente Três"
        assert client.address is None

    def test_delete_removes_sales_and_phones(self, seeded_db, today):
        ClientService(seeded_db).delete(1)

        assert len(SellService(seeded_db, today=lambda: today).list_all()) == 1
        assert [p.client_id for p in PhoneService(seeded_db).list_all()] == [2]


class TestPhoneService:

    def test_insert(self, seeded_db):
        phone = PhoneService(seeded_db).insert(PhoneCreate(number="21988887777", client_id=3))

        assert phone.client_id == 3
        assert phone.client.name == "Cliente 3"

    def test_null_client_is_rejected(self, seeded_db):
        with pytest.raises(IntegrityViolationError) as exc:
            PhoneService(seeded_db).insert(PhoneCreate(number="21988887777"))

        assert exc.value.message == "Invalid client"

    def test_blank_number_is_rejected(self, seeded_db):
        with pytest.raises(IntegrityViolationError) as exc:
            PhoneService(seeded_db).insert(PhoneCreate(number=" ", client_id=1))

        assert exc.value.message == "Invalid number"

    def test_unknown_client(self, seeded_db):
        with pytest.raises(NotFoundError) as exc:
            PhoneService(seeded_db).insert(PhoneCreate(number="21988887777", client_id=50))

        assert exc.value.message == "Client 50 not found"

    def test_find_by_number_orders_by_client(self, seeded_db):
        phones = PhoneService(seeded_db).find_by_number_order_by_client("11999990001")

        assert [p.client_id for p in phones] == [1, 2]

    def test_find_by_client(self, seeded_db):
        client = ClientService(seeded_db).find_by_id(1)

        phones = PhoneService(seeded_db).find_by_client(client)

        assert [p.id for p in phones] == [1, 2]

    def test_find_by_client_without_phones(self, seeded_db):
        client = ClientService(seeded_db).find_by_id(3)

        with pytest.raises(NotFoundError) as exc:
            PhoneService(seeded_db).find_by_client(client)

        assert exc.value.message == "No phone found"

    def test_delete_missing_phone(self, db):
        with pytest.raises(NotFoundError) as exc:
            PhoneService(db).delete(9)

        assert exc.value.message == "Phone 9 not found"

    def test_find_by_id(self, seeded_db):
        phone = PhoneService(seeded_db).find_by_id(2)

        assert phone.number == "11999990002"
        assert phone.client.name == "Cliente 1"

    def test_find_missing_phone(self, db):
        with pytest.raises(NotFoundError) as exc:
            PhoneService(db).find_by_id(9)

        assert exc.value.message == "Phone 9 not found"

    def test_update_replaces_number_and_client(self, seeded_db):
        service = PhoneService(seeded_db)

        phone = service.update(1, PhoneCreate(number=" 21977776666 ", client_id=3))

        assert phone.id == 1
        assert phone.number == "21977776666"
        assert service.find_by_id(1).client.name == "Cliente 3"

    def test_update_missing_phone(self, seeded_db):
        with pytest.raises(NotFoundError) as exc:
            PhoneService(seeded_db).update(9, PhoneCreate(number="21977776666", client_id=1))

        assert exc.value.message == "Phone 9 not found"

    def test_update_null_client_keeps_row(self, seeded_db):
        service = PhoneService(seeded_db)

        with pytest.raises(IntegrityViolationError) as exc:
            service.update(1, PhoneCreate(number="21977776666"))

        assert exc.value.message == "Invalid client"
        phone = service.find_by_id(1)
        assert (phone.number, phone.client_id) == ("11999990001", 1)

    def test_update_unknown_client(self, seeded_db):
        with pytest.raises(NotFoundError) as exc:
            PhoneService(seeded_db).update(1, PhoneCreate(number="21977776666", client_id=50))

        assert exc.value.message == "Client 50 not found"
