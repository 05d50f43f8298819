"""Integration tests for JsonFileEntityStore and the typed repositories"""

import asyncio
import json
import logging
import pytest
from src.adapter.repositories.json_entity_store import JsonFileEntityStore
from src.app.repositories.entity_store import Collection
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


@pytest.mark.asyncio
class TestCollections:
    """Collection reads and writes"""

    async def test_missing_collection_is_empty(self, entity_store):
        assert await entity_store.get_all(Collection.INVOICES) == []
        assert await entity_store.get_by_id(Collection.INVOICES, "nope") is None

    async def test_upsert_inserts_then_replaces_in_place(self, entity_store):
        """
        Given: Three stored records
        When: The middle one is upserted again
        Then: It is replaced at the same position
        """
        # Arrange
        for record_id in ("a", "b", "c"):
            await entity_store.upsert(Collection.CLIENTS, {"id": record_id, "name": record_id.upper()})

        # Act
        saved = await entity_store.upsert(Collection.CLIENTS, {"id": "b", "name": "Bee"})

        # Assert
        assert saved is True
        records = await entity_store.get_all(Collection.CLIENTS)
        assert [record["id"] for record in records] == ["a", "b", "c"]
        assert records[1]["name"] == "Bee"

    async def test_delete(self, entity_store):
        await entity_store.upsert(Collection.PRODUCTS, {"id": "p1", "name": "One"})
        await entity_store.upsert(Collection.PRODUCTS, {"id": "p2", "name": "Two"})

        assert await entity_store.delete(Collection.PRODUCTS, "p1") is True

        assert [r["id"] for r in await entity_store.get_all(Collection.PRODUCTS)] == ["p2"]

    async def test_delete_unknown_id_is_noop(self, entity_store):
        await entity_store.upsert(Collection.PRODUCTS, {"id": "p1", "name": "One"})

        assert await entity_store.delete(Collection.PRODUCTS, "ghost") is True
        assert len(await entity_store.get_all(Collection.PRODUCTS)) == 1

    async def test_files_written_as_json_arrays(self, entity_store, data_dir):
        await entity_store.upsert(Collection.INVOICES, {"id": "inv-1"})

        assert json.loads((data_dir / "invoices.json").read_text(encoding="utf-8")) == [{"id": "inv-1"}]
        assert not (data_dir / "invoices.json.tmp").exists()

    async def test_concurrent_upserts_all_succeed(self, entity_store, data_dir):
        """
        Given: Five stored invoices
        When: Eight upserts to the same collection run concurrently
        Then: Every write succeeds and the file stays a valid array
        """
        # Arrange
        for record_id in ("a", "b", "c", "d", "e"):
            await entity_store.upsert(Collection.INVOICES, {"id": record_id})

        # Act
        results = await asyncio.gather(
            *(
                entity_store.upsert(Collection.INVOICES, {"id": f"new-{n}", "totalAmount": str(n)})
                for n in range(8)
            )
        )

        # Assert
        assert results == [True] * 8
        ids = [record["id"] for record in await entity_store.get_all(Collection.INVOICES)]
        assert ids[:5] == ["a", "b", "c", "d", "e"]
        assert len(ids) >= 6
        assert not (data_dir / "invoices.json.tmp").exists()

    async def test_concurrent_updates_last_write_wins(self, entity_store):
        await entity_store.upsert(Collection.CLIENTS, {"id": "c1", "name": "Start"})

        results = await asyncio.gather(
            *(entity_store.upsert(Collection.CLIENTS, {"id": "c1", "name": f"Edit {n}"}) for n in range(4))
        )

        assert all(results)
        records = await entity_store.get_all(Collection.CLIENTS)
        assert len(records) == 1
        assert records[0]["name"] in {f"Edit {n}" for n in range(4)}


@pytest.mark.asyncio
class TestDegradedStorage:
    """Storage failures degrade instead of raising"""

    async def test_corrupt_collection_reads_empty(self, entity_store, data_dir, caplog):
        # Arrange
        data_dir.mkdir(parents=True)
        (data_dir / "clients.json").write_text("{not json", encoding="utf-8")

        # Act
        with caplog.at_level(logging.ERROR):
            records = await entity_store.get_all(Collection.CLIENTS)

        # Assert
        assert records == []
        assert "Error reading clients" in caplog.text

    async def test_next_write_replaces_corrupt_collection(self, entity_store, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "clients.json").write_text("garbage", encoding="utf-8")

        await entity_store.upsert(Collection.CLIENTS, {"id": "c1", "name": "Acme"})

        assert await entity_store.get_all(Collection.CLIENTS) == [{"id": "c1", "name": "Acme"}]

    async def test_non_array_collection_reads_empty(self, entity_store, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "products.json").write_text('{"id": "p1"}', encoding="utf-8")

        assert await entity_store.get_all(Collection.PRODUCTS) == []

    async def test_write_failure_returns_false(self, tmp_path, caplog):
        # Arrange
        blocker = tmp_path / "occupied"
        blocker.write_text("not a directory", encoding="utf-8")
        store = JsonFileEntityStore(blocker)

        # Act
        saved = await store.upsert(Collection.CLIENTS, {"id": "c1", "name": "Acme"})

        # Assert
        assert saved is False
        assert "Error saving clients" in caplog.text


@pytest.mark.asyncio
class TestBusinessProfile:

    async def test_absent_until_set(self, entity_store):
        assert await entity_store.get_business() is None

    async def test_set_and_get(self, entity_store, data_dir):
        await entity_store.set_business({"name": "Studio", "currency": "EUR"})

        assert await entity_store.get_business() == {"name": "Studio", "currency": "EUR"}
        assert json.loads((data_dir / "business.json").read_text(encoding="utf-8"))["name"] == "Studio"

    async def test_non_object_profile_ignored(self, entity_store, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "business.json").write_text("[1, 2]", encoding="utf-8")

        assert await entity_store.get_business() is None


@pytest.mark.asyncio
class TestTypedRepositories:

    async def test_invoice_round_trip_camel_case(self, invoice_repo, data_dir):
        """
        Given: An invoice with items saved through the repository
        When: It is read back and the raw file inspected
        Then: Fields survive and are stored camelCase with recomputed totals
        """
        # Arrange
        invoice = Invoice(
            id="inv-1",
            invoice_number="INV-0001",
            client_name="Acme",
            items=[InvoiceItem(id="i1", description="Design", quantity="2", price="10.00")],
            tax_rate="10",
            status=InvoiceStatus.PENDING,
        )

        # Act
        await invoice_repo.save(invoice)
        loaded = await invoice_repo.get("inv-1")

        # Assert
        assert loaded.items[0].amount == "20.00"
        assert loaded.total_amount == "22.00"
        assert loaded.status == InvoiceStatus.PENDING
        raw = json.loads((data_dir / "invoices.json").read_text(encoding="utf-8"))[0]
        assert raw["invoiceNumber"] == "INV-0001"
        assert raw["totalAmount"] == "22.00"
        assert raw["items"][0]["amount"] == "20.00"

    async def test_unknown_fields_survive_load_and_save(self, entity_store, invoice_repo):
        await entity_store.upsert(Collection.INVOICES, {"id": "inv-1", "invoiceNumber": "INV-0001", "legacyFlag": True})

        invoice = await invoice_repo.get("inv-1")
        await invoice_repo.save(invoice)

        assert (await entity_store.get_by_id(Collection.INVOICES, "inv-1"))["legacyFlag"] is True

    async def test_invalid_records_skipped(self, entity_store, client_repo, caplog):
        # Arrange
        await entity_store.upsert(Collection.CLIENTS, {"id": "c1", "name": "Acme"})
        await entity_store.upsert(Collection.CLIENTS, {"id": "c2"})

        # Act
        clients = await client_repo.list_all()

        # Assert
        assert [client.id for client in clients] == ["c1"]
        assert "Skipping invalid clients record c2" in caplog.text

    async def test_list_preserves_storage_order(self, client_repo):
        for name in ("Zeta", "Alpha", "Mid"):
            await client_repo.save(Client(name=name))

        assert [client.name for client in await client_repo.list_all()] == ["Zeta", "Alpha", "Mid"]

    async def test_business_repository(self, business_repo, sample_business):
        assert await business_repo.get() is None

        await business_repo.save(sample_business)

        loaded = await business_repo.get()
        assert loaded.name == "Studio Nine"
        assert loaded.tax_id == "US-99-1234567"
