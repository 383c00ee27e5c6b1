import pytest

from productdash.integrations.clients.mocks import MemoryCatalogStore
from productdash.integrations.policy.errors import RemoteConflict


@pytest.mark.asyncio
async def test_empty_store_has_no_sha():
    store = MemoryCatalogStore()
    snapshot = await store.fetch_catalog()
    assert snapshot.products == []
    assert snapshot.sha is None


@pytest.mark.asyncio
async def test_write_with_current_sha_replaces_content():
    store = MemoryCatalogStore()
    sha = await store.write_catalog([{"id": "a"}], "Tambah produk: A", None)

    snapshot = await store.fetch_catalog()
    assert snapshot.products == [{"id": "a"}]
    assert snapshot.sha == sha
    assert store.commits == ["Tambah produk: A"]


@pytest.mark.asyncio
async def test_stale_sha_is_rejected_without_changes():
    store = MemoryCatalogStore([{"id": "a"}])
    stale = store.sha
    await store.write_catalog([], "Hapus produk: A", stale)

    with pytest.raises(RemoteConflict):
        await store.write_catalog([{"id": "b"}], "Tambah produk: B", stale)
    assert store.products == []
    assert store.commits == ["Hapus produk: A"]


@pytest.mark.asyncio
async def test_fetched_snapshot_is_a_copy():
    store = MemoryCatalogStore([{"id": "a"}])
    snapshot = await store.fetch_catalog()
    snapshot.products.append({"id": "b"})
    assert store.products == [{"id": "a"}]
