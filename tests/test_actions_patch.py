import pytest
from conftest import multipart_parts

from ckanaction.actions import patch


@pytest.mark.asyncio
async def test_package_patch_only_id_required(ckan, fake):
    await patch.package_patch(ckan, "abc-123", notes="Updated notes")
    assert fake.action == "package_patch"
    assert fake.body() == {"id": "abc-123", "notes": "Updated notes"}


@pytest.mark.asyncio
async def test_package_patch_private_omitted_unless_given(ckan, fake):
    await patch.package_patch(ckan, "abc-123", title="Rivers")
    assert "private" not in fake.body()
    await patch.package_patch(ckan, "abc-123", private=False)
    assert fake.body() == {"id": "abc-123", "private": False}


@pytest.mark.asyncio
async def test_package_patch_custom_fields_win(ckan, fake):
    await patch.package_patch(ckan, "abc-123", version="1.0", custom_fields={"version": "2.0"})
    assert fake.body() == {"id": "abc-123", "version": "2.0"}


@pytest.mark.asyncio
async def test_resource_patch(ckan, fake):
    await patch.resource_patch(ckan, "res-1", format="GeoJSON")
    assert fake.body() == {"id": "res-1", "format": "GeoJSON"}


@pytest.mark.asyncio
async def test_resource_patch_with_upload(authed, fake, tmp_path):
    data = tmp_path / "shapes.geojson"
    data.write_bytes(b'{"type": "FeatureCollection"}')
    await patch.resource_patch(authed, "res-1", upload=data)
    assert fake.last.headers["authorization"] == "tok-123"
    assert multipart_parts(fake.last) == {
        "id": (None, b"res-1"),
        "upload": ("shapes.geojson", b'{"type": "FeatureCollection"}'),
    }


@pytest.mark.asyncio
async def test_group_patch(ckan, fake):
    await patch.group_patch(ckan, "science", title="Science & Research")
    assert fake.body() == {"id": "science", "title": "Science & Research"}


@pytest.mark.asyncio
async def test_organization_patch(ckan, fake):
    await patch.organization_patch(ckan, "env", state="active")
    assert fake.body() == {"id": "env", "state": "active"}


@pytest.mark.asyncio
async def test_user_patch(ckan, fake):
    await patch.user_patch(ckan, "alice", about="Hydrologist")
    assert fake.body() == {"id": "alice", "about": "Hydrologist"}
