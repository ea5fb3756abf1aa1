import pytest
from ckanaction.mcp.server import create_mcp_server


def test_mcp_server_name(ckan):
    mcp = create_mcp_server(ckan)
    assert mcp.name == "ckan"


@pytest.mark.asyncio
async def test_mcp_server_has_read_only_tools(ckan):
    mcp = create_mcp_server(ckan)
    tools = await mcp.list_tools()
    assert {t.name for t in tools} == {
        "status_show",
        "package_search",
        "package_show",
        "resource_show",
        "organization_list",
        "group_list",
        "tag_list",
        "license_list",
    }


@pytest.mark.asyncio
async def test_mcp_package_search_omits_unset_filters(ckan, fake):
    mcp = create_mcp_server(ckan)
    await mcp.call_tool("package_search", {"q": "rivers", "rows": 5})
    assert fake.action == "package_search"
    assert fake.body() == {"q": "rivers", "rows": 5}
