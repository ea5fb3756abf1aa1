from fastmcp import FastMCP

from ckanaction.actions import get
from ckanaction.client import CKAN


def create_mcp_server(ckan: CKAN) -> FastMCP:
    mcp = FastMCP(
        name="ckan",
        instructions=(
            "Read-only access to a CKAN open data catalog. Use these tools to "
            "search datasets, inspect datasets and resources, and browse "
            "organizations, groups, tags and licenses. Every tool returns CKAN's "
            "raw response: check 'success' before reading 'result'."
        ),
    )

    @mcp.tool()
    async def status_show() -> dict:
        """Get the CKAN version, site URL and enabled extensions."""
        return await get.status_show(ckan)

    @mcp.tool()
    async def package_search(
        q: str | None = None,
        fq: str | None = None,
        rows: int | None = None,
        start: int | None = None,
        sort: str | None = None,
    ) -> dict:
        """Search datasets. q is a Solr query (e.g. 'water quality'), fq a
        filter query (e.g. 'organization:env-agency'), rows/start paginate,
        sort looks like 'metadata_modified desc'."""
        return await get.package_search(ckan, q=q, fq=fq, rows=rows, start=start, sort=sort)

    @mcp.tool()
    async def package_show(id: str) -> dict:
        """Get one dataset, with its resources, by name or id."""
        return await get.package_show(ckan, id)

    @mcp.tool()
    async def resource_show(id: str) -> dict:
        """Get one resource (file or API link of a dataset) by id."""
        return await get.resource_show(ckan, id)

    @mcp.tool()
    async def organization_list(
        all_fields: bool | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> dict:
        """List organizations. Names only unless all_fields is true."""
        return await get.organization_list(ckan, all_fields=all_fields, limit=limit, offset=offset)

    @mcp.tool()
    async def group_list(
        all_fields: bool | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> dict:
        """List groups. Names only unless all_fields is true."""
        return await get.group_list(ckan, all_fields=all_fields, limit=limit, offset=offset)

    @mcp.tool()
    async def tag_list(query: str | None = None) -> dict:
        """List free tags, optionally only those matching query."""
        return await get.tag_list(ckan, query=query)

    @mcp.tool()
    async def license_list() -> dict:
        """List the licenses datasets can use."""
        return await get.license_list(ckan)

    return mcp
