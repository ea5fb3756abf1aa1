import logging

from ckanaction import config
from ckanaction.client import CKAN
from ckanaction.mcp.server import create_mcp_server


def main():
    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(level=config.LOG_LEVEL.upper())

    client = CKAN.from_env()
    mcp = create_mcp_server(client)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
