import os

API_PATH = "/api/3/action/"

# Defaults for CKAN.from_env(), the CLI and the MCP server
CKAN_URL = os.environ.get("CKANACTION_URL", "http://localhost:5000")
CKAN_TOKEN = os.environ.get("CKANACTION_TOKEN") or None
CKAN_TIMEOUT = float(os.environ.get("CKANACTION_TIMEOUT", "30.0"))

LOG_LEVEL = os.environ.get("CKANACTION_LOG_LEVEL", "WARNING")
