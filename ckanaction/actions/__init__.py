from ckanaction.actions import create, delete, get, patch, update

# Parameterless reads that CKAN serves over GET
GET_ACTIONS = frozenset({"license_list", "status_show", "vocabulary_list", "config_option_list"})

__all__ = ["GET_ACTIONS", "create", "delete", "get", "patch", "update"]
