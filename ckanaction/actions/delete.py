"""Delete, purge and unfollow actions (ckan.logic.action.delete)."""

from typing import Any

from ckanaction.body import build_body
from ckanaction.client import CKAN


async def user_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("user_delete", build_body({"id": id}))


async def package_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("package_delete", build_body({"id": id}))


async def dataset_purge(ckan: CKAN, id: str) -> Any:
    """Remove a dataset and its resources permanently (sysadmin only)."""
    return await ckan.post("dataset_purge", build_body({"id": id}))


async def resource_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("resource_delete", build_body({"id": id}))


async def resource_view_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("resource_view_delete", build_body({"id": id}))


async def resource_view_clear(ckan: CKAN, *, view_types: list[str] | None = None) -> Any:
    return await ckan.post("resource_view_clear", build_body(optional={"view_types": view_types}))


async def package_relationship_delete(ckan: CKAN, subject: str, object: str, type_: str) -> Any:
    body = build_body({"subject": subject, "object": object, "type": type_})
    return await ckan.post("package_relationship_delete", body)


async def member_delete(ckan: CKAN, id: str, object: str, object_type: str) -> Any:
    body = build_body({"id": id, "object": object, "object_type": object_type})
    return await ckan.post("member_delete", body)


async def package_collaborator_delete(ckan: CKAN, id: str, user_id: str) -> Any:
    body = build_body({"id": id, "user_id": user_id})
    return await ckan.post("package_collaborator_delete", body)


async def group_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_delete", build_body({"id": id}))


async def organization_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_delete", build_body({"id": id}))


async def group_purge(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_purge", build_body({"id": id}))


async def organization_purge(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_purge", build_body({"id": id}))


async def task_status_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("task_status_delete", build_body({"id": id}))


async def vocabulary_delete(ckan: CKAN, id: str) -> Any:
    return await ckan.post("vocabulary_delete", build_body({"id": id}))


async def tag_delete(ckan: CKAN, id: str, vocabulary_id: str) -> Any:
    body = build_body({"id": id, "vocabulary_id": vocabulary_id})
    return await ckan.post("tag_delete", body)


async def unfollow_user(ckan: CKAN, id: str) -> Any:
    return await ckan.post("unfollow_user", build_body({"id": id}))


async def unfollow_dataset(ckan: CKAN, id: str) -> Any:
    return await ckan.post("unfollow_dataset", build_body({"id": id}))


async def unfollow_group(ckan: CKAN, id: str) -> Any:
    return await ckan.post("unfollow_group", build_body({"id": id}))


async def group_member_delete(ckan: CKAN, id: str, username: str) -> Any:
    body = build_body({"id": id, "username": username})
    return await ckan.post("group_member_delete", body)


async def organization_member_delete(ckan: CKAN, id: str, username: str) -> Any:
    body = build_body({"id": id, "username": username})
    return await ckan.post("organization_member_delete", body)


async def job_clear(ckan: CKAN, *, queues: list[str] | None = None) -> Any:
    return await ckan.post("job_clear", build_body(optional={"queues": queues}))


async def job_cancel(ckan: CKAN, id: str) -> Any:
    return await ckan.post("job_cancel", build_body({"id": id}))


async def api_token_revoke(ckan: CKAN, token: str, *, jti: str | None = None) -> Any:
    return await ckan.post("api_token_revoke", build_body({"token": token}, {"jti": jti}))
