"""Create actions (ckan.logic.action.create)."""

import os
from typing import Any

from ckanaction.body import build_body
from ckanaction.client import CKAN


async def package_create(
    ckan: CKAN,
    name: str,
    *,
    title: str | None = None,
    private: bool | None = None,
    author: str | None = None,
    author_email: str | None = None,
    maintainer: str | None = None,
    maintainer_email: str | None = None,
    license_id: str | None = None,
    notes: str | None = None,
    url: str | None = None,
    version: str | None = None,
    state: str | None = None,
    type_: str | None = None,
    resources: list[dict] | None = None,
    tags: list[dict] | None = None,
    extras: list[dict] | None = None,
    plugin_data: dict | None = None,
    relationships_as_object: list[dict] | None = None,
    relationships_as_subject: list[dict] | None = None,
    groups: list[dict] | None = None,
    owner_org: str | None = None,
    custom_fields: dict[str, Any] | None = None,
) -> Any:
    """Create a dataset.

    ``custom_fields`` carries schema extensions (e.g. ckanext-scheming
    fields); its keys are sent as top-level fields and override any named
    argument with the same wire name.
    """
    body = build_body(
        {"name": name},
        {
            "title": title,
            "private": private,
            "author": author,
            "author_email": author_email,
            "maintainer": maintainer,
            "maintainer_email": maintainer_email,
            "license_id": license_id,
            "notes": notes,
            "url": url,
            "version": version,
            "state": state,
            "type": type_,
            "resources": resources,
            "tags": tags,
            "extras": extras,
            "plugin_data": plugin_data,
            "relationships_as_object": relationships_as_object,
            "relationships_as_subject": relationships_as_subject,
            "groups": groups,
            "owner_org": owner_org,
        },
        custom_fields,
    )
    return await ckan.post("package_create", body)


async def resource_create(
    ckan: CKAN,
    package_id: str,
    *,
    url: str | None = None,
    description: str | None = None,
    format: str | None = None,
    hash: str | None = None,
    name: str | None = None,
    resource_type: str | None = None,
    mimetype: str | None = None,
    mimetype_inner: str | None = None,
    cache_url: str | None = None,
    size: int | None = None,
    created: str | None = None,
    last_modified: str | None = None,
    cache_last_updated: str | None = None,
    upload: str | os.PathLike | None = None,
) -> Any:
    """Create a resource, optionally uploading ``upload`` as its file."""
    body = build_body(
        {"package_id": package_id},
        {
            "url": url,
            "description": description,
            "format": format,
            "hash": hash,
            "name": name,
            "resource_type": resource_type,
            "mimetype": mimetype,
            "mimetype_inner": mimetype_inner,
            "cache_url": cache_url,
            "size": size,
            "created": created,
            "last_modified": last_modified,
            "cache_last_updated": cache_last_updated,
        },
    )
    return await ckan.post("resource_create", body, upload=upload)


async def resource_view_create(
    ckan: CKAN,
    resource_id: str,
    title: str,
    view_type: str,
    *,
    description: str | None = None,
    config: str | None = None,
) -> Any:
    body = build_body(
        {"resource_id": resource_id, "title": title, "view_type": view_type},
        {"description": description, "config": config},
    )
    return await ckan.post("resource_view_create", body)


async def create_default_resource_views(
    ckan: CKAN,
    resource: dict,
    *,
    package: dict | None = None,
    create_datastore_views: bool | None = None,
) -> Any:
    body = build_body(
        {"resource": resource},
        {"package": package, "create_datastore_views": create_datastore_views},
    )
    return await ckan.post("create_default_resource_views", body)


async def package_create_default_resource_views(
    ckan: CKAN,
    package: dict,
    *,
    create_datastore_views: bool | None = None,
) -> Any:
    body = build_body(
        {"package": package},
        {"create_datastore_views": create_datastore_views},
    )
    return await ckan.post("package_create_default_resource_views", body)


async def package_relationship_create(
    ckan: CKAN,
    subject: str,
    object: str,
    type_: str,
    *,
    comment: str | None = None,
) -> Any:
    body = build_body(
        {"subject": subject, "object": object, "type": type_},
        {"comment": comment},
    )
    return await ckan.post("package_relationship_create", body)


async def member_create(
    ckan: CKAN,
    id: str,
    object: str,
    object_type: str,
    capacity: str,
) -> Any:
    body = build_body(
        {"id": id, "object": object, "object_type": object_type, "capacity": capacity}
    )
    return await ckan.post("member_create", body)


async def package_collaborator_create(
    ckan: CKAN,
    id: str,
    user_id: str,
    capacity: str,
) -> Any:
    body = build_body({"id": id, "user_id": user_id, "capacity": capacity})
    return await ckan.post("package_collaborator_create", body)


async def group_create(
    ckan: CKAN,
    name: str,
    *,
    id: str | None = None,
    title: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    type_: str | None = None,
    state: str | None = None,
    approval_status: str | None = None,
    extras: list[dict] | None = None,
    packages: list[dict] | None = None,
    groups: list[dict] | None = None,
    users: list[dict] | None = None,
) -> Any:
    body = build_body(
        {"name": name},
        {
            "id": id,
            "title": title,
            "description": description,
            "image_url": image_url,
            "type": type_,
            "state": state,
            "approval_status": approval_status,
            "extras": extras,
            "packages": packages,
            "groups": groups,
            "users": users,
        },
    )
    return await ckan.post("group_create", body)


async def organization_create(
    ckan: CKAN,
    name: str,
    *,
    id: str | None = None,
    title: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    state: str | None = None,
    approval_status: str | None = None,
    extras: list[dict] | None = None,
    packages: list[dict] | None = None,
    users: list[dict] | None = None,
) -> Any:
    body = build_body(
        {"name": name},
        {
            "id": id,
            "title": title,
            "description": description,
            "image_url": image_url,
            "state": state,
            "approval_status": approval_status,
            "extras": extras,
            "packages": packages,
            "users": users,
        },
    )
    return await ckan.post("organization_create", body)


async def user_create(
    ckan: CKAN,
    name: str,
    email: str,
    password: str,
    *,
    id: str | None = None,
    fullname: str | None = None,
    about: str | None = None,
    image_url: str | None = None,
    plugin_extras: dict | None = None,
    with_apitoken: bool | None = None,
) -> Any:
    body = build_body(
        {"name": name, "email": email, "password": password},
        {
            "id": id,
            "fullname": fullname,
            "about": about,
            "image_url": image_url,
            "plugin_extras": plugin_extras,
            "with_apitoken": with_apitoken,
        },
    )
    return await ckan.post("user_create", body)


async def user_invite(ckan: CKAN, email: str, group_id: str, role: str) -> Any:
    body = build_body({"email": email, "group_id": group_id, "role": role})
    return await ckan.post("user_invite", body)


async def vocabulary_create(ckan: CKAN, name: str, tags: list[dict]) -> Any:
    return await ckan.post("vocabulary_create", build_body({"name": name, "tags": tags}))


async def tag_create(ckan: CKAN, name: str, vocabulary_id: str) -> Any:
    body = build_body({"name": name, "vocabulary_id": vocabulary_id})
    return await ckan.post("tag_create", body)


async def follow_user(ckan: CKAN, id: str) -> Any:
    return await ckan.post("follow_user", build_body({"id": id}))


async def follow_dataset(ckan: CKAN, id: str) -> Any:
    return await ckan.post("follow_dataset", build_body({"id": id}))


async def follow_group(ckan: CKAN, id: str) -> Any:
    return await ckan.post("follow_group", build_body({"id": id}))


async def group_member_create(ckan: CKAN, id: str, username: str, role: str) -> Any:
    body = build_body({"id": id, "username": username, "role": role})
    return await ckan.post("group_member_create", body)


async def organization_member_create(ckan: CKAN, id: str, username: str, role: str) -> Any:
    body = build_body({"id": id, "username": username, "role": role})
    return await ckan.post("organization_member_create", body)


async def api_token_create(ckan: CKAN, user: str, name: str) -> Any:
    return await ckan.post("api_token_create", build_body({"user": user, "name": name}))
