"""Patch actions (ckan.logic.action.patch): only the fields given are changed."""

import os
from typing import Any

from ckanaction.body import build_body
from ckanaction.client import CKAN


async def package_patch(
    ckan: CKAN,
    id: str,
    *,
    name: str | None = None,
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
    body = build_body(
        {"id": id},
        {
            "name": name,
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
    return await ckan.post("package_patch", body)


async def resource_patch(
    ckan: CKAN,
    id: str,
    *,
    package_id: str | None = None,
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
    """Patch a resource; pass ``upload`` to replace its file."""
    body = build_body(
        {"id": id},
        {
            "package_id": package_id,
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
    return await ckan.post("resource_patch", body, upload=upload)


async def group_patch(
    ckan: CKAN,
    id: str,
    *,
    name: str | None = None,
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
        {"id": id},
        {
            "name": name,
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
    return await ckan.post("group_patch", body)


async def organization_patch(
    ckan: CKAN,
    id: str,
    *,
    name: str | None = None,
    title: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    state: str | None = None,
    approval_status: str | None = None,
    extras: list[dict] | None = None,
    users: list[dict] | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {
            "name": name,
            "title": title,
            "description": description,
            "image_url": image_url,
            "state": state,
            "approval_status": approval_status,
            "extras": extras,
            "users": users,
        },
    )
    return await ckan.post("organization_patch", body)


async def user_patch(
    ckan: CKAN,
    id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
    fullname: str | None = None,
    about: str | None = None,
    image_url: str | None = None,
    plugin_extras: dict | None = None,
    with_apitoken: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {
            "name": name,
            "email": email,
            "password": password,
            "fullname": fullname,
            "about": about,
            "image_url": image_url,
            "plugin_extras": plugin_extras,
            "with_apitoken": with_apitoken,
        },
    )
    return await ckan.post("user_patch", body)
