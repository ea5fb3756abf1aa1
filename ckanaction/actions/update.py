"""Update actions (ckan.logic.action.update).

Updates replace the whole object: fields left out are cleared by CKAN. Use
the patch actions to change only some fields.
"""

import os
from typing import Any

from ckanaction.body import build_body
from ckanaction.client import CKAN


async def resource_update(
    ckan: CKAN,
    id: str,
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
    body = build_body(
        {"id": id, "package_id": package_id},
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
    return await ckan.post("resource_update", body, upload=upload)


async def resource_view_update(
    ckan: CKAN,
    id: str,
    resource_id: str,
    title: str,
    view_type: str,
    *,
    description: str | None = None,
    config: str | None = None,
) -> Any:
    body = build_body(
        {"id": id, "resource_id": resource_id, "title": title, "view_type": view_type},
        {"description": description, "config": config},
    )
    return await ckan.post("resource_view_update", body)


async def resource_view_reorder(ckan: CKAN, id: str, order: list[str]) -> Any:
    return await ckan.post("resource_view_reorder", build_body({"id": id, "order": order}))


async def package_update(
    ckan: CKAN,
    id: str,
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
    body = build_body(
        {"id": id, "name": name},
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
    return await ckan.post("package_update", body)


async def package_revise(
    ckan: CKAN,
    match: dict,
    update: dict,
    *,
    filter: list[str] | None = None,
    include: list[str] | None = None,
) -> Any:
    """Apply ``update`` to the dataset selected by ``match``.

    ``filter`` removes keys before the update is merged; ``include`` limits
    the fields returned.
    """
    body = build_body(
        {"match": match, "update": update},
        {"filter": filter, "include": include},
    )
    return await ckan.post("package_revise", body)


async def package_resource_reorder(ckan: CKAN, id: str, order: list[str]) -> Any:
    return await ckan.post("package_resource_reorder", build_body({"id": id, "order": order}))


async def package_relationship_update(
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
    return await ckan.post("package_relationship_update", body)


async def group_update(
    ckan: CKAN,
    id: str,
    name: str,
    *,
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
        {"id": id, "name": name},
        {
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
    return await ckan.post("group_update", body)


async def organization_update(
    ckan: CKAN,
    id: str,
    name: str,
    *,
    title: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    state: str | None = None,
    approval_status: str | None = None,
    extras: list[dict] | None = None,
    users: list[dict] | None = None,
) -> Any:
    body = build_body(
        {"id": id, "name": name},
        {
            "title": title,
            "description": description,
            "image_url": image_url,
            "state": state,
            "approval_status": approval_status,
            "extras": extras,
            "users": users,
        },
    )
    return await ckan.post("organization_update", body)


async def user_update(
    ckan: CKAN,
    id: str,
    name: str,
    email: str,
    password: str,
    *,
    fullname: str | None = None,
    about: str | None = None,
    image_url: str | None = None,
    plugin_extras: dict | None = None,
    with_apitoken: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id, "name": name, "email": email, "password": password},
        {
            "fullname": fullname,
            "about": about,
            "image_url": image_url,
            "plugin_extras": plugin_extras,
            "with_apitoken": with_apitoken,
        },
    )
    return await ckan.post("user_update", body)


async def task_status_update(
    ckan: CKAN,
    id: str,
    entity_id: str,
    entity_type: str,
    task_type: str,
    key: str,
    *,
    value: str | None = None,
    state: str | None = None,
    last_updated: str | None = None,
    error: str | None = None,
) -> Any:
    body = build_body(
        {
            "id": id,
            "entity_id": entity_id,
            "entity_type": entity_type,
            "task_type": task_type,
            "key": key,
        },
        {"value": value, "state": state, "last_updated": last_updated, "error": error},
    )
    return await ckan.post("task_status_update", body)


async def task_status_update_many(ckan: CKAN, data: list[dict]) -> Any:
    return await ckan.post("task_status_update_many", build_body({"data": data}))


async def term_translation_update(
    ckan: CKAN,
    term: str,
    term_translation: str,
    lang_code: str,
) -> Any:
    body = build_body(
        {"term": term, "term_translation": term_translation, "lang_code": lang_code}
    )
    return await ckan.post("term_translation_update", body)


async def term_translation_update_many(ckan: CKAN, data: list[dict]) -> Any:
    return await ckan.post("term_translation_update_many", build_body({"data": data}))


async def vocabulary_update(ckan: CKAN, id: str, name: str, tags: list[dict]) -> Any:
    body = build_body({"id": id, "name": name, "tags": tags})
    return await ckan.post("vocabulary_update", body)


async def package_owner_org_update(ckan: CKAN, id: str, organization_id: str) -> Any:
    body = build_body({"id": id, "organization_id": organization_id})
    return await ckan.post("package_owner_org_update", body)


async def bulk_update_private(ckan: CKAN, datasets: list[str], org_id: str) -> Any:
    body = build_body({"datasets": datasets, "org_id": org_id})
    return await ckan.post("bulk_update_private", body)


async def bulk_update_public(ckan: CKAN, datasets: list[str], org_id: str) -> Any:
    body = build_body({"datasets": datasets, "org_id": org_id})
    return await ckan.post("bulk_update_public", body)


async def bulk_update_delete(ckan: CKAN, datasets: list[str], org_id: str) -> Any:
    body = build_body({"datasets": datasets, "org_id": org_id})
    return await ckan.post("bulk_update_delete", body)


async def config_option_update(ckan: CKAN, options: dict[str, Any] | None = None) -> Any:
    """Set runtime-editable config options, e.g. ``{"ckan.site_title": "Data"}``."""
    return await ckan.post("config_option_update", build_body(extra=options))
