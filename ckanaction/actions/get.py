"""Read actions (ckan.logic.action.get)."""

from typing import Any

from ckanaction.body import build_body
from ckanaction.client import CKAN


async def package_list(
    ckan: CKAN,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> Any:
    body = build_body(optional={"limit": limit, "offset": offset})
    return await ckan.post("package_list", body)


async def current_package_list_with_resources(
    ckan: CKAN,
    *,
    limit: int | None = None,
    offset: int | None = None,
    page: int | None = None,
) -> Any:
    body = build_body(optional={"limit": limit, "offset": offset, "page": page})
    return await ckan.post("current_package_list_with_resources", body)


async def member_list(
    ckan: CKAN,
    id: str,
    *,
    object_type: str | None = None,
    capacity: str | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {"object_type": object_type, "capacity": capacity},
    )
    return await ckan.post("member_list", body)


async def package_collaborator_list(
    ckan: CKAN,
    id: str,
    *,
    capacity: str | None = None,
) -> Any:
    body = build_body({"id": id}, {"capacity": capacity})
    return await ckan.post("package_collaborator_list", body)


async def package_collaborator_list_for_user(
    ckan: CKAN,
    id: str,
    *,
    capacity: str | None = None,
) -> Any:
    body = build_body({"id": id}, {"capacity": capacity})
    return await ckan.post("package_collaborator_list_for_user", body)


async def group_list(
    ckan: CKAN,
    *,
    type_: str | None = None,
    order_by: str | None = None,
    sort: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
    groups: list[str] | None = None,
    all_fields: bool | None = None,
    include_dataset_count: bool | None = None,
    include_extras: bool | None = None,
    include_tags: bool | None = None,
    include_groups: bool | None = None,
    include_users: bool | None = None,
) -> Any:
    body = build_body(
        optional={
            "type": type_,
            "order_by": order_by,
            "sort": sort,
            "limit": limit,
            "offset": offset,
            "groups": groups,
            "all_fields": all_fields,
            "include_dataset_count": include_dataset_count,
            "include_extras": include_extras,
            "include_tags": include_tags,
            "include_groups": include_groups,
            "include_users": include_users,
        }
    )
    return await ckan.post("group_list", body)


async def organization_list(
    ckan: CKAN,
    *,
    type_: str | None = None,
    order_by: str | None = None,
    sort: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
    organizations: list[str] | None = None,
    all_fields: bool | None = None,
    include_dataset_count: bool | None = None,
    include_extras: bool | None = None,
    include_tags: bool | None = None,
    include_groups: bool | None = None,
    include_users: bool | None = None,
) -> Any:
    body = build_body(
        optional={
            "type": type_,
            "order_by": order_by,
            "sort": sort,
            "limit": limit,
            "offset": offset,
            "organizations": organizations,
            "all_fields": all_fields,
            "include_dataset_count": include_dataset_count,
            "include_extras": include_extras,
            "include_tags": include_tags,
            "include_groups": include_groups,
            "include_users": include_users,
        }
    )
    return await ckan.post("organization_list", body)


async def group_list_authz(
    ckan: CKAN,
    *,
    available_only: bool | None = None,
    am_member: bool | None = None,
) -> Any:
    body = build_body(optional={"available_only": available_only, "am_member": am_member})
    return await ckan.post("group_list_authz", body)


async def organization_list_for_user(
    ckan: CKAN,
    *,
    id: str | None = None,
    permission: str | None = None,
    include_dataset_count: bool | None = None,
) -> Any:
    body = build_body(
        optional={
            "id": id,
            "permission": permission,
            "include_dataset_count": include_dataset_count,
        }
    )
    return await ckan.post("organization_list_for_user", body)


async def license_list(ckan: CKAN) -> Any:
    return await ckan.get("license_list")


async def tag_list(
    ckan: CKAN,
    *,
    query: str | None = None,
    vocabulary_id: str | None = None,
    all_fields: bool | None = None,
) -> Any:
    body = build_body(
        optional={"query": query, "vocabulary_id": vocabulary_id, "all_fields": all_fields}
    )
    return await ckan.post("tag_list", body)


async def user_list(
    ckan: CKAN,
    *,
    q: str | None = None,
    email: str | None = None,
    order_by: str | None = None,
    all_fields: bool | None = None,
    include_site_user: bool | None = None,
) -> Any:
    body = build_body(
        optional={
            "q": q,
            "email": email,
            "order_by": order_by,
            "all_fields": all_fields,
            "include_site_user": include_site_user,
        }
    )
    return await ckan.post("user_list", body)


async def package_relationships_list(
    ckan: CKAN,
    id: str,
    id2: str,
    *,
    rel: str | None = None,
) -> Any:
    body = build_body({"id": id, "id2": id2}, {"rel": rel})
    return await ckan.post("package_relationships_list", body)


async def package_show(
    ckan: CKAN,
    id: str,
    *,
    use_default_schema: bool | None = None,
    include_plugin_data: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {"use_default_schema": use_default_schema, "include_plugin_data": include_plugin_data},
    )
    return await ckan.post("package_show", body)


async def resource_show(ckan: CKAN, id: str) -> Any:
    return await ckan.post("resource_show", build_body({"id": id}))


async def resource_view_show(ckan: CKAN, id: str) -> Any:
    return await ckan.post("resource_view_show", build_body({"id": id}))


async def resource_view_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("resource_view_list", build_body({"id": id}))


async def group_show(
    ckan: CKAN,
    id: str,
    *,
    include_datasets: bool | None = None,
    include_dataset_count: bool | None = None,
    include_extras: bool | None = None,
    include_users: bool | None = None,
    include_groups: bool | None = None,
    include_tags: bool | None = None,
    include_followers: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {
            "include_datasets": include_datasets,
            "include_dataset_count": include_dataset_count,
            "include_extras": include_extras,
            "include_users": include_users,
            "include_groups": include_groups,
            "include_tags": include_tags,
            "include_followers": include_followers,
        },
    )
    return await ckan.post("group_show", body)


async def organization_show(
    ckan: CKAN,
    id: str,
    *,
    include_datasets: bool | None = None,
    include_dataset_count: bool | None = None,
    include_extras: bool | None = None,
    include_users: bool | None = None,
    include_groups: bool | None = None,
    include_tags: bool | None = None,
    include_followers: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {
            "include_datasets": include_datasets,
            "include_dataset_count": include_dataset_count,
            "include_extras": include_extras,
            "include_users": include_users,
            "include_groups": include_groups,
            "include_tags": include_tags,
            "include_followers": include_followers,
        },
    )
    return await ckan.post("organization_show", body)


async def group_package_show(
    ckan: CKAN,
    id: str,
    *,
    limit: int | None = None,
) -> Any:
    body = build_body({"id": id}, {"limit": limit})
    return await ckan.post("group_package_show", body)


async def tag_show(
    ckan: CKAN,
    id: str,
    *,
    vocabulary_id: str | None = None,
    include_datasets: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {"vocabulary_id": vocabulary_id, "include_datasets": include_datasets},
    )
    return await ckan.post("tag_show", body)


async def user_show(
    ckan: CKAN,
    id: str,
    *,
    include_datasets: bool | None = None,
    include_num_followers: bool | None = None,
    include_password_hash: bool | None = None,
    include_plugin_extras: bool | None = None,
) -> Any:
    body = build_body(
        {"id": id},
        {
            "include_datasets": include_datasets,
            "include_num_followers": include_num_followers,
            "include_password_hash": include_password_hash,
            "include_plugin_extras": include_plugin_extras,
        },
    )
    return await ckan.post("user_show", body)


async def package_autocomplete(ckan: CKAN, q: str, *, limit: int | None = None) -> Any:
    return await ckan.post("package_autocomplete", build_body({"q": q}, {"limit": limit}))


async def format_autocomplete(ckan: CKAN, q: str, *, limit: int | None = None) -> Any:
    return await ckan.post("format_autocomplete", build_body({"q": q}, {"limit": limit}))


async def user_autocomplete(ckan: CKAN, q: str, *, limit: int | None = None) -> Any:
    return await ckan.post("user_autocomplete", build_body({"q": q}, {"limit": limit}))


async def group_autocomplete(ckan: CKAN, q: str, *, limit: int | None = None) -> Any:
    return await ckan.post("group_autocomplete", build_body({"q": q}, {"limit": limit}))


async def organization_autocomplete(ckan: CKAN, q: str, *, limit: int | None = None) -> Any:
    return await ckan.post("organization_autocomplete", build_body({"q": q}, {"limit": limit}))


async def package_search(
    ckan: CKAN,
    *,
    q: str | None = None,
    fq: str | None = None,
    fq_list: list[str] | None = None,
    sort: str | None = None,
    rows: int | None = None,
    start: int | None = None,
    facet: str | None = None,
    facet_mincount: int | None = None,
    facet_limit: int | None = None,
    facet_field: list[str] | None = None,
    include_drafts: bool | None = None,
    include_private: bool | None = None,
    use_default_schema: bool | None = None,
) -> Any:
    """Search datasets through CKAN's Solr-backed ``package_search``.

    The ``facet_*`` arguments go out under Solr's dotted names
    (``facet.mincount``, ``facet.limit``, ``facet.field``).
    """
    body = build_body(
        optional={
            "q": q,
            "fq": fq,
            "fq_list": fq_list,
            "sort": sort,
            "rows": rows,
            "start": start,
            "facet": facet,
            "facet.mincount": facet_mincount,
            "facet.limit": facet_limit,
            "facet.field": facet_field,
            "include_drafts": include_drafts,
            "include_private": include_private,
            "use_default_schema": use_default_schema,
        }
    )
    return await ckan.post("package_search", body)


async def resource_search(
    ckan: CKAN,
    *,
    query: Any = None,
    order_by: str | None = None,
    offset: int | None = None,
    limit: int | None = None,
) -> Any:
    """``query`` is passed through untouched, e.g. ``"name:data"`` or
    ``["name:data", "format:csv"]``."""
    body = build_body(
        optional={"query": query, "order_by": order_by, "offset": offset, "limit": limit}
    )
    return await ckan.post("resource_search", body)


async def tag_search(
    ckan: CKAN,
    *,
    query: Any = None,
    vocabulary_id: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> Any:
    body = build_body(
        optional={
            "query": query,
            "vocabulary_id": vocabulary_id,
            "limit": limit,
            "offset": offset,
        }
    )
    return await ckan.post("tag_search", body)


async def tag_autocomplete(
    ckan: CKAN,
    query: str,
    *,
    vocabulary_id: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> Any:
    body = build_body(
        {"query": query},
        {"vocabulary_id": vocabulary_id, "limit": limit, "offset": offset},
    )
    return await ckan.post("tag_autocomplete", body)


async def task_status_show(
    ckan: CKAN,
    *,
    id: str | None = None,
    entity_id: str | None = None,
    task_type: str | None = None,
    key: str | None = None,
) -> Any:
    body = build_body(
        optional={"id": id, "entity_id": entity_id, "task_type": task_type, "key": key}
    )
    return await ckan.post("task_status_show", body)


async def term_translation_show(
    ckan: CKAN,
    *,
    terms: list[str] | None = None,
    lang_codes: list[str] | None = None,
) -> Any:
    body = build_body(optional={"terms": terms, "lang_codes": lang_codes})
    return await ckan.post("term_translation_show", body)


async def get_site_user(ckan: CKAN, *, defer_commit: bool | None = None) -> Any:
    return await ckan.post("get_site_user", build_body(optional={"defer_commit": defer_commit}))


async def status_show(ckan: CKAN) -> Any:
    return await ckan.get("status_show")


async def vocabulary_list(ckan: CKAN) -> Any:
    return await ckan.get("vocabulary_list")


async def vocabulary_show(ckan: CKAN, id: str) -> Any:
    return await ckan.post("vocabulary_show", build_body({"id": id}))


# --- followers ---

async def user_follower_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("user_follower_count", build_body({"id": id}))


async def dataset_follower_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("dataset_follower_count", build_body({"id": id}))


async def group_follower_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_follower_count", build_body({"id": id}))


async def organization_follower_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_follower_count", build_body({"id": id}))


async def user_follower_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("user_follower_list", build_body({"id": id}))


async def dataset_follower_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("dataset_follower_list", build_body({"id": id}))


async def group_follower_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_follower_list", build_body({"id": id}))


async def organization_follower_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_follower_list", build_body({"id": id}))


async def am_following_user(ckan: CKAN, id: str) -> Any:
    return await ckan.post("am_following_user", build_body({"id": id}))


async def am_following_dataset(ckan: CKAN, id: str) -> Any:
    return await ckan.post("am_following_dataset", build_body({"id": id}))


async def am_following_group(ckan: CKAN, id: str) -> Any:
    return await ckan.post("am_following_group", build_body({"id": id}))


# --- followees ---

async def followee_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("followee_count", build_body({"id": id}))


async def user_followee_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("user_followee_count", build_body({"id": id}))


async def dataset_followee_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("dataset_followee_count", build_body({"id": id}))


async def group_followee_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_followee_count", build_body({"id": id}))


async def organization_followee_count(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_followee_count", build_body({"id": id}))


async def followee_list(ckan: CKAN, id: str, *, q: str | None = None) -> Any:
    return await ckan.post("followee_list", build_body({"id": id}, {"q": q}))


async def user_followee_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("user_followee_list", build_body({"id": id}))


async def dataset_followee_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("dataset_followee_list", build_body({"id": id}))


async def group_followee_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("group_followee_list", build_body({"id": id}))


async def organization_followee_list(ckan: CKAN, id: str) -> Any:
    return await ckan.post("organization_followee_list", build_body({"id": id}))


# --- site ---

async def member_roles_list(ckan: CKAN, *, group_type: str | None = None) -> Any:
    return await ckan.post("member_roles_list", build_body(optional={"group_type": group_type}))


async def help_show(ckan: CKAN, name: str) -> Any:
    return await ckan.post("help_show", build_body({"name": name}))


async def config_option_show(ckan: CKAN, key: str) -> Any:
    return await ckan.post("config_option_show", build_body({"key": key}))


async def config_option_list(ckan: CKAN) -> Any:
    return await ckan.get("config_option_list")


async def job_list(ckan: CKAN, *, queues: list[str] | None = None) -> Any:
    return await ckan.post("job_list", build_body(optional={"queues": queues}))


async def job_show(ckan: CKAN, id: str) -> Any:
    return await ckan.post("job_show", build_body({"id": id}))


async def api_token_list(ckan: CKAN, user_id: str) -> Any:
    return await ckan.post("api_token_list", build_body({"user_id": user_id}))
