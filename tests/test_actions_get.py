"""Read actions: each test calls the action against the recording fake
CKAN and checks the action path and the exact body sent."""

import pytest
from ckanaction.actions import get


# --- listing ---

@pytest.mark.asyncio
async def test_package_list_no_filters(ckan, fake):
    await get.package_list(ckan)
    assert fake.action == "package_list"
    assert fake.body() == {}


@pytest.mark.asyncio
async def test_package_list_zero_offset_kept(ckan, fake):
    await get.package_list(ckan, offset=0)
    assert fake.body() == {"offset": 0}


@pytest.mark.asyncio
async def test_current_package_list_with_resources(ckan, fake):
    await get.current_package_list_with_resources(ckan, page=2)
    assert fake.action == "current_package_list_with_resources"
    assert fake.body() == {"page": 2}


@pytest.mark.asyncio
async def test_group_list_type_renamed(ckan, fake):
    await get.group_list(ckan, type_="theme", all_fields=True, include_users=False)
    assert fake.body() == {"type": "theme", "all_fields": True, "include_users": False}


@pytest.mark.asyncio
async def test_organization_list(ckan, fake):
    await get.organization_list(ckan, organizations=["env", "health"], limit=2)
    assert fake.action == "organization_list"
    assert fake.body() == {"organizations": ["env", "health"], "limit": 2}


@pytest.mark.asyncio
async def test_group_list_authz(ckan, fake):
    await get.group_list_authz(ckan, am_member=True)
    assert fake.body() == {"am_member": True}


@pytest.mark.asyncio
async def test_organization_list_for_user(ckan, fake):
    await get.organization_list_for_user(ckan, id="alice", permission="manage_group")
    assert fake.body() == {"id": "alice", "permission": "manage_group"}


@pytest.mark.asyncio
async def test_tag_list(ckan, fake):
    await get.tag_list(ckan, query="wat")
    assert fake.body() == {"query": "wat"}


@pytest.mark.asyncio
async def test_user_list(ckan, fake):
    await get.user_list(ckan, q="ali", order_by="name", include_site_user=False)
    assert fake.body() == {"q": "ali", "order_by": "name", "include_site_user": False}


@pytest.mark.asyncio
async def test_member_list(ckan, fake):
    await get.member_list(ckan, "env", object_type="package")
    assert fake.body() == {"id": "env", "object_type": "package"}


@pytest.mark.asyncio
async def test_package_relationships_list(ckan, fake):
    await get.package_relationships_list(ckan, "a", "b", rel="child_of")
    assert fake.body() == {"id": "a", "id2": "b", "rel": "child_of"}


# --- show ---

@pytest.mark.asyncio
async def test_package_show(ckan, fake):
    await get.package_show(ckan, "abc-123", use_default_schema=True)
    assert fake.body() == {"id": "abc-123", "use_default_schema": True}


@pytest.mark.asyncio
async def test_group_show_only_supplied_flags(ckan, fake):
    await get.group_show(ckan, "science", include_datasets=False, include_followers=True)
    assert fake.action == "group_show"
    assert fake.body() == {"id": "science", "include_datasets": False, "include_followers": True}


@pytest.mark.asyncio
async def test_organization_show(ckan, fake):
    await get.organization_show(ckan, "env", include_extras=True)
    assert fake.body() == {"id": "env", "include_extras": True}


@pytest.mark.asyncio
async def test_tag_show(ckan, fake):
    await get.tag_show(ckan, "rivers", vocabulary_id="themes")
    assert fake.body() == {"id": "rivers", "vocabulary_id": "themes"}


@pytest.mark.asyncio
async def test_user_show(ckan, fake):
    await get.user_show(ckan, "alice", include_datasets=True)
    assert fake.body() == {"id": "alice", "include_datasets": True}


@pytest.mark.asyncio
async def test_group_package_show(ckan, fake):
    await get.group_package_show(ckan, "science", limit=3)
    assert fake.body() == {"id": "science", "limit": 3}


# --- search ---

@pytest.mark.asyncio
async def test_package_search_facet_names(ckan, fake):
    await get.package_search(
        ckan,
        q="rivers",
        facet="true",
        facet_mincount=1,
        facet_limit=10,
        facet_field=["tags", "res_format"],
    )
    assert fake.body() == {
        "q": "rivers",
        "facet": "true",
        "facet.mincount": 1,
        "facet.limit": 10,
        "facet.field": ["tags", "res_format"],
    }


@pytest.mark.asyncio
async def test_package_search_pagination(ckan, fake):
    await get.package_search(ckan, fq_list=["res_format:CSV"], rows=20, start=40, include_private=True)
    assert fake.body() == {
        "fq_list": ["res_format:CSV"],
        "rows": 20,
        "start": 40,
        "include_private": True,
    }


@pytest.mark.asyncio
async def test_resource_search_opaque_query(ckan, fake):
    await get.resource_search(ckan, query=["name:rivers", "format:csv"], limit=5)
    assert fake.body() == {"query": ["name:rivers", "format:csv"], "limit": 5}


@pytest.mark.asyncio
async def test_tag_search_opaque_query(ckan, fake):
    await get.tag_search(ckan, query={"name": "riv"}, offset=0)
    assert fake.body() == {"query": {"name": "riv"}, "offset": 0}


@pytest.mark.asyncio
async def test_tag_autocomplete(ckan, fake):
    await get.tag_autocomplete(ckan, "riv", limit=5)
    assert fake.body() == {"query": "riv", "limit": 5}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "action",
    [
        "package_autocomplete",
        "format_autocomplete",
        "user_autocomplete",
        "group_autocomplete",
        "organization_autocomplete",
    ],
)
async def test_autocomplete(ckan, fake, action):
    await getattr(get, action)(ckan, "wat", limit=4)
    assert fake.action == action
    assert fake.body() == {"q": "wat", "limit": 4}


# --- misc ---

@pytest.mark.asyncio
async def test_task_status_show(ckan, fake):
    await get.task_status_show(ckan, entity_id="e1", task_type="harvest", key="status")
    assert fake.body() == {"entity_id": "e1", "task_type": "harvest", "key": "status"}


@pytest.mark.asyncio
async def test_term_translation_show(ckan, fake):
    await get.term_translation_show(ckan, terms=["river"], lang_codes=["fr"])
    assert fake.body() == {"terms": ["river"], "lang_codes": ["fr"]}


@pytest.mark.asyncio
async def test_get_site_user(ckan, fake):
    await get.get_site_user(ckan, defer_commit=True)
    assert fake.body() == {"defer_commit": True}


@pytest.mark.asyncio
async def test_followee_list(ckan, fake):
    await get.followee_list(ckan, "alice", q="env")
    assert fake.body() == {"id": "alice", "q": "env"}


@pytest.mark.asyncio
async def test_member_roles_list(ckan, fake):
    await get.member_roles_list(ckan, group_type="organization")
    assert fake.body() == {"group_type": "organization"}


@pytest.mark.asyncio
async def test_help_show(ckan, fake):
    await get.help_show(ckan, "package_search")
    assert fake.body() == {"name": "package_search"}


@pytest.mark.asyncio
async def test_config_option_show(ckan, fake):
    await get.config_option_show(ckan, "ckan.site_title")
    assert fake.body() == {"key": "ckan.site_title"}


@pytest.mark.asyncio
async def test_job_list(ckan, fake):
    await get.job_list(ckan, queues=["default"])
    assert fake.body() == {"queues": ["default"]}


@pytest.mark.asyncio
async def test_api_token_list(ckan, fake):
    await get.api_token_list(ckan, "alice")
    assert fake.body() == {"user_id": "alice"}


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["license_list", "status_show", "vocabulary_list", "config_option_list"])
async def test_parameterless_actions_use_get(ckan, fake, action):
    await getattr(get, action)(ckan)
    assert fake.last.method == "GET"
    assert fake.action == action


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "action",
    [
        "resource_show",
        "resource_view_show",
        "resource_view_list",
        "vocabulary_show",
        "user_follower_count",
        "dataset_follower_count",
        "group_follower_count",
        "organization_follower_count",
        "user_follower_list",
        "dataset_follower_list",
        "group_follower_list",
        "organization_follower_list",
        "am_following_user",
        "am_following_dataset",
        "am_following_group",
        "followee_count",
        "user_followee_count",
        "dataset_followee_count",
        "group_followee_count",
        "organization_followee_count",
        "user_followee_list",
        "dataset_followee_list",
        "group_followee_list",
        "organization_followee_list",
        "job_show",
    ],
)
async def test_id_only_reads(ckan, fake, action):
    await getattr(get, action)(ckan, "abc-123")
    assert fake.last.method == "POST"
    assert fake.action == action
    assert fake.body() == {"id": "abc-123"}
