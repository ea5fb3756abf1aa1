import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from ckanaction import config
from ckanaction.actions import GET_ACTIONS
from ckanaction.client import CKAN
from ckanaction.errors import CKANError
from ckanaction.schemas import ActionResponse

logger = logging.getLogger("ckanaction")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ckanaction",
        description="Call a CKAN action API endpoint and print the JSON response.",
    )
    p.add_argument("action", nargs="?", default="status_show", help="Action name, e.g. package_search")
    p.add_argument("body", nargs="?", default=None, help="Request body as a JSON object")
    p.add_argument("--url", default=config.CKAN_URL, help="CKAN site URL")
    p.add_argument("--token", default=config.CKAN_TOKEN, help="API token (sent as the Authorization header)")
    p.add_argument("--timeout", type=float, default=config.CKAN_TIMEOUT)
    p.add_argument("--upload", default=None, help="File to send as the multipart 'upload' part")
    p.add_argument("--get", action="store_true", help="Force a GET request (no body)")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    return p.parse_args(argv)


async def run(ns: argparse.Namespace) -> int:
    body = None
    if ns.body is not None:
        try:
            body = json.loads(ns.body)
        except json.JSONDecodeError as e:
            print(f"Body is not valid JSON: {e}", file=sys.stderr)
            return 2
        if not isinstance(body, dict):
            print("Body must be a JSON object", file=sys.stderr)
            return 2
    if ns.get and (body is not None or ns.upload):
        print("--get cannot be combined with a body or --upload", file=sys.stderr)
        return 2

    ckan = CKAN(url=ns.url, token=ns.token, timeout=ns.timeout)
    try:
        if ns.get or (ns.action in GET_ACTIONS and body is None and ns.upload is None):
            response = await ckan.get(ns.action)
        else:
            response = await ckan.post(ns.action, body, upload=ns.upload)
    except CKANError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 3

    print(json.dumps(response, indent=2, ensure_ascii=False))

    try:
        envelope = ActionResponse.parse(response)
    except ValidationError:
        logger.warning("Response from %s is not a CKAN action envelope", ns.action)
        return 1
    if not envelope.success:
        logger.warning("%s failed: %s", ns.action, envelope.error_message)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = parse_args(argv)
    logging.basicConfig(
        level=ns.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(ns))


if __name__ == "__main__":
    sys.exit(main())
