#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from kontent.sync import SyncQueryPayload, get_sync_client


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch Kontent.ai changes since a continuation token")
    p.add_argument("environment_id")
    p.add_argument("token", nargs="?", default=None, help="Omit to start a new sync")
    p.add_argument("--preview-key", default=None)
    p.add_argument("--validate", action="store_true", help="Validate payloads against schemas")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    builder = get_sync_client(args.environment_id)
    factory = builder.preview_api(args.preview_key) if args.preview_key else builder.public_api()

    async with factory.create(response_validation=args.validate) as client:
        token = args.token
        if token is None:
            init = await client.init().resolve()
            if not init.success:
                print(f"Init failed: {init.error.reason.value} | {init.error.message}")
                return
            token = init.response.meta.continuation_token
            print(f"Initialized. Continuation token: {token}")

        result = await client.sync(token).resolve_all()
        if not result.success:
            print(f"Sync failed: {result.error.reason.value} | {result.error.message}")
            return

        for index, response in enumerate(result.responses):
            batch = SyncQueryPayload.model_validate(response.payload)
            print(
                f"PAGE {index} | items={len(batch.items)} types={len(batch.types)} "
                f"languages={len(batch.languages)} taxonomies={len(batch.taxonomies)}"
            )
            for delta in batch.items:
                system = delta.data.system
                print(f"  {delta.change_type.value:<8} {system.codename} ({system.language})")

        print(f"Next continuation token: {result.last_continuation_token}")


if __name__ == "__main__":
    asyncio.run(main())
