#!/usr/bin/env python3
"""Drive a headless map session against the live endpoints.

Loads the outlet set, optionally hovers one outlet, then sends each
message to the assistant and prints the transcript together with the
markers that ended up highlighted.

Usage
-----
::

    pip install -e .
    python scripts/map_session.py "Any outlet in Cheras?" --hover 12

Options::

    --hover ID       Hover this outlet id and print its border set
    --open NAME      Open the callout of the first outlet matching NAME
    --json           Output machine-readable JSON
    --verbose        Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any

from outletmap import ManualFrameScheduler, MapConfig, OutletMapClient


def _outlet_id(value: str) -> int | str:
    return int(value) if value.isdigit() else value


async def main() -> None:
    parser = argparse.ArgumentParser(description="Headless outlet map session for debugging / development.")
    parser.add_argument("messages", nargs="*", help="Messages to send to the assistant, in order")
    parser.add_argument("--hover", type=_outlet_id, help="Hover this outlet id")
    parser.add_argument("--open", dest="open_name", help="Open the callout of the first outlet matching NAME")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    scheduler = ManualFrameScheduler()
    result: dict[str, Any] = {}

    async with OutletMapClient(MapConfig.from_env(), scheduler=scheduler) as client:
        outlets = await client.load()
        result["outlets"] = len(outlets)

        if args.hover is not None:
            client.surface.pointer_enter(args.hover)
            scheduler.run_until_idle()
            result["border_set"] = sorted(map(str, client.markers.border_set))

        for message in args.messages:
            await client.chat.send(message)

        if args.open_name:
            client.commands.open_outlet_popup(args.open_name)
            result["open_popup"] = client.surface.open_popup_id
            result["center"] = client.surface.viewport.center

        result["transcript"] = [m.model_dump(mode="json") for m in client.chat.messages]
        result["highlighted"] = [v.outlet.name for v in client.surface.markers() if v.colorful]

    if args.json_mode:
        print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
        return

    print(f"Outlets loaded: {result['outlets']}")
    if "border_set" in result:
        print(f"Border set for {args.hover}: {', '.join(result['border_set'])}")
    for entry in result["transcript"]:
        buttons = f"  [{' | '.join(entry['outlets'])}]" if entry["outlets"] else ""
        print(f"{entry['sender']:>4}: {entry['text']}{buttons}")
    print(f"Highlighted: {', '.join(result['highlighted']) or '-'}")
    if "open_popup" in result:
        print(f"Open callout: {result['open_popup']} centred at {result['center']}")


if __name__ == "__main__":
    asyncio.run(main())
