"""
ClipDeck command line.

Terminal front end for the search proxy and the plan queue.

Usage:
    clipdeck serve
    clipdeck search "coffee tiktok" --pages 2
    clipdeck search --preset 2
    clipdeck queue add "coffee tiktok" 3
    clipdeck queue list
    clipdeck queue update 7300000000000000000 --schedule 2024-05-01T09:30
    clipdeck queue toggle 7300000000000000000 follow
    clipdeck queue details 7300000000000000000 comment "Love this pour!"
    clipdeck queue suggest 7300000000000000000
    clipdeck queue remove 7300000000000000000
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from clipdeck.client import ProxySearchClient, SearchController
from clipdeck.config.settings import Settings, get_settings
from clipdeck.core.logging import configure_logging
from clipdeck.messages import Messages, get_messages
from clipdeck.models.schemas import FetchState, InteractionAction, QueueItem, VideoRecord
from clipdeck.queue import JsonFileBlobStore, QueueStore
from clipdeck.utils.formatters import (
    format_compact_number,
    format_duration,
    format_relative_time,
)


# =============================================================================
# Rendering
# =============================================================================


def render_video(index: int, video: VideoRecord) -> str:
    """Render one search result card."""
    handle = video.author.handle or video.author.display_name or "unknown"
    stats = video.stats
    lines = [
        f"[{index}] {video.title or '(untitled)'}",
        f"     @{handle} · {format_duration(video.duration_seconds)} · "
        f"{format_relative_time(video.created_at_millis)} · {video.region or '--'}",
        f"     ▶ {format_compact_number(stats.plays)}  ♥ {format_compact_number(stats.likes)}  "
        f"💬 {format_compact_number(stats.comments)}  ↗ {format_compact_number(stats.shares)}",
        f"     id={video.id}",
    ]
    if video.music.title:
        lines.insert(2, f"     ♪ {video.music.title} - {video.music.artist}")
    return "\n".join(lines)


def render_queue_item(item: QueueItem, messages: Messages) -> str:
    """Render one plan with its caption, schedule and interactions."""
    lines = [
        f"{item.id}  {item.title or '(untitled)'}",
        f"  scheduled: {item.scheduled_for or '-'}",
        f"  caption:   {(item.caption or '').replace(chr(10), ' / ')}",
    ]
    if item.notes:
        lines.append(f"  notes:     {item.notes}")
    for entry in item.interactions:
        mark = "x" if entry.enabled else " "
        label = messages.action_labels[entry.action]
        detail = f" - {entry.details}" if entry.details else ""
        lines.append(f"  [{mark}] {label}{detail}")
    return "\n".join(lines)


# =============================================================================
# Commands
# =============================================================================


async def search_videos(
    settings: Settings,
    keyword: str,
    pages: int,
    count: Optional[int] = None,
    proxy_url: Optional[str] = None,
) -> SearchController:
    """Run a search and page through up to ``pages`` pages."""
    async with ProxySearchClient(settings, base_url=proxy_url) as client:
        controller = SearchController(
            client,
            page_size=count or settings.controller_page_size,
            messages=get_messages(settings.locale),
        )
        await controller.start_search(keyword)
        for _ in range(pages - 1):
            if controller.state is FetchState.ERROR or not controller.has_more:
                break
            await controller.load_more()
        return controller


def cmd_search(args: argparse.Namespace, settings: Settings) -> int:
    keyword = args.keyword or settings.default_keyword
    if args.preset is not None:
        if not 1 <= args.preset <= len(settings.preset_keywords):
            print(f"No preset #{args.preset} ({len(settings.preset_keywords)} presets).", file=sys.stderr)
            return 1
        keyword = settings.preset_keywords[args.preset - 1]
    controller = asyncio.run(
        search_videos(settings, keyword, args.pages, args.count, args.proxy)
    )

    if controller.state is FetchState.ERROR:
        print(controller.error_message, file=sys.stderr)
        if not controller.videos:
            return 1

    print(f"Results for \"{controller.active_keyword}\": {len(controller.videos)} videos")
    for index, video in enumerate(controller.videos, start=1):
        print(render_video(index, video))
    if controller.has_more:
        print("More results available (use --pages).")
    return 0


def cmd_queue(args: argparse.Namespace, settings: Settings) -> int:
    messages = get_messages(settings.locale)
    store = QueueStore(
        JsonFileBlobStore(settings.queue_storage_dir),
        slot=settings.queue_slot,
        messages=messages,
    )

    if args.queue_command == "list":
        items = store.sorted_by_schedule()
        if not items:
            print("Queue is empty.")
        for item in items:
            print(render_queue_item(item, messages))
        return 0

    if args.queue_command == "add":
        controller = asyncio.run(search_videos(settings, args.keyword, pages=1))
        videos = controller.videos
        if controller.state is FetchState.ERROR:
            print(controller.error_message, file=sys.stderr)
            return 1
        if not 1 <= args.index <= len(videos):
            print(f"No result #{args.index} ({len(videos)} results).", file=sys.stderr)
            return 1
        item = store.add(videos[args.index - 1])
        print(render_queue_item(item, messages))
        return 0

    if args.queue_command == "remove":
        if not store.remove(args.id):
            print(f"{args.id} is not queued.", file=sys.stderr)
            return 1
        print(f"Removed {args.id}.")
        return 0

    if args.queue_command == "update":
        fields = {
            name: value
            for name, value in (
                ("caption", args.caption),
                ("notes", args.notes),
                ("scheduled_for", args.schedule),
            )
            if value is not None
        }
        item = store.update_fields(args.id, **fields)
    elif args.queue_command == "toggle":
        item = store.toggle_interaction(args.id, args.action)
    elif args.queue_command == "details":
        item = store.set_interaction_details(args.id, args.action, args.text)
    elif args.queue_command == "suggest":
        item = store.apply_suggested_caption(args.id)
    else:
        return 2

    if item is None:
        print(f"{args.id} is not queued.", file=sys.stderr)
        return 1
    print(render_queue_item(item, messages))
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    from clipdeck.api.main import serve

    serve(settings)
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clipdeck",
        description="Search TikTok and plan reposts and interactions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the search proxy API")

    search = subparsers.add_parser("search", help="Search videos through the proxy")
    search.add_argument("keyword", nargs="?", help="Keyword (defaults to DEFAULT_KEYWORD)")
    search.add_argument("--count", type=int, help="Videos per page")
    search.add_argument("--pages", type=int, default=1, help="Pages to fetch")
    search.add_argument("--proxy", help="Proxy base URL (defaults to PROXY_BASE_URL)")
    search.add_argument("--preset", type=int, help="Search the Nth PRESET_KEYWORDS entry instead")

    queue = subparsers.add_parser("queue", help="Manage the plan queue")
    queue_commands = queue.add_subparsers(dest="queue_command", required=True)

    queue_commands.add_parser("list", help="Show queued plans ordered by schedule")

    add = queue_commands.add_parser("add", help="Queue a search result")
    add.add_argument("keyword", help="Keyword to search")
    add.add_argument("index", type=int, help="1-based result number")

    remove = queue_commands.add_parser("remove", help="Remove a plan")
    remove.add_argument("id", help="Video ID")

    update = queue_commands.add_parser("update", help="Edit caption, notes or schedule")
    update.add_argument("id", help="Video ID")
    update.add_argument("--caption")
    update.add_argument("--notes")
    update.add_argument("--schedule", help="ISO local datetime, e.g. 2024-05-01T09:30")

    actions = [action.value for action in InteractionAction]

    toggle = queue_commands.add_parser("toggle", help="Flip an interaction on or off")
    toggle.add_argument("id", help="Video ID")
    toggle.add_argument("action", choices=actions)

    details = queue_commands.add_parser("details", help="Set interaction details")
    details.add_argument("id", help="Video ID")
    details.add_argument("action", choices=actions)
    details.add_argument("text")

    suggest = queue_commands.add_parser("suggest", help="Replace caption with a suggestion")
    suggest.add_argument("id", help="Video ID")

    return parser


COMMANDS = {
    "serve": cmd_serve,
    "search": cmd_search,
    "queue": cmd_queue,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.command != "serve":
        configure_logging(settings)
    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
