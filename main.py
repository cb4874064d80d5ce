# =============================================================================
# main.py  -  Interactive Entry Point for the Travel Recommendation Search
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (TRAVEL_CATALOG_SOURCE, TRAVEL_TIMEZONE)
#   2. Starts the one-time catalog load on a background thread
#   3. Prints a banner with the local date & time
#   4. Reads keywords in a loop and prints the matching recommendations
#
# THE LOAD RACE:
#   The prompt is usable immediately.  A search typed before the catalog
#   arrives gets the "still loading" message instead of waiting for it.  If
#   the load fails, the failure notice is printed once and every later
#   search reports the catalog as unavailable.
#
# COMMANDS:
#   quit / exit / q   leave
#   clear             clear the screen of previous results
#   (empty line)      prompt for a keyword
# =============================================================================

import os
import threading
from datetime import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from core import catalog
from core.catalog import LoadError
from core.results import OK, SearchResponse, display_image_url, run_search

DEFAULT_TIMEZONE = "Europe/Belgrade"


def current_time_in(timezone: str) -> str:
    """Format "now" in `timezone` as DD/MM/YYYY, HH:MM:SS (24-hour)."""
    return datetime.now(ZoneInfo(timezone)).strftime("%d/%m/%Y, %H:%M:%S")


def render_response(response: SearchResponse) -> str:
    """Render a SearchResponse as terminal text."""
    lines = []
    if response.headline:
        lines.append(response.headline)
    if response.status != OK:
        lines.append(response.message)
        return "\n".join(lines)

    for record in response.results:
        lines.append("")
        lines.append(f"  {record.title}")
        lines.append(f"    [{record.category}]")
        lines.append(f"    {record.description}")
        lines.append(f"    {display_image_url(record)}")
    return "\n".join(lines)


def _load_in_background() -> None:
    # Runs on the loader thread; prints the notice when the one load fails.
    try:
        catalog.load()
    except LoadError as error:
        print(f"\n⚠️  Failed to load recommendation data: {error}")


def start_background_load() -> threading.Thread:
    """Start the one-time catalog load without waiting for it.

    The thread is a daemon: a fetch that never completes does not keep the
    process alive after the user quits.
    """
    loader = threading.Thread(target=_load_in_background, name="catalog-loader", daemon=True)
    loader.start()
    return loader


def run_cli() -> None:
    """Run the interactive search loop."""
    load_dotenv()
    timezone = os.environ.get("TRAVEL_TIMEZONE", "").strip() or DEFAULT_TIMEZONE

    # =========================================================================
    # Step 1: Kick off the catalog load without waiting for it
    # =========================================================================
    start_background_load()

    print("=" * 70)
    print("  TRAVEL RECOMMENDATIONS")
    print(f"  Current date & time in {timezone}: {current_time_in(timezone)}")
    print("=" * 70)
    print("\n🔎 Search for a country, city, temple or beach.")
    print("   (Type 'clear' to clear results, 'quit' to exit)\n")

    # =========================================================================
    # Step 2: Interactive loop
    # =========================================================================
    while True:
        try:
            user_input = input("\n🧭 Search: ")
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        command = user_input.strip().lower()
        if command in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break
        if command == "clear":
            print("\033[2J\033[H", end="")
            continue

        print("-" * 70)
        print(render_response(run_search(user_input)))
        print("-" * 70)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    run_cli()
