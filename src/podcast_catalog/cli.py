"""CLI entry point for the podcast catalog."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from podcast_catalog.adapters.favorites import YamlFavoriteStore
from podcast_catalog.adapters.sources import ListenNotesPageSource
from podcast_catalog.config import Settings, get_settings
from podcast_catalog.presentation import ListStateAdapter
from podcast_catalog.repository import PaginationRepository


def main(
    pages: int = typer.Option(1, "--pages", min=1, help="Number of pages to load"),
    favorites_only: bool = typer.Option(False, "--favorites-only", help="Only print favorited podcasts"),
    toggle: Optional[str] = typer.Option(None, "--toggle", help="Toggle favorite state of a podcast id and exit"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Browse the best podcasts and manage favorites."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    
    settings = get_settings(config)
    repository = build_repository(settings)
    
    if toggle:
        repository.toggle_favorite(toggle)
        state = "★ added to" if repository.is_favorite(toggle) else "☆ removed from"
        print(f"{state} favorites: {toggle}")
        return
    
    ok = asyncio.run(browse(repository, settings, pages, favorites_only))
    if not ok:
        raise typer.Exit(code=1)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


def build_repository(settings: Settings) -> PaginationRepository:
    """Wire the HTTP source and the YAML favorites file."""
    source = ListenNotesPageSource(
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout,
    )
    return PaginationRepository(source, YamlFavoriteStore(settings.favorites_file))


async def browse(
    repository: PaginationRepository,
    settings: Settings,
    pages: int,
    favorites_only: bool,
) -> bool:
    """Load ``pages`` pages the way a scrolling list would and print them.
    
    Returns:
        False if the first page could not be loaded.
    """
    adapter = ListStateAdapter(repository, near_end_threshold=settings.near_end_threshold)
    
    print(f"\n🎧 Best podcasts ({settings.base_url})")
    await adapter.on_appear()
    
    state = adapter.state
    if state.error_message and not state.items:
        print(f"  └─ ❌ {state.error_message}")
        print(f"  └─ Run again to retry")
        return False
    
    if state.is_empty:
        print("  └─ Nothing to show")
        return True
    
    # Scrolling to the last row is what triggers the next page
    while repository.current_page < pages and adapter.state.has_more:
        items = adapter.state.items
        loaded = await adapter.load_more_if_needed(items[-1], len(items) - 1)
        if not loaded or adapter.state.error_message:
            break
    
    state = adapter.state
    print(f"  └─ Pages loaded: {repository.current_page}, podcasts: {len(state.items)}")
    if state.error_message:
        print(f"  └─ ⚠️  {state.error_message}")
    
    print()
    for index, item in enumerate(state.items, 1):
        favorite = adapter.is_favorite(item.id)
        if favorites_only and not favorite:
            continue
        mark = "★" if favorite else "☆"
        print(f"{index:4d}. {mark} {item.title.strip()} — {item.publisher.strip()}")
        print(f"      └─ {item.id}")
    
    if not state.has_more:
        print("\n✓ End of list")
    
    return True


if __name__ == "__main__":
    app()
