"""Tests for core entities."""

from dataclasses import FrozenInstanceError

import pytest

from podcast_catalog.core import Item, PageResult, RepositoryState


def test_item_creation() -> None:
    """Test creating a valid item."""
    item = Item(
        id="4d3fe717742d4963a85562e9f84d8c79",
        title="Star Wars 7x7",
        publisher="Allen Voivod",
        thumbnail="https://cdn.example.com/thumb.jpg",
    )
    
    assert item.id == "4d3fe717742d4963a85562e9f84d8c79"
    assert item.title == "Star Wars 7x7"
    assert item.image is None
    assert item.description is None


def test_item_validation() -> None:
    """Test item validation."""
    with pytest.raises(ValueError, match="ID cannot be empty"):
        Item(id="", title="Title", publisher="Publisher")
    
    with pytest.raises(ValueError, match="ID cannot be empty"):
        Item(id="   ", title="Title", publisher="Publisher")
    
    with pytest.raises(ValueError, match="Title cannot be empty"):
        Item(id="abc", title=" \n\t", publisher="Publisher")


def test_item_allows_empty_publisher() -> None:
    """Only id and title are required to be non-empty."""
    item = Item(id="abc", title="Title", publisher="")
    
    assert item.publisher == ""


def test_item_is_immutable() -> None:
    """Items are never mutated after construction."""
    item = Item(id="abc", title="Title", publisher="Publisher")
    
    with pytest.raises(FrozenInstanceError):
        item.title = "Other"  # type: ignore[misc]


def test_items_compare_by_value() -> None:
    """Repeated entries from different pages are equal."""
    first = Item(id="abc", title="Title", publisher="Publisher")
    second = Item(id="abc", title="Title", publisher="Publisher")
    
    assert first == second


def test_page_result_defaults() -> None:
    """Test page result hint defaults to no more pages."""
    page = PageResult(items=[])
    
    assert page.items == []
    assert page.has_more_hint is False


def test_repository_state_defaults() -> None:
    """A fresh state has nothing loaded and expects more pages."""
    state = RepositoryState()
    
    assert state.items == ()
    assert state.current_page == 0
    assert state.is_loading_initial is False
    assert state.is_loading_more is False
    assert state.has_more is True
    assert state.last_error is None
