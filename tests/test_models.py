# ABOUTME: Tests for content models, HTTP response classification, and the factory.
# ABOUTME: Verifies status categories and factory class configuration.

import pytest

from feed_reader.factory import FeedFactory
from feed_reader.models import FeedContent, HttpResponse, Item


class TestHttpResponse:
    """Tests for status classification."""

    @pytest.mark.parametrize("status_code", [200, 203])
    def test_ok(self, status_code: int) -> None:
        assert HttpResponse(status_code=status_code).is_ok

    @pytest.mark.parametrize("status_code", [301, 302, 303, 307, 308])
    def test_redirection(self, status_code: int) -> None:
        response = HttpResponse(status_code=status_code)
        assert response.is_redirection
        assert not response.is_ok

    def test_not_modified_is_not_redirection(self) -> None:
        """304 is its own category."""
        response = HttpResponse(status_code=304)
        assert response.is_not_modified
        assert not response.is_redirection

    def test_error_categories(self) -> None:
        assert HttpResponse(status_code=403).is_forbidden
        assert HttpResponse(status_code=404).is_not_found
        assert HttpResponse(status_code=500).is_server_error
        assert HttpResponse(status_code=504).is_server_error
        assert not HttpResponse(status_code=400).is_server_error


class TestFeedContent:
    """Tests for the FeedContent model."""

    def test_add_item_appends_in_order(self) -> None:
        feed = FeedContent()
        feed.add_item(Item(title="one")).add_item(Item(title="two"))
        assert [item.title for item in feed.items] == ["one", "two"]
        assert feed.item_count == 2

    def test_items_not_shared_between_instances(self) -> None:
        """Each feed gets its own item list."""
        first, second = FeedContent(), FeedContent()
        first.add_item(Item(title="only here"))
        assert second.items == []


class CustomFeed(FeedContent):
    """Feed subclass for factory tests."""


class TestFeedFactory:
    """Tests for FeedFactory."""

    def test_defaults(self, factory: FeedFactory) -> None:
        feed = factory.new_feed()
        assert isinstance(feed, FeedContent)
        assert feed.items == []
        assert isinstance(factory.new_item(), Item)

    def test_new_instances_each_time(self, factory: FeedFactory) -> None:
        assert factory.new_feed() is not factory.new_feed()

    def test_custom_feed_class(self) -> None:
        assert isinstance(FeedFactory(feed_class=CustomFeed).new_feed(), CustomFeed)

    def test_rejects_unrelated_classes(self) -> None:
        with pytest.raises(TypeError):
            FeedFactory(feed_class=dict)
        with pytest.raises(TypeError):
            FeedFactory(item_class=str)
