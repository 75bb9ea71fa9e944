# ABOUTME: Content factory producing empty feed and item objects.
# ABOUTME: Parsers receive it from the reader and populate what it builds.

from feed_reader.models import FeedContent, Item


class FeedFactory:
    """Builds empty FeedContent and Item instances.

    Custom classes can be plugged in as long as they extend the defaults.
    """

    def __init__(
        self,
        feed_class: type[FeedContent] = FeedContent,
        item_class: type[Item] = Item,
    ) -> None:
        if not issubclass(feed_class, FeedContent):
            raise TypeError(f"{feed_class.__name__} must extend FeedContent")
        if not issubclass(item_class, Item):
            raise TypeError(f"{item_class.__name__} must extend Item")
        self.feed_class = feed_class
        self.item_class = item_class

    def new_feed(self) -> FeedContent:
        return self.feed_class()

    def new_item(self) -> Item:
        return self.item_class()
