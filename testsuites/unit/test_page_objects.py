"""
================================================================================
Page Object Tests
================================================================================

Declared members resolve lazily against the fake DOM; results follow the
declared shape and are never cached.

================================================================================
"""

import gc
import warnings
from typing import List, Optional, Sequence

import allure
import pytest
from loguru import logger
from playwright.async_api import ElementHandle
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from playwright_contrib.errors import DeclarationError, MissingHandleError
from playwright_contrib.extensions import element_handle as eh
from playwright_contrib.page_objects import (
    ElementObject,
    PageObject,
    QueryKind,
    Shape,
    goto,
    query_selector,
    query_selector_all,
    query_xpath,
    reload,
    selector,
    wait_for_navigation,
    wait_for_selector,
    xpath,
)
from playwright_contrib.page_objects.declarations import Declared, PendingMember, classify
from testsuites.unit.fakes import FakeElement


class TweetObject(ElementObject):

    @selector(".like")
    def like(self) -> ElementHandle: ...

    @selector(".like")
    def likes(self) -> List[ElementHandle]: ...

    @selector(".missing")
    def missing(self) -> Optional[ElementHandle]: ...

    @selector(".missing")
    def missing_all(self) -> List[ElementHandle]: ...


class TimelinePage(PageObject):

    @selector("h1")
    def heading(self) -> ElementHandle: ...

    @selector(".tweet")
    def first_tweet(self) -> TweetObject: ...

    @selector(".tweet")
    def tweets(self) -> List[TweetObject]: ...

    @selector(".tweet")
    def tweet_sequence(self) -> Sequence[TweetObject]: ...

    @selector(".missing")
    def missing_tweet(self) -> Optional[TweetObject]: ...

    @selector(".missing")
    def missing_tweets(self) -> List[TweetObject]: ...

    @selector(".tweet")
    def replies(self) -> List["ReplyObject"]: ...

    @selector(".tweet")
    def wrong_type(self) -> str: ...

    @selector(".tweet")
    def unresolvable(self) -> "NoSuchObject": ...  # noqa: F821


class ReplyObject(ElementObject):
    pass


with warnings.catch_warnings():
    warnings.simplefilter("ignore", DeprecationWarning)

    class XPathTimelinePage(PageObject):

        @xpath("//h1")
        def headings(self) -> List[ElementHandle]: ...

        @xpath("//div")
        def divs(self) -> List[TweetObject]: ...

        @xpath("//h1")
        def heading(self) -> ElementHandle: ...

        @xpath("//div")
        def first_div(self) -> TweetObject: ...


@pytest.fixture
def warnings_logged():
    """Collect loguru WARNING records for the duration of a test."""
    messages: List[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(sink_id)


# =============================================================================
# Declarations
# =============================================================================

@allure.epic("Page Objects")
@allure.feature("Declarations")
class TestDeclarations:

    def test_class_access_returns_descriptor(self):
        declared = TimelinePage.__dict__["heading"]
        assert isinstance(declared, Declared)
        assert TimelinePage.heading is declared
        assert declared.declaration.kind is QueryKind.SELECTOR
        assert declared.declaration.query == "h1"
        assert declared.declaration.name == "TimelinePage.heading"

    def test_shapes_follow_return_annotations(self):
        assert TimelinePage.heading.shape is Shape.HANDLE
        assert TimelinePage.first_tweet.binding == (Shape.OBJECT, TweetObject)
        assert TimelinePage.tweets.binding == (Shape.OBJECT_LIST, TweetObject)
        assert TweetObject.likes.shape is Shape.HANDLE_LIST
        assert TweetObject.missing.shape is Shape.HANDLE

    def test_forward_reference_is_resolved_on_first_access(self):
        assert TimelinePage.replies.binding == (Shape.OBJECT_LIST, ReplyObject)

    @pytest.mark.parametrize(
        "hint, expected",
        [
            (ElementHandle, (Shape.HANDLE, None)),
            (Optional[ElementHandle], (Shape.HANDLE, None)),
            (List[ElementHandle], (Shape.HANDLE_LIST, None)),
            (TweetObject, (Shape.OBJECT, TweetObject)),
            (Optional[TweetObject], (Shape.OBJECT, TweetObject)),
            (List[TweetObject], (Shape.OBJECT_LIST, TweetObject)),
            (str, (None, None)),
            (List[str], (None, None)),
            (ElementObject, (Shape.OBJECT, ElementObject)),
            (PageObject, (None, None)),
            (None, (None, None)),
        ],
    )
    def test_classify(self, hint, expected):
        assert classify(hint) == expected

    @pytest.mark.P0
    def test_double_declaration_fails_at_class_definition(self):
        with pytest.raises(DeclarationError):

            class Broken(PageObject):

                @selector(".a")
                @selector(".b")
                def both(self) -> ElementHandle: ...

    def test_selector_and_xpath_together_fail(self):
        with pytest.warns(DeprecationWarning), pytest.raises(DeclarationError):

            class Broken(PageObject):

                @selector(".a")
                @xpath("//a")
                def both(self) -> List[ElementHandle]: ...

    def test_xpath_is_deprecated(self):
        with pytest.warns(DeprecationWarning, match="@selector"):
            xpath("//div")

    def test_declared_member_cannot_be_assigned(self):
        page_object = TimelinePage()
        with pytest.raises(AttributeError):
            page_object.heading = None


# =============================================================================
# Resolution
# =============================================================================

@allure.epic("Page Objects")
@allure.feature("Resolution")
class TestResolution:

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_single_handle(self, timeline_page):
        heading = await TimelinePage(timeline_page).heading
        assert await eh.text_content(heading) == "Timeline"

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_object_list_wraps_each_match(self, timeline_page):
        tweets = await TimelinePage(timeline_page).tweets

        assert [type(tweet) for tweet in tweets] == [TweetObject, TweetObject]
        assert all(tweet.page is timeline_page for tweet in tweets)
        assert [await eh.text_content(await tweet.like) for tweet in tweets] == ["100", "200"]

    @pytest.mark.asyncio
    async def test_sequence_annotation_is_a_list_shape(self, timeline_page):
        tweets = await TimelinePage(timeline_page).tweet_sequence
        assert isinstance(tweets, list) and len(tweets) == 2

    @pytest.mark.asyncio
    async def test_single_object(self, timeline_page):
        tweet = await TimelinePage(timeline_page).first_tweet
        assert isinstance(tweet, TweetObject)
        assert tweet.element is await timeline_page.query_selector(".tweet")

    @pytest.mark.asyncio
    async def test_nested_members_are_relative_to_the_element(self, timeline_page):
        tweets = await TimelinePage(timeline_page).tweets
        likes = await tweets[1].likes
        assert [await eh.text_content(like) for like in likes] == ["200"]

    @pytest.mark.asyncio
    async def test_no_match(self, timeline_page):
        timeline = TimelinePage(timeline_page)
        tweet = await timeline.first_tweet

        assert await timeline.missing_tweet is None
        assert await timeline.missing_tweets == []
        assert await tweet.missing is None
        assert await tweet.missing_all == []

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_every_access_queries_again(self, timeline_page):
        timeline = TimelinePage(timeline_page)
        assert len(await timeline.tweets) == 2

        body = await timeline_page.query_selector("body")
        body.append(FakeElement("div", classes="tweet", children=[FakeElement("div", classes="like", text="300")]))

        tweets = await timeline.tweets
        assert len(tweets) == 3
        assert await eh.text_content(await tweets[2].like) == "300"

    @pytest.mark.asyncio
    async def test_each_access_is_a_new_awaitable(self, timeline_page):
        timeline = TimelinePage(timeline_page)
        first, second = timeline.heading, timeline.heading
        assert isinstance(first, PendingMember)
        assert first is not second
        assert await first is await second

    @pytest.mark.asyncio
    async def test_member_can_be_awaited_again(self, timeline_page):
        tweets = TimelinePage(timeline_page).tweets
        assert len(await tweets) == 2

        body = await timeline_page.query_selector("body")
        body.append(FakeElement("div", classes="tweet"))
        assert len(await tweets) == 3

    @pytest.mark.asyncio
    async def test_unawaited_reads_emit_no_warnings(self, timeline_page):
        timeline = TimelinePage(timeline_page)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert hasattr(timeline, "heading")
            getattr(timeline, "tweets", None)
            repr(timeline.first_tweet)
            gc.collect()

        assert [w for w in caught if issubclass(w.category, RuntimeWarning)] == []
        assert "TimelinePage.first_tweet" in repr(timeline.first_tweet)

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_objects_without_owner_resolve_empty(self):
        timeline = TimelinePage()
        tweet = TweetObject()

        assert await timeline.heading is None
        assert await timeline.first_tweet is None
        assert await timeline.tweets == []
        assert await tweet.like is None
        assert await tweet.likes == []

    @pytest.mark.asyncio
    async def test_malformed_annotation_resolves_to_none(self, timeline_page, warnings_logged):
        timeline = TimelinePage(timeline_page)

        assert await timeline.wrong_type is None
        assert await timeline.unresolvable is None
        assert any("wrong_type" in message for message in warnings_logged)
        assert any("unresolvable" in message for message in warnings_logged)

    @pytest.mark.asyncio
    async def test_xpath_list_shapes(self, timeline_page):
        timeline = XPathTimelinePage(timeline_page)

        headings = await timeline.headings
        divs = await timeline.divs
        assert [await eh.text_content(h) for h in headings] == ["Timeline"]
        assert [await eh.text_content(d.element) for d in divs] == ["100", "100", "200", "200"]
        assert all(isinstance(d, TweetObject) for d in divs)

    @pytest.mark.asyncio
    async def test_xpath_single_shapes_resolve_to_none(self, timeline_page, warnings_logged):
        timeline = XPathTimelinePage(timeline_page)

        assert await timeline.heading is None
        assert await timeline.first_div is None
        assert any("xpath declarations cannot return" in message for message in warnings_logged)


# =============================================================================
# Factory
# =============================================================================

@allure.epic("Page Objects")
@allure.feature("Factory")
class TestFactory:

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_goto_wraps_page_and_response(self, timeline_page):
        timeline = await goto(timeline_page, "https://example.com/home", TimelinePage)

        assert isinstance(timeline, TimelinePage)
        assert timeline.page is timeline_page
        assert timeline.response.url == "https://example.com/home"
        assert timeline_page.navigations == ["https://example.com/home"]

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_wait_for_navigation_wraps_the_triggered_response(self, timeline_page):
        timeline = await wait_for_navigation(
            timeline_page,
            TimelinePage,
            lambda: timeline_page.goto("https://example.com/next"),
            wait_until="load",
        )

        assert isinstance(timeline, TimelinePage)
        assert timeline.page is timeline_page
        assert timeline.response.url == "https://example.com/next"
        assert timeline_page.navigation_waits == [{"wait_until": "load"}]

    @pytest.mark.asyncio
    async def test_wait_for_navigation_without_navigation_times_out(self, timeline_page):
        with pytest.raises(PlaywrightTimeoutError):
            await wait_for_navigation(timeline_page, TimelinePage, timeout=10)
        assert timeline_page.navigations == []

    @pytest.mark.asyncio
    async def test_wait_for_navigation_requires_page(self):
        with pytest.raises(MissingHandleError, match="Parameter 'page'"):
            await wait_for_navigation(None, TimelinePage)

    @pytest.mark.asyncio
    async def test_reload(self, timeline_page):
        timeline = await reload(timeline_page, TimelinePage)
        assert timeline.response.url == timeline_page.url

    @pytest.mark.asyncio
    async def test_query_selector_from_page(self, timeline_page):
        tweet = await query_selector(timeline_page, ".tweet", TweetObject)
        assert tweet.page is timeline_page
        assert await eh.text_content(await tweet.like) == "100"

    @pytest.mark.asyncio
    async def test_query_selector_from_element_uses_owner_page(self, timeline_page):
        body = await timeline_page.query_selector("body")
        tweet = await query_selector(body, ".tweet", TweetObject)
        assert tweet.page is timeline_page

    @pytest.mark.asyncio
    async def test_query_selector_no_match(self, timeline_page):
        assert await query_selector(timeline_page, ".missing", TweetObject) is None
        assert await query_selector_all(timeline_page, ".missing", TweetObject) == []

    @pytest.mark.asyncio
    async def test_query_selector_all(self, timeline_page):
        tweets = await query_selector_all(timeline_page, ".tweet", TweetObject)
        assert len(tweets) == 2
        assert all(tweet.page is timeline_page for tweet in tweets)

    @pytest.mark.asyncio
    async def test_query_xpath_is_deprecated(self, timeline_page):
        with pytest.warns(DeprecationWarning):
            headings = await query_xpath(timeline_page, "//h1", ElementObject)
        assert len(headings) == 1

    @pytest.mark.asyncio
    async def test_wait_for_selector(self, timeline_page):
        tweet = await wait_for_selector(timeline_page, ".tweet", TweetObject, state="attached")
        assert isinstance(tweet, TweetObject)

    @pytest.mark.asyncio
    async def test_factory_requires_owner(self):
        with pytest.raises(MissingHandleError, match="Parameter 'owner'"):
            await query_selector(None, ".tweet", TweetObject)
        with pytest.raises(MissingHandleError, match="Parameter 'page'"):
            await goto(None, "https://example.com", TimelinePage)
