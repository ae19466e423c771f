"""Hand-written stand-ins for a Selenium driver and a requests session."""
from __future__ import annotations

import json

import requests
from selenium.common.exceptions import NoSuchElementException


class FakeElement:
    def __init__(self, text="", attrs=None, children=None, displayed=True, on_click=None):
        self.text = text
        self.attrs = attrs or {}
        self.children = children or {}
        self.displayed = displayed
        self.on_click = on_click
        self.clicks = 0

    def find_element(self, by, value):
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def find_elements(self, by, value):
        found = self.children.get((by, value), [])
        if isinstance(found, Exception):
            raise found
        return list(found)

    def get_attribute(self, name):
        return self.attrs.get(name)

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return True

    def click(self):
        self.clicks += 1
        if self.on_click:
            self.on_click()


class FakeDriver(FakeElement):
    def __init__(self, elements=None, url="about:blank", title="El País"):
        super().__init__(children=elements or {})
        self.current_url = url
        self.title = title
        self.visited: list[str] = []
        self.scripts: list[tuple] = []
        self.quit_calls = 0
        self.maximize_error: Exception | None = None

    def get(self, url):
        self.visited.append(url)
        self.current_url = url

    def execute_script(self, script, *args):
        self.scripts.append((script, args))

    def set_page_load_timeout(self, seconds):
        self.page_load_timeout = seconds

    def maximize_window(self):
        if self.maximize_error:
            raise self.maximize_error

    def quit(self):
        self.quit_calls += 1


class FakeResponse:
    def __init__(self, payload=None, status_code=200, content=b"", text=None):
        self.payload = payload
        self.status_code = status_code
        self.content = content
        if text is None:
            text = "" if isinstance(payload, Exception) else json.dumps(payload)
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]


class FakeHttp:
    """Routes get/post calls to handlers; a handler returns a FakeResponse or raises."""

    def __init__(self, get=None, post=None, events=None):
        self.get_handler = get
        self.post_handler = post
        self.calls: list[tuple[str, str, dict]] = []
        self.events = events if events is not None else []

    def get(self, url, **kwargs):
        return self._call("GET", self.get_handler, url, kwargs)

    def post(self, url, **kwargs):
        return self._call("POST", self.post_handler, url, kwargs)

    def _call(self, method, handler, url, kwargs):
        self.calls.append((method, url, kwargs))
        self.events.append(f"http {method}")
        if handler is None:
            raise AssertionError(f"unexpected {method} {url}")
        return handler(url, **kwargs)


def gtx_payload(text: str) -> list:
    """Shape returned by the unauthenticated Google endpoint."""
    return [[[text, "original", None, None, 10]], None, "es"]


def raise_(exc: Exception):
    def handler(*_args, **_kwargs):
        raise exc
    return handler


def article_card(title=None, content=None, img_attrs=None) -> FakeElement:
    from elpais_opinion.extractor import CONTENT_LOCATOR, IMAGE_LOCATOR, TITLE_LOCATOR

    children = {}
    if title is not None:
        children[TITLE_LOCATOR] = [FakeElement(text=title)]
    if content is not None:
        children[CONTENT_LOCATOR] = [FakeElement(text=content)]
    if img_attrs is not None:
        children[IMAGE_LOCATOR] = [FakeElement(attrs=img_attrs)]
    return FakeElement(children=children)


def section_page(cards) -> FakeDriver:
    from elpais_opinion.extractor import ARTICLE_LOCATOR

    return FakeDriver(elements={ARTICLE_LOCATOR: cards}, url="https://elpais.com/opinion/")
