import pytest
from selenium.common.exceptions import StaleElementReferenceException

from conftest import FakeElement, article_card, section_page
from elpais_opinion import config
from elpais_opinion.errors import ElementsNotFoundError
from elpais_opinion.extractor import CONTENT_LOCATOR, TITLE_LOCATOR, ArticleExtractor


def extract(cards, limit=5):
    driver = section_page(cards)
    return ArticleExtractor(timeout=0).extract(driver, limit), driver


def test_never_returns_more_than_limit():
    cards = [article_card(title=f"Título {i}", content="Texto") for i in range(8)]
    articles, _ = extract(cards, limit=5)
    assert [a.title for a in articles] == [f"Título {i}" for i in range(5)]


def test_card_without_title_is_dropped_and_not_counted():
    cards = [
        article_card(title="Uno", content="a"),
        article_card(content="sin título"),
        article_card(title="Dos", content="b"),
        article_card(title="Tres", content="c"),
    ]
    articles, _ = extract(cards, limit=3)
    assert [a.title for a in articles] == ["Uno", "Dos", "Tres"]


def test_empty_title_text_is_kept_as_empty_string():
    articles, _ = extract([article_card(title="", content="a")])
    assert articles[0].title == ""


def test_missing_content_gets_placeholder():
    articles, _ = extract([article_card(title="Uno")])
    assert articles[0].content == config.NO_CONTENT == "No content available"


def test_image_src_used_when_it_is_a_url():
    articles, _ = extract([article_card(title="Uno", img_attrs={"src": "https://img/1.jpg"})])
    assert articles[0].image_url == "https://img/1.jpg"


def test_inline_data_src_prefers_lazy_source():
    attrs = {"src": "data:image/gif;base64,R0lGOD", "data-src": "https://img/lazy.jpg"}
    articles, _ = extract([article_card(title="Uno", img_attrs=attrs)])
    assert articles[0].image_url == "https://img/lazy.jpg"


def test_inline_data_src_kept_without_lazy_source():
    attrs = {"src": "data:image/gif;base64,R0lGOD"}
    articles, _ = extract([article_card(title="Uno", img_attrs=attrs)])
    assert articles[0].image_url == "data:image/gif;base64,R0lGOD"


def test_no_image_gives_none():
    articles, _ = extract([article_card(title="Uno", content="a")])
    assert articles[0].image_url is None
    assert articles[0].translated_title is None


def test_image_lookup_failure_gives_none():
    card = article_card(title="Uno", content="a")
    card.children[("tag name", "img")] = StaleElementReferenceException("gone")
    articles, _ = extract([card])
    assert articles[0].image_url is None


def test_broken_card_does_not_abort_batch():
    broken = FakeElement(children={TITLE_LOCATOR: StaleElementReferenceException("detached")})
    cards = [article_card(title="Uno"), broken, article_card(title="Dos")]
    articles, _ = extract(cards)
    assert [a.title for a in articles] == ["Uno", "Dos"]


def test_each_processed_card_is_scrolled_into_view():
    cards = [article_card(title=f"T{i}") for i in range(4)]
    _, driver = extract(cards, limit=2)
    scrolled = [args[0] for script, args in driver.scripts if "scrollIntoView" in script]
    assert scrolled == cards[:2]


def test_no_containers_raises():
    with pytest.raises(ElementsNotFoundError):
        ArticleExtractor(timeout=0).extract(section_page([]), 5)


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        ArticleExtractor(timeout=0).extract(section_page([article_card(title="Uno")]), 0)


def test_stale_content_element_gets_placeholder():
    card = article_card(title="Uno")
    card.children[CONTENT_LOCATOR] = StaleElementReferenceException("re-rendered")
    articles, _ = extract([card])
    assert [(a.title, a.content) for a in articles] == [("Uno", "No content available")]
