from typing import Dict, List

import pytest
import requests

from olx_crawler.prompter import Prompter


class FakeResponse(object):
    def __init__(self, url: str, text: str, status_code: int = 200):
        self.url = url
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeSession(object):
    """Serves canned pages by url and records every request."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.requested: List[str] = []
        self.headers: List[dict] = []

    def get(self, url, headers=None, timeout=None):
        self.requested.append(url)
        self.headers.append(headers)
        if url not in self.pages:
            raise requests.ConnectionError(f"Cannot resolve {url}")
        page = self.pages[url]
        if isinstance(page, tuple):
            return FakeResponse(url, page[1], status_code=page[0])
        return FakeResponse(url, page)


class ScriptedPrompter(Prompter):
    """Answers from a fixed list, or with a default once the list runs out."""

    def __init__(self, answers=None, default: bool = True):
        self.answers = list(answers or [])
        self.default = default
        self.questions: List[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        if self.answers:
            return self.answers.pop(0)
        return self.default


def result_page(ads, next_href=None) -> str:
    """A search result page with (title, price, href) rows."""
    rows = "".join(
        f"""
        <tr><td>
          <table class="offer">
            <tr><td><a class="detailsLink" href="{href}"><strong>{title}</strong></a></td>
                <td><p class="price"><strong>{price}</strong></p></td></tr>
          </table>
        </td></tr>"""
        for title, price, href in ads
    )
    pager = f'<a data-cy="page-link-next" href="{next_href}">next</a>' if next_href else ""
    return f"""<html><body>
      <table id="offers_table">{rows}</table>
      <div class="pager">{pager}</div>
    </body></html>"""


def detail_page(
    title="Продам квартиру",
    position="Киев, Киевская область, Печерский",
    date_text="Опубликовано с мобильного в 12:34, 5 марта 2019",
    offer_id="Номер объявления: 583957461",
    props=(("Этаж", "5"), ("Этажность", "9"), ("Количество комнат", "2"), ("Общая площадь", "54 м²")),
    description="  Светлая квартира  ",
    seller="  Иван  ",
    photos=("https://img/1.jpg", "https://img/2.jpg"),
) -> str:
    rows = "".join(
        f'<table class="item"><tr><th>{label}</th><td><strong>{value}</strong></td></tr></table>'
        for label, value in props
    )
    images = "".join(f'<div class="photo-glow"><img src="{src}"/></div>' for src in photos)
    return f"""<html><body>
      <div class="offer-titlebox">
        <h1> {title} </h1>
        <div class="offer-titlebox__details">
          <a><strong> {position} </strong></a>
          <em> {date_text} </em>
          <small> {offer_id} </small>
        </div>
      </div>
      <div class="descriptioncontent">{rows}</div>
      <div id="textContent">{description}</div>
      <div class="offer-user__details">{seller}</div>
      {images}
    </body></html>"""


@pytest.fixture
def prompter():
    return ScriptedPrompter()
