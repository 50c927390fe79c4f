"""
pytest configuration and shared HTML fixtures.

The fixtures are trimmed-down copies of the markup Wikipedia serves for the
ISO 3166-2 index page, a country page and a division article.
"""

import pytest
from bs4 import BeautifulSoup

from wikidivisions.core.config import Config

BASE_URL = "https://en.wikipedia.org"

INDEX_HTML = """
<html><body>
<table class="wikitable sortable">
<tbody>
<tr><th>Code</th><th>Country name</th><th>Subdivisions assigned codes</th></tr>
<tr>
  <td><a href="/wiki/ISO_3166-2:AD" title="ISO 3166-2:AD">AD</a></td>
  <td><a href="/wiki/Andorra" title="Andorra">Andorra</a></td>
  <td>7 parishes</td>
</tr>
<tr>
  <td><a href="/wiki/ISO_3166-2:AQ" title="ISO 3166-2:AQ">AQ</a></td>
  <td><a href="/wiki/Antarctica" title="Antarctica">Antarctica</a></td>
  <td>—</td>
</tr>
<tr>
  <td><a href="/wiki/ISO_3166-2:FR" title="ISO 3166-2:FR">FR</a></td>
  <td><a href="/wiki/France" title="France">France</a></td>
  <td>13 metropolitan regions<br />
96 metropolitan departments</td>
</tr>
<tr>
  <td><a href="/wiki/ISO_3166-2:BV" title="ISO 3166-2:BV">BV</a></td>
  <td>Bouvet Island</td>
  <td>â€”</td>
</tr>
</tbody>
</table>
</body></html>
"""

COUNTRY_HTML = """
<html><body>
<table class="wikitable sortable">
<tbody>
<tr><th>Code</th><th>Subdivision name</th><th>Subdivision category</th></tr>
<tr>
  <td><span style="font-family: monospace, monospace;">XA-01</span></td>
  <td><span class="flagicon"><a href="/wiki/File:Flag_of_Alpha.svg" class="image" title="Flag of Alpha"><img src="flag.png" /></a></span>
      <a href="/wiki/Alpha_Province" title="Alpha Province">Alpha</a></td>
  <td>province</td>
</tr>
<tr>
  <td><span style="font-family: monospace, monospace;">XA-02</span></td>
  <td>Beta</td>
  <td>region</td>
</tr>
</tbody>
</table>
<p>Changes</p>
<table class="wikitable sortable">
<tbody>
<tr><th>Code</th><th>Subdivision name</th><th>In division</th></tr>
<tr>
  <td><span style="font-family: monospace, monospace;">XA-01-AB</span></td>
  <td><a href="/wiki/Abc_(district)" title="Abc (district)">Abc<span style="display:none;"> (district)</span></a></td>
  <td><span style="font-family: monospace, monospace;">XA-01</span></td>
</tr>
<tr>
  <td>XA-CD</td>
  <td><span style="display: none">Sortkey</span>Cde</td>
  <td>XA</td>
</tr>
</tbody>
</table>
</body></html>
"""

ARTICLE_HTML = """
<html><body>
<div id="content">Alpha Province is a province.</div>
<div id="p-lang" class="portal">
<ul>
  <li><a href="https://ja.wikipedia.org/wiki/%E6%97%A5%E6%9C%AC" title="日本 – Japan, country"
         lang="ja" hreflang="ja" class="interlanguage-link-target">日本語</a></li>
  <li><a href="https://de.wikipedia.org/wiki/Alpha_(Provinz)" title="Alpha (Provinz) – German"
         hreflang="de" class="interlanguage-link-target">Deutsch</a></li>
  <li><a href="https://www.wikidata.org/wiki/Q1" class="wbc-editpage" title="Edit interlanguage links">Edit links</a></li>
</ul>
</div>
</body></html>
"""


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.fixture
def index_soup():
    return parse(INDEX_HTML)


@pytest.fixture
def country_soup():
    return parse(COUNTRY_HTML)


@pytest.fixture
def article_soup():
    return parse(ARTICLE_HTML)


@pytest.fixture
def settings(tmp_path):
    """Config writing into a temporary result directory."""
    return Config(base_url=BASE_URL, result_dir=tmp_path, progress_enabled=False)


@pytest.fixture
def html_pages():
    """Raw page markup, for tests that feed a fake client."""
    return {"index": INDEX_HTML, "country": COUNTRY_HTML, "article": ARTICLE_HTML}
