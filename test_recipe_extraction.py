#!/usr/bin/env python3
"""
Tests for the 15gram scraper

Runs the selector based extraction against saved 15gram recipe pages.
"""

import pytest

from conftest import RECIPE_URL
from errors import ExtractionError
from models import Recipe
from scrapers.css_selector_scraper import CssSelectorScraper
from scrapers.fifteen_gram_scraper import FifteenGramScraper


def test_extracts_expected_recipe(recipe_html):
    recipe = FifteenGramScraper().extract_recipe(recipe_html, RECIPE_URL)

    assert recipe == Recipe(
        title="Shakshuka met feta",
        description="Een pittig ontbijt uit één pan, klaar in 25 minuten.",
        ingredients=[
            "2 uien",
            "400 g tomaten in blik",
            "4 eieren",
            "100 g feta",
        ],
        steps=[
            "Snipper de uien en stoof ze glazig.",
            "Voeg de tomaten toe en laat 10 minuten pruttelen.",
            "Breek de eieren in de saus en bak ze gaar.",
            "Verkruimel de feta erover.",
        ],
        image_url="https://15gram.be/media/recipes/shakshuka.jpg",
        source_url=RECIPE_URL,
    )


def test_missing_image_gives_empty_image_url(recipe_html_no_image):
    recipe = FifteenGramScraper().extract_recipe(recipe_html_no_image, RECIPE_URL)

    assert recipe.title == "Linzensoep"
    assert recipe.image_url == ""
    assert recipe.description == ""
    assert recipe.ingredients == ("200 g rode linzen", "1 l groentebouillon")


def test_image_falls_back_to_og_image():
    html = """
    <html><head><meta property="og:image" content="/media/og/soup.jpg"></head>
    <body><h1 class="recipe__title">Soep</h1></body></html>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)

    assert recipe.image_url == "https://15gram.be/media/og/soup.jpg"


def test_image_uses_lazy_loading_attributes():
    html = """
    <h1>Taart</h1>
    <div class="recipe__image"><img data-src="https://cdn.15gram.be/taart.jpg"></div>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)
    assert recipe.image_url == "https://cdn.15gram.be/taart.jpg"

    html = """
    <h1>Taart</h1>
    <div class="recipe__image"><img srcset="/img/taart-480.jpg 480w, /img/taart-800.jpg 800w"></div>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)
    assert recipe.image_url == "https://15gram.be/img/taart-480.jpg"


def test_page_without_recipe_raises():
    html = "<html><body><p>Pagina niet gevonden</p></body></html>"

    with pytest.raises(ExtractionError):
        FifteenGramScraper().extract_recipe(html, RECIPE_URL)


def test_partial_recipe_keeps_found_fields():
    html = """
    <div class="recipe__ingredients"><ul><li>1 appel</li></ul></div>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)

    assert recipe.title == ""
    assert recipe.ingredients == ("1 appel",)
    assert recipe.steps == ()


def test_supports_only_its_domains():
    scraper = FifteenGramScraper()

    assert scraper.supports("https://15gram.be/recepten/soep")
    assert scraper.supports("https://WWW.15gram.be/recepten/soep")
    assert not scraper.supports("https://dagelijksekost.vrt.be/gerechten/soep")
    assert not scraper.supports("https://15gram.be.example.com/recepten/soep")


def test_selector_scraper_requires_all_selectors():
    with pytest.raises(ValueError, match="image"):
        CssSelectorScraper("Test", ["example.com"], {
            'title': 'h1',
            'description': 'p',
            'ingredients': 'li',
            'steps': 'li',
        })


def test_selectors_are_tried_in_priority_order():
    html = """
    <header class="site-header"><h1>15gram</h1></header>
    <article>
      <h1 class="recipe__title">Linzensoep</h1>
      <div class="recipe__intro"><span>Nieuw!</span><p>Snelle soep.</p></div>
      <div class="recipe__preparation"><ol><li>Oude stap.</li></ol></div>
      <div class="recipe__steps"><ol><li>Kook de linzen.</li><li>Mix.</li></ol></div>
    </article>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)

    assert recipe.title == "Linzensoep"
    assert recipe.description == "Snelle soep."
    assert recipe.steps == ("Kook de linzen.", "Mix.")


def test_later_selectors_used_when_earlier_ones_find_nothing():
    html = """
    <h1>Linzensoep</h1>
    <div class="recipe__preparation"><ol><li>Kook de linzen.</li></ol></div>
    <div class="recipe__header"><img src="/img/soep.jpg"></div>
    """
    recipe = FifteenGramScraper().extract_recipe(html, RECIPE_URL)

    assert recipe.title == "Linzensoep"
    assert recipe.steps == ("Kook de linzen.",)
    assert recipe.image_url == "https://15gram.be/img/soep.jpg"


def test_text_from_neighbouring_tags_is_separated():
    scraper = CssSelectorScraper("Test", ["example.com"], {
        'title': 'h1',
        'description': '.intro',
        'ingredients': 'li.ingredient',
        'steps': 'li.step',
        'image': 'img',
    })
    html = """
    <h1>Soep</h1>
    <div class="intro"><p>Eerste zin.</p><p>Tweede zin.</p></div>
    <ul><li class="ingredient"><span>2</span>uien</li></ul>
    <ol><li class="step">Bak <strong>goudbruin</strong>, dan <em>afblussen</em> (met <b>wijn</b>).</li></ol>
    """
    recipe = scraper.extract_recipe(html, "https://example.com/soep")

    assert recipe.description == "Eerste zin. Tweede zin."
    assert recipe.ingredients == ("2 uien",)
    assert recipe.steps == ("Bak goudbruin, dan afblussen (met wijn).",)
