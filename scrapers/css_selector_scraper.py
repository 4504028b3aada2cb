# scrapers/css_selector_scraper.py
import logging
from urllib.parse import urljoin
from bs4 import BeautifulSoup

from errors import ExtractionError
from models import Recipe
from processors.recipe_processor import clean_text, clean_items
from scrapers import BaseScraper

logger = logging.getLogger(__name__)

SELECTOR_FIELDS = ('title', 'description', 'ingredients', 'steps', 'image')


class CssSelectorScraper(BaseScraper):
    """Base scraper for websites whose recipe pages can be read with fixed CSS selectors"""

    def __init__(self, site_name, domains, selectors, headers=None):
        """
        Initialize the selector based scraper

        Args:
            site_name (str): Name of the website (e.g., '15gram')
            domains (list): Host names served by the website
            selectors (dict): CSS selectors for each of title, description,
                ingredients, steps and image. A list is tried in order; a
                single string is one selector
            headers (dict, optional): Request headers
        """
        super().__init__(headers)

        missing = [name for name in SELECTOR_FIELDS if not selectors.get(name)]
        if missing:
            raise ValueError(f"{site_name} selectors missing for: {', '.join(missing)}")

        self.site_name = site_name
        self.domains = tuple(domain.lower() for domain in domains)
        self.selectors = {
            name: [selectors[name]] if isinstance(selectors[name], str) else list(selectors[name])
            for name in SELECTOR_FIELDS
        }

        logger.debug(f"Initialized {site_name} scraper for {', '.join(self.domains)}")

    def extract_recipe(self, html_content, url):
        soup = BeautifulSoup(html_content, 'lxml')

        recipe = Recipe(
            title=self._extract_text(soup, 'title'),
            description=self._extract_text(soup, 'description'),
            ingredients=self._extract_list(soup, 'ingredients'),
            steps=self._extract_list(soup, 'steps', step=True),
            image_url=self._extract_image(soup, url),
            source_url=url
        )

        if recipe.is_empty():
            logger.error(f"No recipe found on {url}")
            raise ExtractionError(f"No recipe title, ingredients or steps found on {url}")

        logger.info(
            f"Extracted recipe '{recipe.title}' with {len(recipe.ingredients)} ingredients "
            f"and {len(recipe.steps)} steps"
        )
        return recipe

    def _extract_text(self, soup, field_name):
        """Text of the first element found by the field's selectors, or an empty string"""
        for selector in self.selectors[field_name]:
            elem = soup.select_one(selector)
            text = clean_text(elem.get_text(' ')) if elem else ""
            if text:
                return text

        logger.warning(f"No {field_name} found with selectors {self.selectors[field_name]}")
        return ""

    def _extract_list(self, soup, field_name, step=False):
        """Text of every element found by the first selector that finds any, in page order"""
        for selector in self.selectors[field_name]:
            elems = soup.select(selector)
            items = clean_items([elem.get_text(' ') for elem in elems], step=step)
            if items:
                return items

        logger.warning(f"No {field_name} found with selectors {self.selectors[field_name]}")
        return []

    def _extract_image(self, soup, url):
        """Absolute URL of the recipe image, or an empty string"""
        image_url = None

        for selector in self.selectors['image']:
            image_elem = soup.select_one(selector)
            if not image_elem:
                continue

            image_url = image_elem.get('src') or image_elem.get('data-src')
            if not image_url and image_elem.get('srcset'):
                # First candidate of "a.jpg 480w, b.jpg 800w"
                image_url = image_elem['srcset'].split(',')[0].strip().split(' ')[0]
            if image_url:
                break

        if not image_url:
            og_image = soup.find('meta', property='og:image')
            if og_image and og_image.get('content'):
                image_url = og_image['content']
                logger.debug(f"Using og:image: {image_url}")

        if not image_url:
            logger.warning(f"No image found with selectors {self.selectors['image']}")
            return ""

        # Make sure URL is absolute
        return urljoin(url, image_url.strip())
