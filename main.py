# main.py
import argparse
import logging
import sys
import json

from errors import ScraperError
from logging_setup import setup_logging
from recipe_storage import RecipeStorage
from scrapers.registry import get_scraper_for_url

logger = logging.getLogger(__name__)


def scrape_recipe(url, output_dir=None, verbose=False):
    """
    Scrape one recipe URL and write it to a JSON file

    Args:
        url (str): Recipe URL
        output_dir (str, optional): Folder for the JSON file
        verbose (bool): Print the extracted fields

    Returns:
        Path: Path of the written JSON file

    Raises:
        ScraperError: If any stage fails; no file is written in that case
    """
    # Validation and scraper lookup happen before any request is made
    scraper = get_scraper_for_url(url)

    recipe = scraper.scrape(url.strip())

    if verbose:
        print(json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False))

    storage = RecipeStorage(output_dir)
    return storage.save_recipe(recipe)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Scrapes recipes from supported websites")
    parser.add_argument('-u', '--url', help='The URL of the recipe to scrape (prompted for when omitted)')
    parser.add_argument('-o', '--output',
                        help='The output folder to save the recipe JSON (default: current directory)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print the extracted recipe and log debug output')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Log level (default: LOG_LEVEL from the environment or INFO)')
    parser.add_argument('--no-log-file', action='store_true', help='Only log to the console')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the recipe scraper"""
    args = parse_args(argv)

    level = 'DEBUG' if args.verbose else args.log_level
    setup_logging(level=level, log_to_file=not args.no_log_file)

    try:
        url = args.url
        if not url:
            url = input("Recipe URL: ")

        logger.info("Starting recipe scraper")
        file_path = scrape_recipe(url, output_dir=args.output, verbose=args.verbose)
    except ScraperError as e:
        logger.error(f"Recipe scraping failed: {str(e)}")
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.warning("Interrupted, no recipe written")
        return 130

    print(f"Recipe JSON file '{file_path.name}' created successfully in '{file_path.parent}'.")
    logger.info("Recipe scraping completed")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
