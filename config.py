# config.py
import os
from dotenv import load_dotenv

# Load .env file if it exists locally
load_dotenv()

# Scraping Configuration
USER_AGENT = os.environ.get(
    'USER_AGENT',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36'
)
REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', '30'))

DEFAULT_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8',
    'Accept-Language': 'nl-BE,nl;q=0.9,en-US;q=0.8,en;q=0.7',
}

# Output
OUTPUT_DIR = os.environ.get('RECIPE_OUTPUT_DIR', '.')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('LOG_DIR', 'logs')
LOG_FILE = os.getenv('LOG_FILE', 'recipe_scraper.log')

# Recipe websites and the CSS selectors used to read their recipe pages.
# Each field lists its selectors in priority order; the first one that
# finds something wins.
SUPPORTED_SITES = {
    '15gram.be': {
        'name': '15gram',
        'domains': ['15gram.be', 'www.15gram.be'],
        'selectors': {
            'title': ['h1.recipe__title', 'h1'],
            'description': ['.recipe__intro p', '.recipe__intro'],
            'ingredients': ['.recipe__ingredients li'],
            'steps': ['.recipe__steps li', '.recipe__preparation li'],
            'image': ['.recipe__image img', '.recipe__header img'],
        },
    },
}
