# recipe_storage.py
import json
import logging
import os
import re
import tempfile
from pathlib import Path

import config
from errors import RecipeWriteError
from models import Recipe

logger = logging.getLogger(__name__)


def sanitize_filename(filename):
    """Sanitize filename to be filesystem-safe"""
    # Remove invalid characters
    filename = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', filename)
    # Replace multiple spaces with single space
    filename = re.sub(r'\s+', ' ', filename)
    # Trim to reasonable length
    filename = filename[:100]
    return filename.strip().strip('.')


def current_umask():
    """The process umask (os.umask can only be read by setting it)"""
    umask = os.umask(0)
    os.umask(umask)
    return umask


class RecipeStorage:
    """Store scraped recipes as JSON files"""

    def __init__(self, output_dir=None):
        self.output_dir = Path(output_dir or config.OUTPUT_DIR)

    def build_filename(self, recipe):
        """
        File name for a recipe: recipe_<title>.json, or recipe.json without a usable title

        Args:
            recipe (Recipe): Recipe data

        Returns:
            str: File name
        """
        title = sanitize_filename(recipe.title)
        if not title:
            return "recipe.json"
        return f"recipe_{title}.json"

    def save_recipe(self, recipe):
        """
        Save a recipe to a JSON file in the output directory

        The JSON is written to a temporary file first and then renamed, so a
        failed write does not leave a partial file behind.

        Args:
            recipe (Recipe): Recipe data

        Returns:
            Path: Path of the written file

        Raises:
            RecipeWriteError: If the directory or the file cannot be written
        """
        file_path = self.output_dir / self.build_filename(recipe)
        tmp_path = None

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(
                prefix='.recipe_', suffix='.json.tmp', dir=self.output_dir
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(recipe.to_dict(), f, indent=2, ensure_ascii=False)
                f.write('\n')

            # mkstemp creates the file as 0600; give it the mode open() would
            os.chmod(tmp_path, 0o666 & ~current_umask())
            os.replace(tmp_path, file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"Error saving recipe '{recipe.title}' to {file_path}: {str(e)}")
            raise RecipeWriteError(f"Could not write {file_path}: {e}") from e

        logger.info(f"Saved recipe '{recipe.title}' to {file_path}")
        return file_path

    def load_recipe(self, path):
        """
        Load a recipe previously written by save_recipe

        Args:
            path (str|Path): JSON file path

        Returns:
            Recipe: Loaded recipe
        """
        with open(path, 'r', encoding='utf-8') as f:
            return Recipe.from_dict(json.load(f))
