# models.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Recipe:
    """
    A recipe as extracted from a single page. Missing fields are empty, never None.

    Ingredients and steps are stored as tuples so the record cannot change
    after construction; to_dict turns them back into lists for JSON.
    """
    title: str = ""
    description: str = ""
    ingredients: Tuple[str, ...] = ()
    steps: Tuple[str, ...] = ()
    image_url: str = ""
    source_url: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'ingredients', tuple(self.ingredients))
        object.__setattr__(self, 'steps', tuple(self.steps))

    def to_dict(self):
        return {
            'title': self.title,
            'description': self.description,
            'ingredients': list(self.ingredients),
            'steps': list(self.steps),
            'image_url': self.image_url,
            'source_url': self.source_url,
        }

    @classmethod
    def from_dict(cls, data):
        """Build a Recipe from a dict, treating missing or null keys as empty"""
        return cls(
            title=data.get('title') or "",
            description=data.get('description') or "",
            ingredients=data.get('ingredients') or (),
            steps=data.get('steps') or (),
            image_url=data.get('image_url') or "",
            source_url=data.get('source_url') or "",
        )

    def is_empty(self):
        """True when none of the core recipe fields were found"""
        return not (self.title or self.ingredients or self.steps)
