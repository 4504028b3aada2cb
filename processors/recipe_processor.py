# processors/recipe_processor.py
import re
import logging

logger = logging.getLogger(__name__)

# "1.", "2)", "Stap 3:" or "Step 3 -" at the start of an instruction
STEP_NUMBER_PATTERN = re.compile(r'^\s*(?:(?:stap|step)\s*\d+\s*[.):\-]?|\d+\s*[.):\-])\s+', re.IGNORECASE)


def clean_text(text):
    """
    Collapse whitespace (including non-breaking spaces) and trim

    Text joined from neighbouring tags gets a space at every tag boundary,
    so spaces before closing punctuation and after an opening bracket are
    removed again.
    """
    if not text:
        return ""
    text = re.sub(r'\s+', ' ', text.replace('\xa0', ' ')).strip()
    text = re.sub(r' ([.,;:!?)\]])', r'\1', text)
    return re.sub(r'([(\[]) ', r'\1', text)


def clean_step(text):
    """Clean an instruction step and remove a leading step number"""
    cleaned_step = clean_text(text)
    return STEP_NUMBER_PATTERN.sub('', cleaned_step, count=1).strip()


def clean_items(items, step=False):
    """
    Clean a list of ingredient or instruction strings

    Args:
        items (list): Raw text of each item in page order
        step (bool): Strip leading step numbers as well

    Returns:
        list: Cleaned, non-empty items in the original order
    """
    cleaner = clean_step if step else clean_text
    cleaned = []

    for item in items:
        text = cleaner(item)
        if text:
            cleaned.append(text)

    if len(cleaned) != len(items):
        logger.debug(f"Dropped {len(items) - len(cleaned)} empty item(s)")

    return cleaned
