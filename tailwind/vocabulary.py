"""
Tailwind Vocabulary Module
Loads the list of known utility class names once per process.
"""

import json
import logging
import os
from pathlib import Path
from typing import FrozenSet, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_PATH = os.path.join(os.path.dirname(__file__), 'tailwind-classes.json')


def load_utility_vocabulary(path: Optional[Union[str, Path]] = None) -> FrozenSet[str]:
    """Read a `{"classes": [...]}` JSON file; an unreadable file yields an empty vocabulary."""
    vocabulary_path = Path(path or DEFAULT_VOCABULARY_PATH)
    try:
        with open(vocabulary_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        classes = data.get('classes', []) if isinstance(data, dict) else []
        vocabulary = frozenset(str(name) for name in classes)
        logger.info(f"Loaded {len(vocabulary)} utility classes from {vocabulary_path}")
        return vocabulary
    except (OSError, ValueError) as e:
        logger.error(f"Could not read utility vocabulary {vocabulary_path}: {str(e)}")
        return frozenset()
