"""
File Utilities Module
Host-side discovery and reading of component and stylesheet documents.
"""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Union

from stylelens.errors import NoDefinitionTarget, ReadError
from stylelens.models import ComponentDocument, Dialect, StylesheetDocument

logger = logging.getLogger(__name__)

# File extension categories
EXTENSION_GROUPS = {
    'components': {'.jsx', '.tsx', '.vue', '.svelte'},
    'stylesheets': {'.css'},
}

EXCLUDED_DIRS = {'node_modules', 'dist', 'build', '__pycache__'}

# Conventional global stylesheets, in lookup order
TARGET_STYLE_FILES = [
    # Next.js
    'src/app/global.css',
    'src/app/globals.css',
    'src/styles/globals.css',
    'app/global.css',
    'app/globals.css',
    # Vite/React
    'src/main.css',
    'src/App.css',
    # Angular
    'src/styles.css',
    # Vue
    'src/assets/styles.css',
    'src/assets/main.css',
    # Astro
    'src/styles/global.css',
    # Common patterns
    'src/global.css',
    'src/index.css',
    'src/app.css',
    'styles.css',
    'assets/css/main.css',
    'public/styles.css',
    # Tailwind entry points
    'src/tailwind.css',
    'src/styles/tailwind.css',
]


def normalize_path(path: Union[str, Path]) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    return path.name.startswith('.')


def _walk(base_path: Path):
    for root, dirs, files in os.walk(base_path):
        # Skip hidden and dependency directories
        dirs[:] = sorted(d for d in dirs if d not in EXCLUDED_DIRS and not is_hidden(Path(root) / d))
        for file in sorted(files):
            file_path = Path(root) / file
            if not is_hidden(file_path):
                yield file_path


def collect_files(base_path: Union[str, Path]) -> Dict[str, List[Path]]:
    """
    Collect component and stylesheet files from a directory.

    Returns:
        {'components': [...], 'stylesheets': [...]} in sorted path order
    """
    base_path = normalize_path(base_path)
    result = {category: [] for category in EXTENSION_GROUPS}
    for file_path in _walk(base_path):
        suffix = file_path.suffix.lower()
        for category, extensions in EXTENSION_GROUPS.items():
            if suffix in extensions:
                result[category].append(file_path)
                break
    logger.info(f"Found {len(result['components'])} components and "
                f"{len(result['stylesheets'])} stylesheets under {base_path}")
    return result


def read_file_content(file_path: Path) -> str:
    """
    Read file content as UTF-8.

    Raises:
        OSError: If the file can't be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def read_document_text(file_path: Path, document_id: str) -> str:
    """Read a document, raising ReadError if it is missing or not UTF-8."""
    try:
        return read_file_content(file_path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(document_id, str(e)) from e


def file_id(file_path: Path, base_path: Path) -> str:
    try:
        return file_path.relative_to(base_path).as_posix()
    except ValueError:
        return file_path.as_posix()


def load_component_documents(paths: Iterable[Path], base_path: Union[str, Path]) -> List[ComponentDocument]:
    base_path = normalize_path(base_path)
    documents = []
    for path in paths:
        dialect = Dialect.from_path(path)
        if dialect is None:
            logger.debug(f"Ignoring {path}: not a component file")
            continue
        document_id = file_id(path, base_path)
        try:
            documents.append(ComponentDocument(document_id, dialect, read_document_text(path, document_id)))
        except ReadError as e:
            logger.error(f"Error reading {e}")
            documents.append(ComponentDocument(document_id, dialect, read_error=e.message))
    return documents


def load_stylesheet_documents(paths: Iterable[Path], base_path: Union[str, Path]) -> List[StylesheetDocument]:
    base_path = normalize_path(base_path)
    documents = []
    for path in paths:
        document_id = file_id(path, base_path)
        try:
            documents.append(StylesheetDocument(document_id, read_document_text(path, document_id)))
        except ReadError as e:
            logger.error(f"Error reading {e}")
            documents.append(StylesheetDocument(document_id, read_error=e.message))
    return documents


def find_target_stylesheet(base_path: Union[str, Path]) -> Path:
    """Return the project's global stylesheet, falling back to any CSS module file."""
    base_path = normalize_path(base_path)
    candidates = [path for path in _walk(base_path) if path.suffix.lower() == '.css']
    relative = {file_id(path, base_path): path for path in candidates}
    for pattern in TARGET_STYLE_FILES:
        for rel_path, path in relative.items():
            if rel_path == pattern or rel_path.endswith('/' + pattern):
                return path
    for rel_path, path in relative.items():
        # fnmatch's * also crosses directories
        if fnmatch.fnmatch(rel_path, 'src/*.module.css'):
            return path
    raise NoDefinitionTarget(f"No stylesheet found under {base_path} to receive generated rules")
