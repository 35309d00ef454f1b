"""
Document access for word-list files.

Reads and parses JSON documents, discovers files under the data tree, pairs
target-language files with their source-language counterparts and asks git
which files changed on the current branch.
"""

import json
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any, List, Optional, Union

from .config import Config
from .errors import DocumentParseError, DocumentReadError
from .languages import is_valid_language
from .models import VocabularyUnit


logger = logging.getLogger(__name__)

PathLike = Union[str, PurePath]


@dataclass(frozen=True)
class ContentLocation:
    """Where a document sits in the data/<type>/<language>/<grade> layout."""
    content_type: Optional[str] = None
    language: Optional[str] = None
    grade: Optional[str] = None


def parse_content_path(path: PathLike) -> ContentLocation:
    """Pick the content type, language and grade segments out of a path."""
    content_type = language = grade = None
    for part in PurePath(path).parts:
        if content_type is None and part in Config.CONTENT_TYPES:
            content_type = part
        elif language is None and is_valid_language(part):
            language = part
        elif grade is None and part in Config.GRADE_LEVELS:
            grade = part
    return ContentLocation(content_type=content_type, language=language, grade=grade)


def read_text(path: PathLike) -> str:
    """
    Read a document as UTF-8 text.

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DocumentReadError(f"File not found: {path}", str(path))
    try:
        return file_path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"Invalid UTF-8 encoding in {path}: {e}", str(path)) from e
    except OSError as e:
        raise DocumentReadError(f"Error reading file {path}: {e}", str(path)) from e


def parse_json(content: str, path: Optional[PathLike] = None) -> Any:
    """
    Parse JSON text.

    Raises:
        DocumentParseError: With the decoder's line and column on failure
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})",
            str(path) if path is not None else None,
            line=e.lineno,
            column=e.colno,
        ) from e


def load_json_document(path: PathLike) -> Any:
    """Read and parse a JSON document."""
    return parse_json(read_text(path), path)


def load_unit(path: PathLike) -> VocabularyUnit:
    """Read a document and normalize it into a VocabularyUnit."""
    location = parse_content_path(path)
    return VocabularyUnit.from_document(
        load_json_document(path),
        path=str(path),
        language=location.language,
        grade=location.grade,
    )


def find_json_files(root: PathLike = Config.DATA_DIR, pattern: str = Config.DATA_GLOB) -> List[str]:
    """Find JSON files under root, sorted for stable output."""
    root_path = Path(root)
    if not root_path.is_dir():
        logger.warning(f"Data directory not found: {root}")
        return []
    return sorted(
        str(p) for p in root_path.glob(pattern)
        if p.is_file() and "node_modules" not in p.parts
    )


def json_files_in_directory(directory: PathLike) -> List[str]:
    """JSON files directly inside a directory (not recursive), sorted."""
    dir_path = Path(directory)
    if not dir_path.is_dir():
        return []
    return sorted(str(p) for p in dir_path.iterdir() if p.is_file() and p.suffix == ".json")


def find_source_file(target_file: PathLike, base_language: str = Config.BASE_LANGUAGE) -> Optional[str]:
    """
    Locate the source-language counterpart of a target-language file.

    The first supported-language segment of the path is replaced with the
    base language.

    Returns:
        Path of the source file, or None if the path names no language or
        the substituted file does not exist
    """
    parts = list(PurePath(target_file).parts)
    for index, part in enumerate(parts):
        if is_valid_language(part):
            parts[index] = base_language
            source = Path(*parts)
            return str(source) if source.is_file() else None
    return None


def get_changed_files(base_branch: str = Config.DEFAULT_BASE_BRANCH,
                      cwd: Optional[PathLike] = None) -> List[str]:
    """
    List JSON files changed on this branch relative to origin/<base_branch>.

    Returns an empty list when git is unavailable or the diff fails.
    """
    cmd = ["git", "diff", "--name-only", f"origin/{base_branch}...HEAD"]
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=Config.GIT_TIMEOUT_SECONDS,
        )
    except FileNotFoundError:
        logger.warning("git not found, cannot determine changed files")
        return []
    except subprocess.TimeoutExpired:
        logger.warning("git diff timed out, cannot determine changed files")
        return []

    if result.returncode != 0:
        logger.warning(f"Could not determine changed files: {result.stderr.strip()}")
        return []

    return [
        line.strip() for line in result.stdout.splitlines()
        if line.strip().endswith(".json")
    ]
