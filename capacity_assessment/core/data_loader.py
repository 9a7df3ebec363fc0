import json
import os
from typing import Any, Dict, List, Tuple
from pydantic import ValidationError as PydanticValidationError
import logging

from .models import Catalog
from ..utils.validation import validate_and_raise

logger = logging.getLogger(__name__)


def _format_schema_errors(exc: PydanticValidationError) -> List[str]:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        errors.append(f"{location}: {error['msg']}")
    return errors


def parse_catalog(data: Dict[str, Any]) -> Catalog:
    """
    Build a catalog from decoded JSON and check its invariants.

    Raises:
        ValidationError: if the data breaks the catalog schema (e.g. a question
            without options) or the integrity checks
    """
    if not isinstance(data, dict) or "questions" not in data:
        validate_and_raise((False, "Catalog must be an object with a 'questions' list"), "Catalog load")

    try:
        catalog = Catalog(**data)
    except PydanticValidationError as e:
        validate_and_raise((False, _format_schema_errors(e)), "Catalog load")

    validate_and_raise(validate_catalog(catalog), "Catalog load")
    return catalog


def load_catalog(file_path: str) -> Catalog:
    try:
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Catalog file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        catalog = parse_catalog(data)

        logger.info(
            f"Successfully loaded {len(catalog.questions)} questions "
            f"across {len(catalog.criteria())} criteria"
        )
        return catalog

    except Exception as e:
        logger.error(f"Failed to load catalog: {e}")
        raise


def validate_catalog(catalog: Catalog) -> Tuple[bool, List[str]]:
    errors = []

    if not catalog.questions:
        errors.append("Catalog has no questions")

    seen_ids = set()
    for position, question in enumerate(catalog.questions):
        if not question.id.strip():
            errors.append(f"Question at position {position} has an empty id")
        elif question.id in seen_ids:
            errors.append(f"Duplicate question id: {question.id}")
        seen_ids.add(question.id)

        if not question.criterion.strip():
            errors.append(f"Question {question.id} has an empty criterion")

    is_valid = len(errors) == 0
    if is_valid:
        logger.info("Catalog validation passed")
    else:
        logger.warning(f"Catalog validation failed with {len(errors)} errors")

    return is_valid, errors
