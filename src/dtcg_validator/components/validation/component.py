"""
Validation component - validate a design token document.

Pure functions, no I/O. A run builds the registry, walks the tree once,
resolves references per token and dispatches each concrete value to its
type validator. Every subtree is visited; one bad token never stops the run.

Only three conditions end a run before the walk: empty input, unparsable
input and a root that is not an object.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from dtcg_validator.components.registry import TokenRegistry, build_registry
from dtcg_validator.components.resolver import Unresolved, resolve_reference
from dtcg_validator.components.values import Findings, validate_value
from dtcg_validator.domain.grammar import FORBIDDEN_NAME_CHARACTERS
from dtcg_validator.domain.references import extract_reference_path, is_reference
from dtcg_validator.domain.tree import NodeKind, TreeNode, walk

from .models import ValidateDocumentInput, ValidateTextInput, ValidationResult

logger = logging.getLogger(__name__)

EMPTY_INPUT = "Input is empty"
ROOT_NOT_OBJECT = "Root must be an object"


# --- Tree validation ---


def check_name(key: str, path: str, findings: Findings) -> None:
    if any(ch in FORBIDDEN_NAME_CHARACTERS for ch in key):
        findings.error(
            f'Token name "{key}" at {path} contains invalid characters ({{, }}, ., or ")'
        )


def validate_token(node: TreeNode, registry: TokenRegistry) -> Findings:
    """
    Validate one token node.

    Effective type is the token's own `$type`; for a reference, else the type
    of the token the chain ends at; then the enclosing group's `$type`.
    """
    findings = Findings()
    token: dict[str, Any] = node.value
    own_type = token.get("$type")
    value = token["$value"]
    token_type = own_type or node.ambient_type

    if is_reference(value):
        resolution = resolve_reference(extract_reference_path(value), registry)
        if isinstance(resolution, Unresolved):
            findings.error(f"{resolution.error} at {node.path}")
            return findings
        value = resolution.value
        token_type = own_type or resolution.type or node.ambient_type

    if not token_type:
        findings.error(
            f"Token at {node.path} has no determinable type (no $type property or group type)"
        )
        return findings

    validate_value(token_type, value, node.path, findings)
    return findings


def validate_tree(document: dict[str, Any], registry: TokenRegistry) -> Findings:
    """Walk the whole document and collect findings in document order."""
    findings = Findings()

    for node in walk(document):
        check_name(node.key, node.path, findings)

        if node.kind is NodeKind.TOKEN:
            findings.merge(validate_token(node, registry))
        elif node.kind is NodeKind.MALFORMED:
            findings.error(f"Token at {node.path} is missing $value")

    return findings


def count_tokens(document: dict[str, Any]) -> int:
    """Number of nodes carrying `$value`."""
    return sum(1 for node in walk(document) if node.kind is NodeKind.TOKEN)


# --- Entry points ---


def _is_empty(document: Any) -> bool:
    if document is None:
        return True
    # Empty scalars count as no input; an empty list is a non-object root.
    return not isinstance(document, (dict, list)) and not document


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def parse_document(raw_text: str) -> Any:
    """
    Parse JSON text strictly.

    Raises:
        ValueError: If the text is not valid JSON (NaN/Infinity included).
    """
    return json.loads(raw_text, parse_constant=_reject_constant)


def validate_tokens_object(document: Any) -> ValidationResult:
    """
    Validate an already parsed token document.

    Args:
        document: Parsed document, normally a dict.

    Returns:
        ValidationResult with errors, warnings and the token count.
    """
    if _is_empty(document):
        return ValidationResult.failure(EMPTY_INPUT)

    if not isinstance(document, dict):
        return ValidationResult.failure(ROOT_NOT_OBJECT)

    registry = build_registry(document)
    findings = validate_tree(document, registry)
    token_count = count_tokens(document)

    logger.debug(
        "Validated %d tokens (%d registered): %d errors, %d warnings",
        token_count,
        len(registry),
        len(findings.errors),
        len(findings.warnings),
    )

    return ValidationResult(
        valid=not findings.has_errors,
        errors=findings.errors,
        warnings=findings.warnings,
        token_count=token_count,
    )


def validate_tokens(raw_text: str | None) -> ValidationResult:
    """
    Validate a token document given as JSON text.

    Args:
        raw_text: JSON text of the document.

    Returns:
        ValidationResult; parse failures are reported as a single error.
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        return ValidationResult.failure(EMPTY_INPUT)

    try:
        document = parse_document(raw_text)
    except (ValueError, RecursionError) as e:
        logger.debug("Rejected unparsable input: %s", e)
        return ValidationResult.failure(f"Invalid JSON: {e}")

    # Emptiness is judged on the text; any parsed non-object (null, 0, "") is a bad root.
    if not isinstance(document, dict):
        return ValidationResult.failure(ROOT_NOT_OBJECT)

    return validate_tokens_object(document)


def run_validate_text(inp: ValidateTextInput) -> ValidationResult:
    """Validate raw JSON text."""
    return validate_tokens(inp.raw_text)


def run_validate_document(inp: ValidateDocumentInput) -> ValidationResult:
    """Validate a parsed document."""
    return validate_tokens_object(inp.document)


def run(inp: ValidateTextInput | ValidateDocumentInput) -> ValidationResult:
    """
    Component entry point.

    Dispatches to text or document validation based on input type.
    """
    if isinstance(inp, ValidateTextInput):
        return run_validate_text(inp)
    return run_validate_document(inp)
