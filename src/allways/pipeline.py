"""
The per-file pipeline as a pure function of the source text:

    parse -> scan -> collect -> filter -> reconcile -> rewrite
"""

from allways.logging_config import logger
from allways.mutation.rewriter import rewrite_source
from allways.parser import (
    collect_names,
    existing_export_names,
    filter_public,
    parse_module,
    scan_statements,
)
from allways.reconcile import reconcile
from allways.schemas import ProcessResult, ReconcileResult, StatementKind


def compute_exports(source: str, filename: str = "<string>") -> ReconcileResult:
    """
    Run parse through reconcile and return the ReconcileResult.

    Raises:
        ParseFailure: If the source is not valid Python
    """
    module = parse_module(source, filename)
    statements = scan_statements(module)

    candidates = filter_public(collect_names(statements))
    if any(s.kind == StatementKind.EXPORT_LIST for s in statements):
        existing = existing_export_names(statements)
    else:
        existing = None

    return reconcile(candidates, existing)


def process_source(source: str, filename: str = "<string>") -> ProcessResult:
    """
    Compute the new text of a module with its __all__ block synchronized.

    Running this on its own output returns the same text unchanged.

    Raises:
        ParseFailure: If the source is not valid Python
        MalformedMarkerError: If the allways markers do not pair up
    """
    exports = compute_exports(source, filename)
    new_text, created = rewrite_source(source, exports.names, filename)
    changed = new_text != source

    logger.debug(
        f"{filename}: {len(exports.names)} exported names, "
        f"{'changed' if changed else 'unchanged'}"
    )

    return ProcessResult(
        text=new_text,
        changed=changed,
        names=exports.names,
        added=exports.added if changed else [],
        removed=exports.removed if changed else [],
        block_created=created,
    )
