"""
Statement Scanner: classify top-level statements of a Python module.

Only `module.body` is inspected; statements nested inside `if`, `try`,
function or class bodies are not scanned.
"""

import ast
from typing import List, Optional

from allways.exceptions import ParseFailure
from allways.logging_config import logger
from allways.schemas import ClassifiedStatement, StatementKind

EXPORT_LIST_NAME = "__all__"
BOM = "\ufeff"


def parse_module(source: str, filename: str = "<string>") -> ast.Module:
    """
    Parse source text into a module AST.

    A leading UTF-8 BOM is ignored for parsing only; callers keep
    the original text.

    Raises:
        ParseFailure: If the text is not valid Python or too deeply nested to parse.
    """
    if source.startswith(BOM):
        source = source[len(BOM):]
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise ParseFailure(filename, e.msg or str(e), e.lineno) from e
    except ValueError as e:
        # e.g. source containing null bytes
        raise ParseFailure(filename, str(e)) from e
    except (RecursionError, MemoryError) as e:
        raise ParseFailure(filename, f"source too deeply nested to parse ({type(e).__name__})") from e


def scan_statements(module: ast.Module) -> List[ClassifiedStatement]:
    """Classify each top-level statement of a parsed module, in source order."""
    statements = [classify_statement(node) for node in module.body]
    logger.debug(
        f"Scanned {len(statements)} top-level statements "
        f"({sum(1 for s in statements if s.kind != StatementKind.OTHER)} relevant)"
    )
    return statements


def classify_statement(node: ast.stmt) -> ClassifiedStatement:
    """Reduce one top-level statement to its kind and the names it carries."""
    lineno = getattr(node, "lineno", 0)

    if isinstance(node, ast.Import):
        names = [_bound_import_name(alias) for alias in node.names]
        return ClassifiedStatement(kind=StatementKind.IMPORT, lineno=lineno, names=names)

    if isinstance(node, ast.ImportFrom):
        # Star imports bind nothing we can name statically
        names = [alias.asname or alias.name for alias in node.names if alias.name != "*"]
        return ClassifiedStatement(kind=StatementKind.IMPORT_FROM, lineno=lineno, names=names)

    if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
        return ClassifiedStatement(kind=StatementKind.FUNCTION, lineno=lineno, names=[node.name])

    if isinstance(node, ast.ClassDef):
        return ClassifiedStatement(kind=StatementKind.CLASS, lineno=lineno, names=[node.name])

    listed = _export_list_values(node)
    if listed is not None:
        return ClassifiedStatement(kind=StatementKind.EXPORT_LIST, lineno=lineno, names=listed)

    return ClassifiedStatement(kind=StatementKind.OTHER, lineno=lineno)


def _bound_import_name(alias: ast.alias) -> str:
    """`import a.b.c` binds `a`; `import a.b as c` binds `c`."""
    if alias.asname:
        return alias.asname
    return alias.name.split(".", 1)[0]


def _export_list_values(node: ast.stmt) -> Optional[List[str]]:
    """
    Return the strings of an `__all__ = [...]` assignment, or None.

    Accepts a plain or annotated assignment to the bare name `__all__`
    whose value is a list or tuple made only of string literals.
    """
    if isinstance(node, ast.Assign):
        if len(node.targets) != 1:
            return None
        target = node.targets[0]
        value = node.value
    elif isinstance(node, ast.AnnAssign):
        target = node.target
        value = node.value
    else:
        return None

    if not (isinstance(target, ast.Name) and target.id == EXPORT_LIST_NAME):
        return None
    if not isinstance(value, (ast.List, ast.Tuple)):
        return None

    values = []
    for elt in value.elts:
        if not (isinstance(elt, ast.Constant) and isinstance(elt.value, str)):
            return None
        values.append(elt.value)
    return values
