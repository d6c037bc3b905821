"""
File Driver: run the pipeline over files and collect per-file results.

Files are independent, so a run may fan out over a thread pool. One
file failing never stops the others.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from allways.exceptions import AllwaysError
from allways.logging_config import logger
from allways.mutation.editor import SourceEditor
from allways.pipeline import process_source
from allways.schemas import FileResult, RunSummary


def process_file(
    path: Union[str, Path],
    write: bool = True,
    with_diff: bool = False,
    editor: Optional[SourceEditor] = None,
) -> FileResult:
    """
    Synchronize the __all__ block of one file.

    Args:
        path: File to process
        write: Write the new text back when it differs
        with_diff: Attach a unified diff of the change to the result
        editor: SourceEditor to use (a fresh one by default)

    Returns:
        FileResult with status modified, unchanged or failed
    """
    editor = editor or SourceEditor()
    file_path = str(path)

    try:
        source = editor.read(file_path)
        result = process_source(source, file_path)
        if not result.changed:
            logger.debug(f"Unchanged: {file_path}")
            return FileResult(path=file_path, status="unchanged", names=result.names)

        diff = editor.generate_unified_diff(file_path, source, result.text) if with_diff else None
        if write:
            editor.write(file_path, result.text)
            logger.info(f"Updated __all__ in {file_path}")
    except AllwaysError as e:
        logger.debug(f"Failed: {e}")
        return FileResult(path=file_path, status="failed", error_code=e.code, error=str(e))

    return FileResult(
        path=file_path,
        status="modified",
        names=result.names,
        added=result.added,
        removed=result.removed,
        diff=diff,
    )


def process_files(
    paths: Iterable[Union[str, Path]],
    write: bool = True,
    with_diff: bool = False,
    workers: int = 1,
) -> RunSummary:
    """
    Process every path and aggregate the results in input order.

    Args:
        paths: Files to process
        write: Write changed files back
        with_diff: Attach unified diffs to modified results
        workers: Number of parallel workers (1 runs sequentially)
    """
    paths = list(paths)
    editor = SourceEditor()

    def run(path) -> FileResult:
        return process_file(path, write=write, with_diff=with_diff, editor=editor)

    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(paths))) as executor:
            results = list(executor.map(run, paths))
    else:
        results = [run(path) for path in paths]

    summary = RunSummary(results=results)
    logger.debug(
        f"Processed {len(results)} files: {len(summary.modified)} modified, "
        f"{len(summary.unchanged)} unchanged, {len(summary.failed)} failed"
    )
    return summary
