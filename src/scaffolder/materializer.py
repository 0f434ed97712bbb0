"""Filesystem materialisation of rendered templates.

Creates directories, writes rendered files with unconditional overwrite, and
applies line-anchored patch directives. Blocking file-system calls run in a
worker thread so the orchestrator's event loop stays responsive.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .errors import AnchorNotFoundError, MaterializeError, PatchError
from .models import PatchDirective, RenderedFile


class FilesystemMaterializer:
    """Turns rendered text into files and directories on disk.

    Every operation takes an explicit path; nothing depends on the process
    working directory.
    """

    async def create_dir(self, path: str | Path) -> Path:
        """Create *path* and any missing parents. Existing directories are left alone."""
        target = Path(path)
        try:
            await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializeError(target, f"cannot create directory: {exc}") from exc
        return target

    async def write(self, path: str | Path, content: str) -> Path:
        """Write *content* to *path*, creating ancestors and overwriting any existing file."""
        target = Path(path)
        try:
            await asyncio.to_thread(_write_file, target, content)
        except OSError as exc:
            raise MaterializeError(target, f"cannot write file: {exc}") from exc
        return target

    async def write_rendered(self, rendered: RenderedFile) -> Path:
        return await self.write(rendered.target_path, rendered.content)

    async def patch(self, directive: PatchDirective) -> bool:
        """Insert the directive's lines after the first line equal to its anchor.

        The check-then-insert makes re-application safe: when ``inserted_lines``
        already appears as a contiguous block anywhere after the anchor the file
        is left as is, so several directives may share one anchor. Line endings
        are preserved; inserted lines take CRLF when the file uses it.

        Returns:
            ``True`` if the file was modified, ``False`` if the block was
            already present.

        Raises:
            AnchorNotFoundError: No line equals the anchor; the file is untouched.
            PatchError: The target file cannot be read or written.
        """
        return await asyncio.to_thread(_apply_patch, directive)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _apply_patch(directive: PatchDirective) -> bool:
    path = Path(directive.target_path)
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PatchError(path, f"cannot read file: {exc}") from exc

    # Split on "\n" only so CRLF endings and any other separators survive the rewrite.
    lines = text.split("\n")
    bare = [line[:-1] if line.endswith("\r") else line for line in lines]
    try:
        anchor_index = bare.index(directive.anchor_line)
    except ValueError:
        raise AnchorNotFoundError(path, directive.anchor_line) from None

    block = list(directive.inserted_lines)
    if _contains_block(bare[anchor_index + 1 :], block):
        return False

    if "\r\n" in text:
        block = [line + "\r" for line in block]
        if anchor_index == len(lines) - 1:
            # Anchor is the unterminated last line: terminate it, leave the block unterminated.
            lines[anchor_index] += "\r"
            block[-1] = block[-1][:-1]
    lines[anchor_index + 1 : anchor_index + 1] = block
    try:
        path.write_bytes("\n".join(lines).encode("utf-8"))
    except OSError as exc:
        raise PatchError(path, f"cannot write file: {exc}") from exc
    return True


def _contains_block(lines: list[str], block: list[str]) -> bool:
    size = len(block)
    return any(lines[i : i + size] == block for i in range(len(lines) - size + 1))
