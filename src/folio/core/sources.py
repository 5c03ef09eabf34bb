"""Post discovery and reading from the content directory"""

from pathlib import Path

from folio.core.models import RawDocument


MD_EXTENSIONS = {'.md'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md files directly under path, or [path] if a single .md file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix in MD_EXTENSIONS)


def read_document(path: Path) -> RawDocument:
    """Read a single post file as UTF-8; I/O errors propagate unchanged."""
    return RawDocument(name=path.name, text=path.read_text(encoding='utf-8'))
