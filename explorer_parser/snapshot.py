"""
Loading saved page snapshots from disk.

Snapshots saved from a browser ("Save page as…", or the CLI's --save-html)
declare their charset in a <meta> tag; the file is decoded with that
charset, after the WHATWG relabelling browsers apply.
"""

import re
from pathlib import Path
from typing import Union

from .logger import get_module_logger

logger = get_module_logger("snapshot")

# https://encoding.spec.whatwg.org/#names-and-labels
WHATWG_CHARSET_MAP = {
    'iso-8859-1': 'windows-1252',
    'iso8859-1': 'windows-1252',
    'latin-1': 'windows-1252',
    'latin1': 'windows-1252',
    'us-ascii': 'windows-1252',
    'ascii': 'windows-1252',
}

META_CHARSET = re.compile(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', re.IGNORECASE)


def detect_charset(raw_bytes: bytes) -> str:
    """Charset from the first 2KB of the document, 'utf-8' if undeclared."""
    head = raw_bytes[:2048].decode('ascii', errors='ignore')
    m = META_CHARSET.search(head)
    if not m:
        return 'utf-8'
    charset = m.group(1).strip().lower()
    return WHATWG_CHARSET_MAP.get(charset, charset)


def load_snapshot(file_path: Union[str, Path]) -> str:
    file_path = Path(file_path)
    raw_bytes = file_path.read_bytes()
    charset = detect_charset(raw_bytes)
    try:
        html = raw_bytes.decode(charset, errors='replace')
    except LookupError:
        logger.warning(f"Unknown charset '{charset}' in {file_path.name}, using utf-8")
        html = raw_bytes.decode('utf-8', errors='replace')
    logger.debug(f"Loaded {file_path.name} ({charset}, {len(html):,} chars)")
    return html


def save_snapshot(html: str, file_path: Union[str, Path]) -> Path:
    file_path = Path(file_path)
    file_path.write_text(html, encoding='utf-8')
    logger.info(f"Snapshot saved to {file_path}")
    return file_path
