#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys
from pathlib import Path
from bs4 import BeautifulSoup

from preset_config import PRESET_NAME_META, MOD_CONTAINER, DISPLAY_NAME, LINK_FIELD, DEFAULT_PRESET_NAME
from preset_errors import UnparseableInputError

# html5lib builds the same tree a browser does, including rows with omitted end tags.
PARSER = "html5lib"

def decode_document(document):
    """Returns the document as text. Only input that cannot be text at all is rejected."""
    if isinstance(document, str): return document
    if isinstance(document, (bytes, bytearray)):
        try:
            return bytes(document).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise UnparseableInputError(f"Input is not UTF-8 text: {e}") from e
    raise UnparseableInputError(f"Expected document text, got {type(document).__name__}")

def extract_mod(row):
    """Reads one ModContainer row. A missing cell yields an empty field."""
    name_cell = row.select_one(f'td[data-type="{DISPLAY_NAME}"]')
    span = row.find("span")
    anchor = row.select_one(f'a[data-type="{LINK_FIELD}"]')
    return {
        "name": name_cell.get_text().strip() if name_cell else "",
        "source": span.get_text().strip() if span else "",
        "link": (anchor.get("href") or "") if anchor else ""
    }

def parse_preset(document):
    """
    Parses an Arma 3 Launcher preset into {preset_name, mods, original_html}.

    Rows without a display name are dropped. Duplicate rows are kept as found;
    use preset_ops.unique_by_name to collapse them.
    """
    text = decode_document(document)
    soup = BeautifulSoup(text, PARSER)

    meta = soup.find("meta", attrs={"name": PRESET_NAME_META})
    preset_name = meta.get("content") if meta else None
    if preset_name is None: preset_name = DEFAULT_PRESET_NAME

    mods = []
    for row in soup.select(f'tr[data-type="{MOD_CONTAINER}"]'):
        mod = extract_mod(row)
        if mod["name"]: mods.append(mod)

    return {"preset_name": preset_name, "mods": mods, "original_html": text}

def load_preset_file(file_path):
    path = Path(file_path)
    preset = parse_preset(path.read_bytes())
    preset["file_name"] = path.name
    return preset

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: preset_parser.py <preset.html>")
        sys.exit(1)
    p = load_preset_file(sys.argv[1])
    print(f"📦 {p['preset_name']} ({os.path.basename(sys.argv[1])}): {len(p['mods'])} mods")
    for m in p["mods"]:
        print(f" • {m['name']}" + (f" [{m['source']}]" if m["source"] else "") + (f" {m['link']}" if m["link"] else ""))
