import os

import pytest

NL = os.linesep

HEADER_LINES = [
    "/**",
    " *    Copyright 2013 Example Authors",
    " *",
    " *    Licensed under the Apache License, Version 2.0 (the \"License\");",
    " *    you may not use this file except in compliance with the License.",
    " */",
]
HEADER = NL.join(HEADER_LINES) + NL

# Same first line as HEADER, different body (e.g. another copyright year).
DIFFERENT_HEADER = NL.join([HEADER_LINES[0], " *    Copyright 2009 Someone Else", " */"]) + NL

JAVA_BODY = "package example;" + NL + NL + "public class Thing {}" + NL
TEXT_BODY = "plain text" + NL

LAYOUT = {
    "subA/subA1": ["Header.java", "NoHeader.java", "DifferentHeader.java",
                   "header.txt", "no-header.txt", "different-header.txt"],
    "subA/subA2": ["Header.java", "NoHeader.java", "DifferentHeader.java",
                   "header.txt", "no-header.txt", "different-header.txt"],
    "subB": ["Header.java", "NoHeader.java", "header.txt", "no-header.txt"],
    "subC/subC1": ["Header.java", "NoHeader.java", "header.txt", "no-header.txt"],
}


def write_raw(path, text):
    """Write text exactly as given, with no newline translation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def read_raw(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def content_for(name):
    body = JAVA_BODY if name.endswith(".java") else TEXT_BODY
    if name.lower().startswith("header"):
        return HEADER + body
    if name.lower().startswith("different"):
        return DIFFERENT_HEADER + body
    return body


@pytest.fixture
def header_file(tmp_path):
    path = tmp_path / "apache2-licence-java-header.txt"
    write_raw(path, HEADER)
    return path


@pytest.fixture
def tree(tmp_path):
    """Build the sample source tree and return its root."""
    root = tmp_path / "root"
    for sub, names in LAYOUT.items():
        for name in names:
            write_raw(root / sub / name, content_for(name))
    (root / "emptySub").mkdir(parents=True)
    return root


@pytest.fixture
def snapshot():
    """Capture content, size and mtime of every file under a directory."""
    def _snap(root):
        out = {}
        for dirpath, _dirs, files in os.walk(root):
            for name in files:
                p = os.path.join(dirpath, name)
                st = os.stat(p)
                with open(p, "rb") as f:
                    data = f.read()
                out[p] = (data, st.st_size, st.st_mtime_ns)
        return out
    return _snap
