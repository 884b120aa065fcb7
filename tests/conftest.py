import stat
import sys
import textwrap

import pytest

# Strips trailing spaces and tabs from every line; exits 3 on files that
# contain SYNTAX_ERROR so tests can exercise formatter failures. Files that
# contain WARN_AS_ERROR are echoed unchanged but the exit status is 1.
MOCK_FORMATTER = textwrap.dedent(
    """\
    #!{python}
    import sys

    with open(sys.argv[1], "rb") as f:
        data = f.read()
    if b"SYNTAX_ERROR" in data:
        sys.stderr.write("mock-format: syntax error\\n")
        sys.exit(3)
    if b"WARN_AS_ERROR" in data:
        sys.stdout.buffer.write(data)
        sys.exit(1)
    lines = data.split(b"\\n")
    sys.stdout.buffer.write(b"\\n".join(line.rstrip(b" \\t") for line in lines))
    """
)


@pytest.fixture
def mock_formatter(tmp_path):
    script = tmp_path / "bin" / "mock-format"
    script.parent.mkdir()
    script.write_text(MOCK_FORMATTER.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.cpp").write_bytes(b"int main() { return 0; }\n")
    (root / "b.h").write_bytes(b"#pragma once   \nint f();\n")
    (root / "c.txt").write_bytes(b"notes   \n")
    return root
