from __future__ import annotations

import io
from pathlib import Path

from filekit import TailConfig, tail_files
from filekit.testing import generate_input_files


def _tail(paths: list[Path], **kw: object) -> bytes:
    out = io.BytesIO()
    config = TailConfig.from_tokens([str(p) for p in paths], quiet=True, **kw)
    assert tail_files(config, out, io.StringIO()) == 0
    return out.getvalue()


def test_generated_inputs_tail(tmp_path: Path) -> None:
    for rel, content in generate_input_files(seed=1, count=40):
        p = tmp_path / rel
        p.write_bytes(content)
        lines = io.BytesIO(content).readlines()

        # Generated text is valid UTF-8, so both modes reproduce it from +0.
        assert _tail([p], lines_token="+0") == content
        assert _tail([p], bytes_token="+0") == content

        for n in (1, 7, len(lines) + 5):
            assert _tail([p], lines_token=str(n)) == b"".join(lines[-n:])
            assert _tail([p], lines_token=f"+{n}") == b"".join(lines[n - 1 :])

        for n in (1, 13, len(content) + 1):
            expected = content[-n:].decode("utf-8", errors="replace").encode("utf-8")
            assert _tail([p], bytes_token=f"-{n}") == expected


def test_generated_inputs_concatenate_in_order(tmp_path: Path) -> None:
    files = generate_input_files(seed=2, count=10)
    paths = []
    for rel, content in files:
        p = tmp_path / rel
        p.write_bytes(content)
        paths.append(p)
    assert _tail(paths, lines_token="+1") == b"".join(c for _, c in files)


def test_generated_inputs_are_deterministic() -> None:
    assert generate_input_files(seed=3, count=5) == generate_input_files(seed=3, count=5)
    assert generate_input_files(seed=3, count=5) != generate_input_files(seed=4, count=5)
