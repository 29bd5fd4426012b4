from pathlib import Path

import pytest

SAMPLE_CONF = """\
; application settings
# maintained by hand

[server]
host=0.0.0.0
port=8080
banner=Welcome = friend ; stays in the value

[database]
url=postgres://user:pw@localhost/app
pool size=10
"""


@pytest.fixture(scope="module")
def conf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample conf files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("conf")

    (dir_path / "app.conf").write_text(SAMPLE_CONF, encoding="utf-8")
    (dir_path / "dos.conf").write_bytes(SAMPLE_CONF.replace("\n", "\r\n").encode())
    (dir_path / "duplicate.conf").write_text("[a]\nx=1\n[a]\ny=2\n")
    (dir_path / "no_section.conf").write_text("# lonely\nx=1\n")

    return dir_path
