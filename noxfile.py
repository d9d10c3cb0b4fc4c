# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.
# type: ignore

import shutil
import configparser
from functools import partial
from pathlib import Path
import nox


ROOT_DIR = Path(__file__).resolve().parent

CONFIG = configparser.ConfigParser()
CONFIG.read(ROOT_DIR / "setup.cfg")
EXTRAS_REQUIRE = dict(CONFIG["options.extras_require"])
assert EXTRAS_REQUIRE, "Config could not be read correctly"

PYTHONS = ["3.9", "3.10", "3.11", "3.12"]
"""The newest supported Python shall be listed last."""

nox.options.error_on_external_run = True


@nox.session(python=False)
def clean(session):
    wildcards = [
        "dist",
        "build",
        "html*",
        ".coverage*",
        ".*cache",
        "*.egg-info",
        "*.log",
        ".nox",
    ]
    for w in wildcards:
        for f in Path.cwd().glob(w):
            session.log(f"Removing: {f}")
            shutil.rmtree(f, ignore_errors=True)


MYPY_VERSION = "1.10"


@nox.session(reuse_venv=True)
def mypy(session):
    session.install("-e", ".")
    session.install("mypy == " + MYPY_VERSION, "pytest ~= 7.1")
    session.run(
        "mypy",
        "--config-file",
        str(ROOT_DIR / "setup.cfg"),
        "--strict",
        str(ROOT_DIR / "pyendian"),
        str(ROOT_DIR / "tests"),
    )


@nox.session(python=PYTHONS, reuse_venv=True)
def test(session):
    session.log("Using the newest supported Python: %s", is_latest_python(session))
    session.install("-e", f".[{','.join(EXTRAS_REQUIRE.keys())}]")

    # The test suite writes a log file and coverage data, so we change the working directory.
    # We have to symlink the original setup.cfg as well if we run tools from the new directory.
    tmp_dir = Path(session.create_tmp()).resolve()
    session.cd(tmp_dir)
    fn = "setup.cfg"
    if not (tmp_dir / fn).exists():
        (tmp_dir / fn).symlink_to(ROOT_DIR / fn)

    src_dirs = [
        ROOT_DIR / "pyendian",
        ROOT_DIR / "tests",
    ]
    pytest = partial(session.run, "coverage", "run", "-m", "pytest")
    pytest(*map(str, src_dirs))

    # Coverage analysis and report.
    fail_under = 0 if session.posargs else 90
    session.run("coverage", "combine")
    session.run("coverage", "report", f"--fail-under={fail_under}")
    if session.interactive:
        session.run("coverage", "html")
        report_file = Path.cwd().resolve() / "htmlcov" / "index.html"
        session.log(f"COVERAGE REPORT: file://{report_file}")


def is_latest_python(session) -> bool:
    return PYTHONS[-1] in session.run("python", "-V", silent=True)
