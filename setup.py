from setuptools import setup, find_packages
from pathlib import Path

# --- Automated Script Discovery ---

HERE = Path(__file__).parent.resolve()
CLI_DIR = HERE / "tv_info" / "cli"


def discover_console_scripts() -> list[str]:
    """
    Build console-script entry points for every .py in tv_info/cli/.
    Command name  : file-stem with underscores → dashes  (browse_shows -> browse-shows)
    Entry point   : 'tv_info.cli.<module>:main'
    """
    if not CLI_DIR.exists():
        return []
    entries = []
    for path in CLI_DIR.glob("*.py"):
        if path.name == "__init__.py":
            continue
        cmd  = path.stem.replace("_", "-")
        mod  = f"tv_info.cli.{path.stem}"
        entries.append(f"{cmd} = {mod}:main")
    return entries


def parse_requirements(fname: str = "requirements.txt") -> list[str]:
    """
    Return a list of PEP-508 requirement strings taken from *fname*.
    Ignores blank lines and comments that start with '#'.
    """
    req_path = Path(__file__).with_name(fname)
    if not req_path.exists():
        return []

    lines = req_path.read_text().splitlines()
    reqs  = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue            # skip comments / empty lines
        reqs.append(line)
    return reqs


_ = setup(
    name="tv_info",
    version="1.0",
    description="Interactive TMDB browser for TV shows, seasons and episodes.",
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Entry points for Python console scripts
    entry_points = {
        "console_scripts": discover_console_scripts(),
    },

    python_requires=">=3.10",
    install_requires=parse_requirements(),
    extras_require={
        "test": parse_requirements("requirements-test.txt"),
    },
)
