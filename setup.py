from setuptools import setup, find_namespace_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="copyguard",
    version="0.1.0",
    description="Checks that files changed on a branch carry an up to date copyright year",
    python_requires=">=3.11",
    packages=find_namespace_packages(include=["copyguard", "copyguard.*"]),
    py_modules=["check_copyright"],
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
)
