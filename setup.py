"""Build configuration for benchroute."""
from setuptools import find_packages, setup

setup(
    name="benchroute",
    version="0.1.0",
    description="Fixed-path request dispatcher with a synthetic CPU/memory/I/O benchmark page.",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"benchroute": ["templates/*.html"]},
    install_requires=[
        "click>=8.0",
        "Jinja2>=3.0",
        "Werkzeug>=2.3",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["benchroute=benchroute.cli:main"],
    },
)
