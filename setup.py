from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("mdslides", "./mdslides/__init__.py")
mdslides = ModuleType(loader.name)
loader.exec_module(mdslides)

setup(
    name="mdslides",
    version=mdslides.__version__,  # type: ignore
    description="Turn a plain markdown file into a self-contained HTML slide deck.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    author="m09",
    python_requires=">=3.11",
    packages=find_packages(exclude=["tests"]),
    package_data={"mdslides": ["templates/*.jinja", "templates/lists/*.jinja"]},
    entry_points={"console_scripts": ["mdslides=mdslides.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts",
        "fastapi",
        "Jinja2",
        "pydantic>=2",
        "PyYAML",
        "rich",
        "uvicorn",
        "watchdog",
    ],
    extras_require={"test": ["httpx", "pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
