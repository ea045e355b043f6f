from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_namespace_packages, setup


loader = SourceFileLoader("coffeez", "./src/coffeez/__init__.py")
coffeez = ModuleType(loader.name)
loader.exec_module(coffeez)

setup(
    name="coffeez",
    version=coffeez.__version__,  # type: ignore
    description="Compile CoffeeScript to JavaScript with source maps.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["coffeez", "coffeez.*"]),
    entry_points={"console_scripts": ["coffeez=coffeez.cli:main"]},
    install_requires=[
        "appdirs",
        "closure",
        "CoffeeScript",
        "cyclopts",
        "pydantic>=2",
        "PyExecJS",
        "PyYAML",
        "rich",
        "watchdog",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
