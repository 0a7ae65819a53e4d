#!/usr/bin/env python3

from setuptools import find_packages, setup

version = {}
with open("./version_checker/_version.py") as f:
    exec(f.read(), version)

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="version-checker",
    version=version["__version__"],
    license="Apache-2.0",
    description="Check a Cargo manifest's dependencies for newer releases and security advisories",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["test", "test.*"]),
    entry_points={
        "console_scripts": [
            "version-checker = version_checker._cli:check",
        ]
    },
    platforms="any",
    python_requires=">=3.9",
    install_requires=[
        "packaging>=21.0.0",
        "requests>=2.25",
        "rich>=12.4",
        "toml>=0.10",
    ],
    extras_require={
        "dev": [
            "flake8",
            "black",
            "isort",
            "pytest",
            "pytest-cov",
            "pretend",
            "coverage[toml]",
            "mypy",
            "types-requests",
            "types-toml",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Topic :: Security",
    ],
)
