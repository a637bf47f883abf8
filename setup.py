import os
from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))


def readme():
    with open(os.path.join(here, "README.md")) as f:
        return f.read()


with open(os.path.join(here, "VERSION")) as f:
    pkgversion = f.read().strip()


setup(
    name = "moresuits",
    version = pkgversion,
    description = "Export game materials to More Suits skin descriptors",
    long_description = readme(),
    long_description_content_type = "text/markdown",
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)"
    ],
    license = "GPLv3",
    python_requires = ">=3.8",
    packages = [
        "moresuits",
        "moresuits.common",
    ],
    install_requires = [
        "numpy",
    ],
    extras_require = {
        "test": [
            "pytest",
        ],
    },
    entry_points = {
        "console_scripts": [
            "moresuits = moresuits.cli:main",
        ]
    },
    zip_safe = False
)
