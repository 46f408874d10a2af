from setuptools import setup, find_packages

setup (
    name = "tonal",
    version = "0.1.0",
    description = "Tonal pitch and interval arithmetic that keeps enharmonic spellings apart.",
    long_description = open ( 'README.md' ).read ( ),
    long_description_content_type = "text/markdown",
    package_dir = { "": "src" },
    packages = find_packages ( "src" ),
    install_requires = [
        "numpy",
        "pyrsistent",
        "bidict",
    ],
    extras_require = {
        "test": [ "pytest" ],
    },
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    python_requires = ">=3.12",
)
