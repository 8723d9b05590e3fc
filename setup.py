#! /usr/bin/env python3

import io
import os

from setuptools import setup


def build_all():
    packages = [
        "mcrdis",
        "mcrdis.core",
        "mcrdis.arch",
        "mcrdis.arch.arm",
        "mcrdis.analysis",
    ]
    setup(
        name = "mcrdis",
        version = __import__("mcrdis").VERSION,
        packages = packages,
        install_requires=["pyparsing>=3.0"],
        extras_require={
            "test": ["parameterized", "pytest"],
        },
        entry_points={
            "console_scripts": [
                "mcrdis=mcrdis.analysis.cli:main",
            ],
        },
        # Metadata
        description = "ARM MCR/MRC coprocessor register decoder",
        license = "GPLv2",
        long_description=long_description,
        long_description_content_type=long_description_content_type,
        keywords = [
            "reverse engineering",
            "disassembler",
            "arm",
            "coprocessor",
        ],
        classifiers=[
            "Programming Language :: Python :: 3",
        ],
        python_requires=">=3.6",
    )


with io.open(os.path.join(os.path.abspath(os.path.dirname(__file__)),
                       "README.md"), encoding="utf-8") as fdesc:
    long_description = fdesc.read()
long_description_content_type = "text/markdown"

build_all()
