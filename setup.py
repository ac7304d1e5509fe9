#!/usr/bin/env python
# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
""" setup script """

import sys

from setuptools import find_packages, setup

# Give setuptools a hint to complain if it's too old a version
# Should match pyproject.toml
setup_requires = ["setuptools >= 61"]
# This enables setuptools to install wheel on-the-fly
setup_requires += ["wheel"] if "bdist_wheel" in sys.argv else []

with open("requirements.in", "rt") as requirements_file_handle:
    install_requires = list()
    for requirement in requirements_file_handle.readlines():
        requirement = requirement.strip()

        if not requirement or requirement.startswith("#"):
            continue

        install_requires.append(requirement)

tests_require = ["pytest >= 7"]

if __name__ == "__main__":
    setup(
        name="dashfilters",
        version="0.1.0",
        description="Representation, compression and pruning of dashboard filter rules",
        python_requires=">=3.11",
        package_dir={"": "src"},
        packages=find_packages("src"),
        setup_requires=setup_requires,
        install_requires=install_requires,
        extras_require={"test": tests_require},
    )
