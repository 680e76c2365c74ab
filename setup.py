# -*- coding: utf-8 -*-
"""Install pkpending

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""
import setuptools


setuptools.setup(
    name="pkpending",
    version="20261019.0",
    description="Mark running examples pending or skipped",
    author="RadiaSoft LLC",
    author_email="pip@pykern.org",
    install_requires=[
        "pykern",
        "pytest>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "pytest11": [
            "pkpending = pkpending.pytest_plugin",
        ],
    },
    packages=["pkpending"],
    license="http://www.apache.org/licenses/LICENSE-2.0.html",
    url="http://pykern.org",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Topic :: Software Development :: Testing",
    ],
)
