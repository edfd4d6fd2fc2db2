#!/usr/bin/env python3
"""
Setup script for Record Finder package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="record-finder",
    version="1.0.0",
    author="Record Finder Team",
    author_email="team@example.com",
    description="Find DNS records pointing at a value across all Route53 hosted zones",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/record-finder",
    packages=find_packages(include=["record_finder", "record_finder.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Systems Administration",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["behave>=1.2.6", "pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "record-finder=record_finder.cli.main:main",
        ],
    },
    include_package_data=True,
)
