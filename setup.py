""" ctlib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ctlib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ctlib.name,
    version=ctlib.__version__,
    license=ctlib.__license__,
    author=ctlib.__author__,
    author_email=ctlib.__author_email__,
    description="A toy library for confidential transactions with Pedersen commitments",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ctlib": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"tests": ["pytest"]},
    keywords=(
        "confidential-transactions pedersen-commitment homomorphic "
        "range-proof cryptography education"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
