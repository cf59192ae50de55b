""" blindsig build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import blindsig

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=blindsig.name,
    version=blindsig.__version__,
    license=blindsig.__license__,
    author=blindsig.__author__,
    author_email=blindsig.__author_email__,
    description="RSA blind signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest", "pycryptodome"]},
    keywords=(
        "rsa blind-signature chaum cryptography crt pkcs1 "
        "anonymous-credentials e-voting"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
