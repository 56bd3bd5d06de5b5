""" k1ecdsa build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import k1ecdsa

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=k1ecdsa.name,
    version=k1ecdsa.__version__,
    license=k1ecdsa.__license__,
    author=k1ecdsa.__author__,
    author_email=k1ecdsa.__author_email__,
    description="ECDSA over secp256k1 with recoverable signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json", "pycryptodome"],
    extras_require={"test": ["pytest", "coincurve", "eth-hash[pycryptodome]"]},
    keywords=(
        "cryptography elliptic-curves secp256k1 ecdsa RFC-6979 "
        "low-s recoverable-signature public-key-recovery ethereum"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
