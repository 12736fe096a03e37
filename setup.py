# setup.py
from setuptools import setup, find_packages

setup(
    name="tenet",
    version="0.1.0",
    description="A small, non-Turing-complete Lisp-style DSL for business rules",
    packages=find_packages(include=["tenet", "tenet.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
