# setup.py
from setuptools import setup, find_packages

setup(
    name="zenlisp",
    version="0.1.0",
    description="A small Lisp-like expression language for rule evaluation",
    python_requires=">=3.10",
    packages=find_packages(include=["zenlisp", "zenlisp.*"]),
    package_data={"zenlisp": ["prelude/*.zl"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
