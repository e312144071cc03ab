# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="forklisp",
    version="0.1.0",
    description="Minimal Lisp evaluator with a trampolined core and fork-join argument evaluation",
    packages=find_namespace_packages(include=["forklisp", "forklisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["forklisp=forklisp.__main__:main"],
    },
    zip_safe=False,
)
