# setup.py
from setuptools import setup, find_packages

setup(
    name="crisp",
    version="0.1.0",
    description="A minimal Lisp-family language kernel",
    packages=find_packages(include=["crisp", "crisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["crisp = crisp.__main__:main"],
    },
    zip_safe=False,
)
