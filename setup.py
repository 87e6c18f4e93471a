# setup.py
from setuptools import setup, find_packages

setup(
    name="json-rules",                # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(include=["json_rules", "json_rules.*"]),
    install_requires=["email-validator"],
    python_requires=">=3.9",
    description="Path-addressed rule engine and schema evaluator for decoded JSON",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
