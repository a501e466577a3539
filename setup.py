"""
Setup configuration for the project.
Allows the package to be installed in development mode.
"""

from setuptools import setup, find_packages

setup(
    name="creational-patterns",
    version="1.0.0",
    description="Object-creation design pattern examples: abstract factory, factory method, builder, singleton",
    author="Creational Patterns Contributors",
    packages=find_packages(include=["creational", "creational.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "creational=creational.cli:main",
        ],
    },
    python_requires=">=3.8",
)
