"""
Setup script for the community-board project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="community-board",
    version="0.3.0",
    packages=find_packages(include=["frontend", "frontend.*", "src", "src.*"]),
    py_modules=["version"],
    package_data={
        "frontend": ["templates/*.html", "templates/partials/*.html"],
    },
    install_requires=[
        "flask>=3.0",
        "requests>=2.31",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-mock>=3.12",
        ],
    },
    python_requires=">=3.11",
)
